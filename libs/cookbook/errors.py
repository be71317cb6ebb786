"""Exception types raised by the cookbook library."""

from pathlib import Path


class CookbookError(Exception):
    """Base class for cookbook errors."""


class RecordError(CookbookError):
    """A content file could not be turned into a Recipe."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path.name}: {reason}")
        self.path = path
        self.reason = reason
