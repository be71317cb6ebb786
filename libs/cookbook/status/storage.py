"""Local key-value storage backends for persisted status.

Both backends expose the same small surface as a browser's localStorage:
string values under string keys, read and written synchronously.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class MemoryStorage:
    """In-process storage. Nothing survives the process."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage:
    """Storage backed by a single JSON file of `{key: value}` strings.

    The file is re-read on every access and replaced atomically on every
    write. A missing, unreadable or corrupt file reads as empty.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if key in items:
            del items[key]
            self._write(items)

    def _read(self) -> dict[str, str]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return {}
        except OSError as e:
            logger.warning("Cannot read state file %s: %s", self._path, e)
            return {}

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            logger.warning("Corrupt state file %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("State file %s does not hold an object", self._path)
            return {}
        return data

    def _write(self, items: dict[str, str]) -> None:
        """Write all items via a temp file so a crash never truncates state."""
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", dir=self._path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(items, fh, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            logger.error("Failed to write state file %s: %s", self._path, e)
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
