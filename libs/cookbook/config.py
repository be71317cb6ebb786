"""Environment-driven settings for the cookbook CLI.

Environment Variables:
- COOKBOOK_CONTENT_DIR: directory of recipe JSON files (default: static/recipes)
- COOKBOOK_STATE_FILE: JSON file of persisted statuses (default: .cookbook/state.json)
- COOKBOOK_LOG_LEVEL: logging level name (default: INFO)
"""

import os
from pathlib import Path

DEFAULT_CONTENT_DIR = "static/recipes"
DEFAULT_STATE_FILE = ".cookbook/state.json"
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def content_dir() -> Path:
    return Path(os.environ.get("COOKBOOK_CONTENT_DIR", DEFAULT_CONTENT_DIR))


def state_file() -> Path:
    return Path(os.environ.get("COOKBOOK_STATE_FILE", DEFAULT_STATE_FILE))


def log_level() -> str:
    """Logging level from the environment, INFO when unset or unknown."""
    level = os.environ.get("COOKBOOK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL
