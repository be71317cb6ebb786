"""Catalog loader: turns a directory of JSON files into Recipes."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from cookbook.errors import RecordError
from cookbook.helpers.validation import format_errors
from cookbook.models.recipe import Recipe

logger = logging.getLogger(__name__)

CONTENT_SUFFIX = ".json"

# Derived at render time from the status store, never read from content
_STATUS_FIELDS = ("cooked", "gifted")


def recipe_id_for(path: str | Path) -> str:
    """Return the recipe id for a content file: its stem, lowercased.

    `static/recipes/Roast-Beef.json` → `roast-beef`
    """
    return Path(path).stem.lower()


def parse_record(path: str | Path) -> Recipe:
    """Read one content file and return its Recipe.

    Raises:
        RecordError: If the file cannot be read, decoded or validated.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RecordError(path, f"unreadable ({e.strerror or e})") from e
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        raise RecordError(path, f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise RecordError(
            path, f"expected a JSON object, got {type(data).__name__}"
        )

    carried = [f for f in _STATUS_FIELDS if f in data]
    if carried:
        logger.debug("Ignoring status fields %s in %s", carried, path.name)

    try:
        return Recipe.model_validate({**data, "id": recipe_id_for(path)})
    except ValidationError as e:
        raise RecordError(path, "; ".join(format_errors(e))) from e


def content_files(directory: str | Path) -> list[Path]:
    """List the content files directly inside a directory, sorted by name.

    Raises:
        OSError: If the directory cannot be listed.
    """
    directory = Path(directory)
    return sorted(
        p
        for p in directory.iterdir()
        if p.suffix.lower() == CONTENT_SUFFIX and p.is_file()
    )


def load(directory: str | Path) -> list[Recipe]:
    """Load every recipe in `directory`, ordered by id.

    Malformed files are skipped and logged. A missing or unreadable
    directory yields an empty catalog. When two files map to the same id,
    the later one (in filename order) wins.
    """
    directory = Path(directory)
    try:
        paths = content_files(directory)
    except OSError as e:
        logger.warning("Cannot read recipe directory %s: %s", directory, e)
        return []

    recipes: dict[str, Recipe] = {}
    skipped = 0
    for path in paths:
        try:
            recipe = parse_record(path)
        except RecordError as e:
            logger.warning("Skipping recipe file %s: %s", path.name, e.reason)
            skipped += 1
            continue
        if recipe.id in recipes:
            logger.warning(
                "Duplicate recipe id %r from %s replaces earlier record",
                recipe.id,
                path.name,
            )
        recipes[recipe.id] = recipe

    logger.info(
        "Loaded %d recipe(s) from %s (%d skipped)",
        len(recipes),
        directory,
        skipped,
    )
    return [recipes[recipe_id] for recipe_id in sorted(recipes)]
