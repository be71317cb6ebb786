"""Cookbook: recipe catalog loader and cooked/gifted status tracking."""

from cookbook.catalog import load, parse_record, recipe_id_for
from cookbook.errors import CookbookError, RecordError
from cookbook.helpers import (
    categories,
    favourite_characters,
    favourites_of,
    filter_recipes,
    sort_recipes,
    validate_record,
    with_statuses,
)
from cookbook.models import (
    STORAGE_KEY,
    AllRecipeStatuses,
    Ingredient,
    Recipe,
    RecipeStatus,
    RecipeView,
)
from cookbook.status import (
    JsonFileStorage,
    KeyValueStorage,
    MemoryStorage,
    StatusStore,
)

__all__ = [
    # Catalog
    "load",
    "parse_record",
    "recipe_id_for",
    # Status
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "StatusStore",
    # Models
    "AllRecipeStatuses",
    "Ingredient",
    "Recipe",
    "RecipeStatus",
    "RecipeView",
    "STORAGE_KEY",
    # Errors
    "CookbookError",
    "RecordError",
    # Helpers
    "categories",
    "favourite_characters",
    "favourites_of",
    "filter_recipes",
    "sort_recipes",
    "validate_record",
    "with_statuses",
]
