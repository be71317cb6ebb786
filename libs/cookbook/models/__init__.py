from cookbook.models.recipe import Ingredient, Recipe, RecipeView
from cookbook.models.status import (
    STATUSES_ADAPTER,
    STORAGE_KEY,
    AllRecipeStatuses,
    RecipeStatus,
)

__all__ = [
    "AllRecipeStatuses",
    "Ingredient",
    "Recipe",
    "RecipeStatus",
    "RecipeView",
    "STATUSES_ADAPTER",
    "STORAGE_KEY",
]
