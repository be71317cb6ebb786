"""Per-recipe status tracked on the user's side."""

from pydantic import BaseModel, TypeAdapter

# Namespace key of the persisted status blob
STORAGE_KEY = "recipeStatuses"


class RecipeStatus(BaseModel):
    """Whether the user has cooked and/or gifted a recipe."""

    cooked: bool = False
    gifted: bool = False

    model_config = {"frozen": True}


AllRecipeStatuses = dict[str, RecipeStatus]

STATUSES_ADAPTER: TypeAdapter[AllRecipeStatuses] = TypeAdapter(AllRecipeStatuses)
