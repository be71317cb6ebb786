"""Recipe content records and their display counterpart."""

from pydantic import BaseModel, Field


class Ingredient(BaseModel):
    """One line of a recipe's ingredient list."""

    item: str = Field(min_length=1)
    quantity: int | float = Field(gt=0)


class Recipe(BaseModel):
    """A recipe as shipped in the content directory.

    JSON keys are camelCase (`sellPrice`, `recipeCategory`, `recipe`,
    `favouriteOf`); attributes are snake_case. Always serialize with
    `model_dump(by_alias=True)` to get the content-file shape back.
    Any `cooked`/`gifted` keys in a content file are ignored.
    """

    id: str
    name: str
    description: str = ""
    source: str = ""
    recipe_category: str = Field(default="", alias="recipeCategory")
    sell_price: int | float = Field(ge=0, alias="sellPrice")
    ingredients: list[Ingredient] = Field(alias="recipe")
    favourite_of: str | None = Field(default=None, alias="favouriteOf")

    model_config = {"populate_by_name": True, "extra": "ignore"}


class RecipeView(Recipe):
    """A recipe joined with the user's status, ready for display."""

    cooked: bool = False
    gifted: bool = False
