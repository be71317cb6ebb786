"""Join, filter and sort helpers for displaying the catalog."""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from cookbook.models.recipe import Recipe, RecipeView
from cookbook.models.status import AllRecipeStatuses, RecipeStatus

# Sort key name → attribute; camelCase content names are accepted too
_SORT_FIELDS: dict[str, str] = {
    "name": "name",
    "sellPrice": "sell_price",
    "sell_price": "sell_price",
    "recipeCategory": "recipe_category",
    "category": "recipe_category",
    "source": "source",
}


def with_statuses(
    recipes: Iterable[Recipe], statuses: AllRecipeStatuses
) -> list[RecipeView]:
    """Attach each recipe's cooked/gifted flags, defaulting to False."""
    views: list[RecipeView] = []
    for recipe in recipes:
        status = statuses.get(recipe.id, RecipeStatus())
        views.append(
            RecipeView(
                **recipe.model_dump(),
                cooked=status.cooked,
                gifted=status.gifted,
            )
        )
    return views


def _matches_query(view: RecipeView, query: str) -> bool:
    needle = query.casefold()
    haystack = [view.name, view.description]
    haystack.extend(ing.item for ing in view.ingredients)
    return any(needle in text.casefold() for text in haystack)


def filter_recipes(
    views: Iterable[RecipeView],
    *,
    query: str | None = None,
    category: str | None = None,
    source: str | None = None,
    favourite_of: str | None = None,
    cooked: bool | None = None,
    gifted: bool | None = None,
) -> list[RecipeView]:
    """Return the views matching every given filter. None means "any"."""
    checks: list[Callable[[RecipeView], bool]] = []
    if query:
        checks.append(lambda v: _matches_query(v, query))
    if category is not None:
        checks.append(lambda v: v.recipe_category == category)
    if source is not None:
        checks.append(lambda v: v.source == source)
    if favourite_of is not None:
        wanted = favourite_of.casefold()
        checks.append(
            lambda v: v.favourite_of is not None
            and v.favourite_of.casefold() == wanted
        )
    if cooked is not None:
        checks.append(lambda v: v.cooked is cooked)
    if gifted is not None:
        checks.append(lambda v: v.gifted is gifted)
    return [v for v in views if all(check(v) for check in checks)]


def sort_recipes(
    views: Iterable[RecipeView], key: str = "name", reverse: bool = False
) -> list[RecipeView]:
    """Sort views by a display field, breaking ties by id.

    Raises:
        ValueError: If the sort key is unknown.
    """
    attr = _SORT_FIELDS.get(key)
    if attr is None:
        raise ValueError(
            f"Unknown sort key {key!r}, expected one of {sorted(_SORT_FIELDS)}"
        )

    def _key(view: RecipeView) -> tuple[Any, str]:
        value = getattr(view, attr)
        if isinstance(value, str):
            value = value.casefold()
        return value, view.id

    return sorted(views, key=_key, reverse=reverse)


def categories(recipes: Iterable[Recipe]) -> list[str]:
    """Distinct non-empty categories, sorted."""
    return sorted({r.recipe_category for r in recipes if r.recipe_category})


def favourite_characters(recipes: Iterable[Recipe]) -> list[str]:
    """Distinct characters that favour at least one recipe, sorted."""
    return sorted({r.favourite_of for r in recipes if r.favourite_of})


def favourites_of(recipes: Sequence[Recipe], character: str) -> list[Recipe]:
    """Recipes the given character favours (case-insensitive)."""
    wanted = character.casefold()
    return [
        r
        for r in recipes
        if r.favourite_of is not None and r.favourite_of.casefold() == wanted
    ]
