"""Unit tests for view and validation helpers."""

import pytest
from cookbook import (
    RecipeStatus,
    categories,
    favourite_characters,
    favourites_of,
    filter_recipes,
    load,
    sort_recipes,
    validate_record,
    with_statuses,
)

from conftest import ROAST_BEEF, write_record

# --- Join ---


class TestWithStatuses:
    def test_default_status(self, recipe_dir):
        views = with_statuses(load(recipe_dir), {})
        assert all(not v.cooked and not v.gifted for v in views)

    def test_roast_beef_example(self, recipe_dir):
        views = {v.id: v for v in with_statuses(load(recipe_dir), {})}
        beef = views["roast-beef"]
        assert beef.cooked is False
        assert beef.gifted is False
        assert beef.name == "Roast Beef"
        assert beef.sell_price == 120

    def test_statuses_applied(self, recipe_dir):
        statuses = {"berry-tart": RecipeStatus(cooked=True, gifted=True)}
        views = {v.id: v for v in with_statuses(load(recipe_dir), statuses)}
        assert views["berry-tart"].cooked and views["berry-tart"].gifted
        assert not views["roast-beef"].cooked

    def test_keeps_order_and_content(self, recipe_dir):
        recipes = load(recipe_dir)
        views = with_statuses(recipes, {})
        assert [v.id for v in views] == [r.id for r in recipes]
        assert views[0].ingredients == recipes[0].ingredients

    def test_orphaned_statuses_ignored(self, recipe_dir):
        views = with_statuses(load(recipe_dir), {"gone": RecipeStatus(cooked=True)})
        assert len(views) == 3


# --- Filtering ---


class TestFilterRecipes:
    @pytest.fixture
    def views(self, recipe_dir):
        return with_statuses(
            load(recipe_dir),
            {
                "roast-beef": RecipeStatus(cooked=True),
                "berry-tart": RecipeStatus(gifted=True),
            },
        )

    def _ids(self, views):
        return [v.id for v in views]

    def test_no_filters(self, views):
        assert len(filter_recipes(views)) == 3

    def test_query_matches_name_case_insensitive(self, views):
        assert self._ids(filter_recipes(views, query="ROAST")) == ["roast-beef"]

    def test_query_matches_ingredient(self, views):
        assert self._ids(filter_recipes(views, query="berries")) == ["berry-tart"]

    def test_query_matches_description(self, views):
        assert self._ids(filter_recipes(views, query="hearty")) == ["vegetable-soup"]

    def test_empty_query_is_inactive(self, views):
        assert len(filter_recipes(views, query="")) == 3

    def test_category(self, views):
        assert self._ids(filter_recipes(views, category="Soup")) == ["vegetable-soup"]

    def test_source(self, views):
        assert self._ids(filter_recipes(views, source="Bakery")) == ["berry-tart"]

    def test_favourite_of_case_insensitive(self, views):
        assert self._ids(filter_recipes(views, favourite_of="EDDA")) == [
            "berry-tart",
            "vegetable-soup",
        ]

    def test_cooked_true(self, views):
        assert self._ids(filter_recipes(views, cooked=True)) == ["roast-beef"]

    def test_cooked_false(self, views):
        assert self._ids(filter_recipes(views, cooked=False)) == [
            "berry-tart",
            "vegetable-soup",
        ]

    def test_gifted(self, views):
        assert self._ids(filter_recipes(views, gifted=True)) == ["berry-tart"]

    def test_combined(self, views):
        assert filter_recipes(views, category="Main", gifted=True) == []


# --- Sorting ---


class TestSortRecipes:
    def test_by_name(self, recipe_dir):
        views = sort_recipes(with_statuses(load(recipe_dir), {}))
        assert [v.name for v in views] == ["Berry Tart", "Roast Beef", "Vegetable Soup"]

    def test_by_sell_price(self, recipe_dir):
        views = sort_recipes(with_statuses(load(recipe_dir), {}), key="sellPrice")
        assert [v.sell_price for v in views] == [40, 85, 120]

    def test_by_sell_price_reverse(self, recipe_dir):
        views = sort_recipes(
            with_statuses(load(recipe_dir), {}), key="sell_price", reverse=True
        )
        assert [v.sell_price for v in views] == [120, 85, 40]

    def test_by_category(self, recipe_dir):
        views = sort_recipes(with_statuses(load(recipe_dir), {}), key="category")
        assert [v.recipe_category for v in views] == ["Dessert", "Main", "Soup"]

    def test_ties_broken_by_id(self, tmp_path):
        write_record(tmp_path, "b.json", ROAST_BEEF)
        write_record(tmp_path, "a.json", ROAST_BEEF)
        views = sort_recipes(with_statuses(load(tmp_path), {}))
        assert [v.id for v in views] == ["a", "b"]

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown sort key"):
            sort_recipes([], key="calories")


# --- Lookups ---


class TestLookups:
    def test_categories(self, recipe_dir):
        assert categories(load(recipe_dir)) == ["Dessert", "Main", "Soup"]

    def test_favourite_characters(self, recipe_dir):
        assert favourite_characters(load(recipe_dir)) == ["Edda", "edda"]

    def test_favourites_of(self, recipe_dir):
        ids = [r.id for r in favourites_of(load(recipe_dir), "Edda")]
        assert ids == ["berry-tart", "vegetable-soup"]

    def test_favourites_of_unknown(self, recipe_dir):
        assert favourites_of(load(recipe_dir), "Nobody") == []


# --- Validation ---


class TestValidateRecord:
    def test_valid(self):
        assert validate_record(ROAST_BEEF) == []

    def test_not_an_object(self):
        errors = validate_record(["a"])
        assert errors == ["record must be a JSON object, got list"]

    def test_negative_price(self):
        errors = validate_record({**ROAST_BEEF, "sellPrice": -1})
        assert any(e.startswith("sellPrice") for e in errors)

    def test_bad_ingredient_location(self):
        data = {**ROAST_BEEF, "recipe": [{"item": "", "quantity": 1}]}
        errors = validate_record(data)
        assert any(e.startswith("recipe.0.item") for e in errors)

    def test_blank_name(self):
        errors = validate_record({**ROAST_BEEF, "name": "  "})
        assert "name: should not be empty" in errors

    def test_missing_fields(self):
        errors = validate_record({"name": "Bare"})
        assert len(errors) == 2
