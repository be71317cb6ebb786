"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

ROAST_BEEF: dict[str, Any] = {
    "name": "Roast Beef",
    "sellPrice": 120,
    "recipe": [{"item": "Beef", "quantity": 2}],
    "recipeCategory": "Main",
    "source": "Cooking",
}


def write_record(directory: Path, filename: str, data: Any) -> Path:
    """Write a content file; strings are written verbatim, anything else as JSON."""
    path = directory / filename
    text = data if isinstance(data, str) else json.dumps(data)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def recipe_dir(tmp_path: Path) -> Path:
    """A content directory holding three valid recipes."""
    directory = tmp_path / "recipes"
    directory.mkdir()
    write_record(directory, "roast-beef.json", ROAST_BEEF)
    write_record(directory, "berry-tart.json", {
        "name": "Berry Tart",
        "description": "Buttery tart with berries",
        "sellPrice": 85,
        "recipe": [
            {"item": "Flour", "quantity": 1},
            {"item": "Wild Berries", "quantity": 3},
        ],
        "recipeCategory": "Dessert",
        "source": "Bakery",
        "favouriteOf": "Edda",
    })
    write_record(directory, "vegetable-soup.json", {
        "name": "Vegetable Soup",
        "description": "Hearty and warm",
        "sellPrice": 40,
        "recipe": [
            {"item": "Potato", "quantity": 2},
            {"item": "Onion", "quantity": 1},
        ],
        "recipeCategory": "Soup",
        "source": "Innkeeper",
        "favouriteOf": "edda",
    })
    return directory
