from cookbook.helpers.validation import format_errors, validate_record
from cookbook.helpers.views import (
    categories,
    favourite_characters,
    favourites_of,
    filter_recipes,
    sort_recipes,
    with_statuses,
)

__all__ = [
    "categories",
    "favourite_characters",
    "favourites_of",
    "filter_recipes",
    "format_errors",
    "sort_recipes",
    "validate_record",
    "with_statuses",
]
