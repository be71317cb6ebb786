from cookbook.catalog.loader import (
    CONTENT_SUFFIX,
    content_files,
    load,
    parse_record,
    recipe_id_for,
)

__all__ = [
    "CONTENT_SUFFIX",
    "content_files",
    "load",
    "parse_record",
    "recipe_id_for",
]
