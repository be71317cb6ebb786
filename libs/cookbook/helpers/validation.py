"""Record validation utilities."""

from typing import Any

from pydantic import ValidationError

from cookbook.models.recipe import Recipe


def format_errors(exc: ValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into `loc: msg` strings."""
    errors: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err["loc"])
        errors.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return errors


def validate_record(data: Any) -> list[str]:
    """Validate a raw content record (a decoded JSON file).

    Returns a list of error strings. Empty list means valid.
    """
    if not isinstance(data, dict):
        return [f"record must be a JSON object, got {type(data).__name__}"]

    errors: list[str] = []

    # name is expected to carry text, even though empty strings still load
    name = data.get("name")
    if isinstance(name, str) and not name.strip():
        errors.append("name: should not be empty")

    try:
        # id comes from the file name, never from the record itself
        Recipe.model_validate({**data, "id": "_"})
    except ValidationError as e:
        errors.extend(format_errors(e))

    return errors
