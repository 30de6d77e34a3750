"""
Shared model configuration for the routine service domain.

Records are stored with snake_case keys and exchanged over HTTP in camelCase,
so every model accepts both and serializes by alias.
"""

from typing import Any, Dict, Sequence
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases that also accepts field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PayloadModel(CamelModel):
    """Base for client payloads: strings are trimmed and unknown keys rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


def is_valid_id(value: Any) -> bool:
    """Return True if value looks like a stored identifier (UUID)."""
    if value is None:
        return False
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


def none_as_empty_list(value: Any) -> Any:
    """Coerce null list columns to an empty list."""
    return [] if value is None else value


_LOCATION_PREFIXES = ("body", "query", "path", "header")


def describe_first_error(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Render the first pydantic error as ``field: message``.

    Examples:
        >>> describe_first_error([{"loc": ("body", "name"), "msg": "Field required"}])
        'name: Field required'
    """
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = list(first.get("loc") or ())
    if loc and loc[0] in _LOCATION_PREFIXES:
        loc = loc[1:]
    field = ".".join(str(part) for part in loc)
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message
