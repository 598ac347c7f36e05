"""Field access shared by rules, setters and list helpers."""

from typing import Any, Iterable

from .errors import InvalidFieldValueError, RuleDefinitionError


def check_field_name(field: Any) -> None:
    """Reject empty or non-string field names at declaration time."""
    if not isinstance(field, str) or not field:
        raise RuleDefinitionError(f"Field name must be a non-empty string: {field!r}")


def read_field(config: Any, field: str) -> Any:
    """Read a named field, reporting a missing attribute as a field error."""
    try:
        return getattr(config, field)
    except AttributeError as e:
        raise InvalidFieldValueError(
            f"{type(config).__name__} has no such field", field
        ) from e


def require_bool(value: Any, field: str) -> bool:
    """Return value if it is a real bool; truthy stand-ins are rejected."""
    if not isinstance(value, bool):
        raise InvalidFieldValueError(
            f"expected bool, got {type(value).__name__}", field, value
        )
    return value


def require_collection(values: Any, field: str) -> Iterable[Any]:
    """Return values if iterable; strings are not spread into characters."""
    if isinstance(values, (str, bytes, bytearray)) or not hasattr(values, "__iter__"):
        raise InvalidFieldValueError(
            f"expected a collection, got {type(values).__name__}", field, values
        )
    return values
