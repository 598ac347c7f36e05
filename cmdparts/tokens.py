"""Canonical string form for scalar values emitted as tokens.

Every token the assembler emits passes through :func:`to_token`, so a value
either has exactly one string rendering or is rejected with
:class:`~cmdparts.errors.InvalidFieldValueError`.
"""

import os
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from .errors import InvalidFieldValueError


def to_token(value: Any, field: Optional[str] = None) -> str:
    """Return the canonical string form of a scalar.

    Args:
        value: Scalar to render
        field: Field name used in error messages

    Returns:
        Token string

    Raises:
        InvalidFieldValueError: If the value has no canonical string form

    Example:
        >>> to_token(12)
        '12'
        >>> to_token(True)
        'true'
    """
    if isinstance(value, Enum):
        return to_token(value.value, field)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, os.PathLike):
        path = os.fspath(value)
        if not isinstance(path, str):
            raise InvalidFieldValueError(
                "path does not have a text representation", field, value
            )
        return path
    if value is None:
        raise InvalidFieldValueError("None has no token form", field, value)
    if isinstance(value, (bytes, bytearray)):
        raise InvalidFieldValueError(
            "bytes must be decoded before use as a token", field, value
        )
    if type(value).__str__ is object.__str__:
        raise InvalidFieldValueError(
            f"{type(value).__name__} does not define a string form", field, value
        )
    return str(value)


def ensure_token(value: Any, field: Optional[str] = None, what: str = "mapper result") -> str:
    """Check that a mapper result, flag or prefix is already a string token."""
    if not isinstance(value, str):
        raise InvalidFieldValueError(
            f"{what} must be a str, got {type(value).__name__}", field, value
        )
    return value
