#!/usr/bin/env python3
"""
Error types for cmdparts.
"""

from typing import Any, Optional


class CmdPartsError(Exception):
    """Base exception for cmdparts-specific errors."""

    pass


class ValidationError(CmdPartsError):
    """Raised when data validation fails."""

    pass


class InvalidFieldValueError(ValidationError):
    """Raised when a field value cannot be converted or rendered as a token.

    Attributes:
        field: Name of the offending field, if known
        value: The value that was rejected
    """

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.field = field
        self.value = value
        if field:
            message = f"{field}: {message}"
        super().__init__(message)


class RuleDefinitionError(CmdPartsError):
    """Raised when a rule or setter is declared with invalid arguments."""

    pass


class UnknownCommandError(CmdPartsError):
    """Raised when a command shape is not registered."""

    pass
