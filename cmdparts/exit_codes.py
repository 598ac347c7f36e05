"""Standardized exit codes for the cmdparts CLI.

Following POSIX conventions and common CLI practices.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for cmdparts CLI commands."""

    SUCCESS = 0
    """Command completed successfully."""

    USER_ERROR = 1
    """User error: unknown command shape, bad option value, unreadable file."""

    SYSTEM_ERROR = 2
    """Unexpected internal error."""
