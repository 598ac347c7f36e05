"""Bundled command shapes and their registry."""

from typing import Dict, Type

from ..assembler import CommandConfig
from ..errors import UnknownCommandError
from .chmod import ChmodCommand
from .copy import CopyCommand
from .file import FileCommand
from .kill import KillCommand
from .listing import ColorWhen, ListCommand, SortKey

COMMANDS: Dict[str, Type[CommandConfig]] = {
    "chmod": ChmodCommand,
    "cp": CopyCommand,
    "file": FileCommand,
    "kill": KillCommand,
    "ls": ListCommand,
}


def get_command(name: str) -> Type[CommandConfig]:
    """Look up a bundled command shape by command name.

    Raises:
        UnknownCommandError: If no shape is registered under ``name``
    """
    try:
        return COMMANDS[name]
    except KeyError:
        available = ", ".join(sorted(COMMANDS))
        raise UnknownCommandError(
            f"Unknown command: {name}. Available: {available}"
        ) from None


__all__ = [
    "COMMANDS",
    "ChmodCommand",
    "ColorWhen",
    "CopyCommand",
    "FileCommand",
    "KillCommand",
    "ListCommand",
    "SortKey",
    "get_command",
]
