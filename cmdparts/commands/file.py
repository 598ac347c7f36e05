"""``file [--brief] [--mime] [--separator=<sep>] [--sort-key <key>] [<path>]``"""

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional

from ..assembler import (
    Assembler,
    CommandConfig,
    Flag,
    OptionalDisplay,
    OptionalKeyValue,
    OptionalMapped,
)
from ..fluent import flag_setter, new_default, optional_setter


def _separator_token(separator: str) -> str:
    return f"--separator={separator}"


@dataclass
class FileCommand(CommandConfig):
    """Determine the type of a file."""

    brief: bool = False
    mime: bool = False
    separator: Optional[str] = None
    sort_key: Optional[str] = None
    path: Optional[Path] = None

    assembler: ClassVar[Assembler] = Assembler(
        "file",
        [
            Flag("brief", "--brief"),
            Flag("mime", "--mime"),
            OptionalMapped("separator", _separator_token),
            OptionalKeyValue("sort_key", "--sort-key"),
            OptionalDisplay("path"),
        ],
    )

    new = new_default()
    with_brief = flag_setter("brief")
    with_mime = flag_setter("mime")
    with_separator = optional_setter("separator")
    with_sort_key = optional_setter("sort_key", into=str)
    with_path = optional_setter("path", into=Path)
