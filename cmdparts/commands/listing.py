"""``ls [-l] [-a] [--sort <key>] [--color=<when>] <path>...``"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import ClassVar, List, Optional

from ..assembler import (
    Assembler,
    CommandConfig,
    Flag,
    OptionalKeyValue,
    OptionalMapped,
    RepeatedMapped,
)
from ..fluent import append_setter, collection_setter, flag_setter, new_default, optional_setter
from ..tokens import to_token


class SortKey(str, Enum):
    """Sort orders understood by ``ls --sort``."""

    NAME = "name"
    SIZE = "size"
    TIME = "time"
    EXTENSION = "extension"


class ColorWhen(str, Enum):
    """Values for ``ls --color``."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


def _color_token(when: ColorWhen) -> str:
    return "--color=" + to_token(when, "color")


def _path_token(path: Path) -> str:
    return Path(path).as_posix()


@dataclass
class ListCommand(CommandConfig):
    """List directory contents."""

    long: bool = False
    all: bool = False
    sort: Optional[SortKey] = None
    color: Optional[ColorWhen] = None
    paths: List[Path] = field(default_factory=list)

    assembler: ClassVar[Assembler] = Assembler(
        "ls",
        [
            Flag("long", "-l"),
            Flag("all", "-a"),
            OptionalKeyValue("sort", "--sort"),
            OptionalMapped("color", _color_token),
            RepeatedMapped("paths", _path_token),
        ],
    )

    new = new_default()
    with_long = flag_setter("long")
    with_all = flag_setter("all")
    with_sort = optional_setter("sort", into=SortKey)
    with_color = optional_setter("color", into=ColorWhen)
    with_paths = collection_setter("paths", into=Path)
    push_path = append_setter("paths", into=Path)
