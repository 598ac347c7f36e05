"""``cp [-f] [-r] [--output <path>] <source>...``"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, List, Optional

from ..assembler import Assembler, CommandConfig, Flag, OptionalKeyValue, RepeatedDisplay
from ..fluent import append_setter, collection_setter, flag_setter, new_default, optional_setter


@dataclass
class CopyCommand(CommandConfig):
    """Copy files into an output location."""

    force: bool = False
    recursive: bool = False
    output: Optional[Path] = None
    sources: List[Path] = field(default_factory=list)

    assembler: ClassVar[Assembler] = Assembler(
        "cp",
        [
            Flag("force", "-f"),
            Flag("recursive", "-r"),
            OptionalKeyValue("output", "--output"),
            RepeatedDisplay("sources"),
        ],
    )

    new = new_default()
    with_force = flag_setter("force")
    with_recursive = flag_setter("recursive")
    with_output = optional_setter("output", into=Path)
    with_sources = collection_setter("sources", into=Path)
    push_source = append_setter("sources", into=Path)
