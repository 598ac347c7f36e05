"""``kill [--force] [-<signal>] <pid>...``"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional

from ..assembler import Assembler, CommandConfig, Flag, OptionalPrefixed, RepeatedDisplay
from ..fluent import append_setter, collection_setter, flag_setter, new_default, optional_setter


@dataclass
class KillCommand(CommandConfig):
    """Signal one or more processes."""

    force: bool = False
    signal: Optional[str] = None
    pids: List[int] = field(default_factory=list)

    assembler: ClassVar[Assembler] = Assembler(
        "kill",
        [
            Flag("force", "--force"),
            OptionalPrefixed("signal", "-"),
            RepeatedDisplay("pids"),
        ],
    )

    new = new_default()
    with_force = flag_setter("force")
    with_signal = optional_setter("signal", into=str)
    with_pids = collection_setter("pids", into=int)
    push_pid = append_setter("pids", into=int)
