"""``chmod [-R] [--reference=<file>] <mode> <path>...``"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, List, Optional

from ..assembler import (
    Assembler,
    CommandConfig,
    Flag,
    OptionalPrefixed,
    Positional,
    RepeatedDisplay,
)
from ..errors import InvalidFieldValueError
from ..fluent import (
    append_setter,
    collection_setter,
    flag_setter,
    new_default,
    optional_setter,
    setter,
)


MAX_MODE = 0o7777


def _checked_mode(mode: int) -> int:
    if not 0 <= mode <= MAX_MODE:
        raise ValueError(f"mode out of range: {mode:o}")
    return mode


def _parse_mode(value: object) -> int:
    """Octal digits as text, or a numeric mode such as ``0o755``."""
    if isinstance(value, bool):
        raise TypeError("mode cannot be a bool")
    if isinstance(value, str):
        return _checked_mode(int(value, 8))
    return _checked_mode(int(value))  # type: ignore[call-overload]


def _parse_written_mode(value: object) -> int:
    """Mode as written in a document: ``755`` and ``"755"`` both mean 0o755."""
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    return _parse_mode(value)


def _octal_mode(config: "ChmodCommand") -> str:
    mode = config.mode
    if isinstance(mode, bool) or not isinstance(mode, int):
        raise InvalidFieldValueError(
            f"expected int, got {type(mode).__name__}", "mode", mode
        )
    return format(mode, "o")


@dataclass
class ChmodCommand(CommandConfig):
    """Change file mode bits.

    ``mode`` is required, so it is always emitted, even on a default value.
    """

    recursive: bool = False
    reference: Optional[Path] = None
    mode: int = 0o644
    paths: List[Path] = field(default_factory=list)

    assembler: ClassVar[Assembler] = Assembler(
        "chmod",
        [
            Flag("recursive", "-R"),
            OptionalPrefixed("reference", "--reference="),
            Positional(_octal_mode),
            RepeatedDisplay("paths"),
        ],
    )

    new = new_default()
    with_recursive = flag_setter("recursive")
    with_reference = optional_setter("reference", into=Path)
    with_mode = setter("mode", into=_parse_mode, parse=_parse_written_mode)
    with_paths = collection_setter("paths", into=Path)
    push_path = append_setter("paths", into=Path)
