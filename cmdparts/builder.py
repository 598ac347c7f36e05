"""Fluent interface for building CLI token sequences.

Provides chainable methods for appending tokens in a fixed order, one method
per rule kind, plus plain-list helpers for call sites that keep their own
``parts`` list.
"""

from typing import Any, Callable, Iterable, List, Mapping

from .fields import read_field, require_bool
from .tokens import ensure_token, to_token

Mapper = Callable[[Any], str]


class CommandBuilder:
    """Fluent interface for building CLI commands.

    The sequence is seeded with the command name and only ever grows at the
    end: tokens are never reordered or deduplicated.

    Example:
        >>> cmd = (CommandBuilder("cp")
        ...     .add_flag("-f", False)
        ...     .add_option("--output", "out.txt")
        ...     .build())
        >>> cmd
        ['cp', '--output', 'out.txt']

    Example with optional values:
        >>> (CommandBuilder("kill")
        ...     .add_flag("--force")
        ...     .add_prefixed("-", None)
        ...     .add_each_display([12, 34])
        ...     .build())
        ['kill', '--force', '12', '34']
    """

    def __init__(self, command: str):
        """Initialize command builder with base command.

        Args:
            command: Base command name (e.g., "kill")
        """
        self.parts: List[str] = [to_token(command, "command")]

    def add_flag(self, flag: str, enabled: bool = True) -> "CommandBuilder":
        """Add boolean flag to command when enabled.

        Args:
            flag: Boolean flag (e.g., "--verbose", "--force")
            enabled: Whether the flag is set; must be a bool

        Returns:
            Self for method chaining
        """
        flag = ensure_token(flag, what="flag")
        if require_bool(enabled, flag):
            self.parts.append(flag)
        return self

    def add_option(self, flag: str, value: Any) -> "CommandBuilder":
        """Add ``flag value`` when value is present.

        Args:
            flag: Option flag (e.g., "--output")
            value: Option value; None adds nothing

        Returns:
            Self for method chaining

        Example:
            >>> CommandBuilder("file").add_option("--sort-key", "name").build()
            ['file', '--sort-key', 'name']
        """
        flag = ensure_token(flag, what="flag")
        if value is not None:
            self.parts.append(flag)
            self.parts.append(to_token(value, flag))
        return self

    def add_mapped(self, value: Any, mapper: Mapper) -> "CommandBuilder":
        """Add one mapped token when value is present.

        Args:
            value: Optional scalar
            mapper: Function from the scalar to its token

        Returns:
            Self for method chaining
        """
        if value is not None:
            self.parts.append(ensure_token(mapper(value)))
        return self

    def add_display(self, value: Any) -> "CommandBuilder":
        """Add the canonical string form of value when present."""
        if value is not None:
            self.parts.append(to_token(value))
        return self

    def add_prefixed(self, prefix: str, value: Any) -> "CommandBuilder":
        """Add ``prefix + value`` as a single token when value is present.

        Example:
            >>> CommandBuilder("kill").add_prefixed("-", "TERM").build()
            ['kill', '-TERM']
        """
        prefix = ensure_token(prefix, what="prefix")
        if value is not None:
            self.parts.append(prefix + to_token(value))
        return self

    def add_positional(self, *values: Any) -> "CommandBuilder":
        """Add positional arguments unconditionally, in the given order.

        Example:
            >>> CommandBuilder("rm").add_flag("-rf").add_positional("/tmp/file").build()
            ['rm', '-rf', '/tmp/file']
        """
        for value in values:
            self.parts.append(to_token(value))
        return self

    def add_each(self, values: Iterable[Any], mapper: Mapper) -> "CommandBuilder":
        """Add one mapped token per element, in element order."""
        for item in values:
            self.parts.append(ensure_token(mapper(item)))
        return self

    def add_each_display(self, values: Iterable[Any]) -> "CommandBuilder":
        """Add each element's canonical string form, in element order."""
        for item in values:
            self.parts.append(to_token(item))
        return self

    def build(self) -> List[str]:
        """Return final command as a new list of strings.

        Returns:
            Command parts ready for a process-invocation facility
        """
        return list(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __repr__(self) -> str:
        """Return string representation of command."""
        return f"CommandBuilder({' '.join(self.parts)})"


# ============================================================================
# Plain-list helpers
# ============================================================================


def cmd(name: str) -> List[str]:
    """Create the initial ``parts`` list holding the command name."""
    return [to_token(name, "command")]


def push_flags(parts: List[str], config: Any, mapping: Mapping[str, str]) -> None:
    """Push ``token`` for each ``field -> token`` whose field is true.

    Example:
        >>> from types import SimpleNamespace
        >>> parts = cmd("ls")
        >>> opts = SimpleNamespace(long=True, all=False)
        >>> push_flags(parts, opts, {"long": "-l", "all": "-a"})
        >>> parts
        ['ls', '-l']
    """
    for field, flag in mapping.items():
        flag = ensure_token(flag, field, what="flag")
        if require_bool(read_field(config, field), field):
            parts.append(flag)


def push_options(parts: List[str], config: Any, mapping: Mapping[str, str]) -> None:
    """Push ``flag value`` pairs for each present ``field -> flag``."""
    for field, flag in mapping.items():
        flag = ensure_token(flag, field, what="flag")
        value = read_field(config, field)
        if value is not None:
            parts.append(flag)
            parts.append(to_token(value, field))


def push_args(parts: List[str], *values: Any) -> None:
    """Push positional args onto ``parts``."""
    for value in values:
        parts.append(to_token(value))


def push_if_some(parts: List[str], value: Any, mapper: Mapper) -> None:
    """Push ``mapper(value)`` when value is not None."""
    if value is not None:
        parts.append(ensure_token(mapper(value)))


def push_if_some_display(parts: List[str], value: Any) -> None:
    """Push the canonical form of value when it is not None."""
    if value is not None:
        parts.append(to_token(value))


def push_if_some_prefix(parts: List[str], value: Any, prefix: str) -> None:
    """Push ``prefix + value`` when value is not None."""
    prefix = ensure_token(prefix, what="prefix")
    if value is not None:
        parts.append(prefix + to_token(value))


def push_each(parts: List[str], values: Iterable[Any], mapper: Mapper) -> None:
    """Push ``mapper(item)`` for each item."""
    for item in values:
        parts.append(ensure_token(mapper(item)))


def push_each_display(parts: List[str], values: Iterable[Any]) -> None:
    """Push the canonical form of each item."""
    for item in values:
        parts.append(to_token(item))
