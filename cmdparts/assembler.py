"""Token assembler: turn a configuration value into an argv-style token list.

A configuration shape declares an ordered rule list once; every call to
:meth:`Assembler.assemble` seeds a fresh :class:`CommandBuilder` and applies
the rules in declaration order, so the emitted token order is fixed by the
rule list rather than by field declaration order.

Example:
    >>> from types import SimpleNamespace
    >>> KILL = Assembler("kill", [
    ...     Flag("force", "--force"),
    ...     OptionalPrefixed("signal", "-"),
    ...     RepeatedDisplay("pids"),
    ... ])
    >>> KILL.assemble(SimpleNamespace(force=True, signal=None, pids=[12, 34]))
    ['kill', '--force', '12', '34']
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, List, Mapping, Sequence, Tuple, Union

from .builder import CommandBuilder, Mapper
from .errors import InvalidFieldValueError, RuleDefinitionError
from .fields import check_field_name, read_field, require_bool, require_collection
from .fluent import mapping_converters
from .logging import get_logger
from .tokens import ensure_token, to_token

logger = get_logger(__name__)

# A positional source is either a field name or a function of the config
Source = Union[str, Callable[[Any], Any]]


def _check_token(name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise RuleDefinitionError(f"{name} must be a string: {value!r}")


def _check_mapper(mapper: Any) -> None:
    if not callable(mapper):
        raise RuleDefinitionError(f"Mapper must be callable: {mapper!r}")


def _read_collection(config: Any, field: str) -> Iterable[Any]:
    return require_collection(read_field(config, field), field)


class Rule:
    """Base class for field-to-token rules."""

    def apply(self, config: Any, builder: CommandBuilder) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class Flag(Rule):
    """Append ``token`` iff the boolean field is true."""

    field: str
    token: str

    def __post_init__(self) -> None:
        check_field_name(self.field)
        _check_token("Flag token", self.token)

    def apply(self, config: Any, builder: CommandBuilder) -> None:
        value = require_bool(read_field(config, self.field), self.field)
        builder.add_flag(self.token, value)


@dataclass(frozen=True)
class OptionalKeyValue(Rule):
    """Append ``flag`` then the value when the field is present."""

    field: str
    flag: str

    def __post_init__(self) -> None:
        check_field_name(self.field)
        _check_token("Option flag", self.flag)

    def apply(self, config: Any, builder: CommandBuilder) -> None:
        value = read_field(config, self.field)
        if value is not None:
            builder.add_option(self.flag, to_token(value, self.field))


@dataclass(frozen=True)
class OptionalMapped(Rule):
    """Append ``mapper(value)`` when the field is present."""

    field: str
    mapper: Mapper

    def __post_init__(self) -> None:
        check_field_name(self.field)
        _check_mapper(self.mapper)

    def apply(self, config: Any, builder: CommandBuilder) -> None:
        value = read_field(config, self.field)
        if value is not None:
            builder.add_display(ensure_token(self.mapper(value), self.field))


@dataclass(frozen=True)
class OptionalDisplay(Rule):
    """Append the value's canonical string form when the field is present."""

    field: str

    def __post_init__(self) -> None:
        check_field_name(self.field)

    def apply(self, config: Any, builder: CommandBuilder) -> None:
        value = read_field(config, self.field)
        if value is not None:
            builder.add_display(to_token(value, self.field))


@dataclass(frozen=True)
class OptionalPrefixed(Rule):
    """Append ``prefix + value`` as one token when the field is present."""

    field: str
    prefix: str

    def __post_init__(self) -> None:
        check_field_name(self.field)
        _check_token("Prefix", self.prefix)

    def apply(self, config: Any, builder: CommandBuilder) -> None:
        value = read_field(config, self.field)
        if value is not None:
            builder.add_prefixed(self.prefix, to_token(value, self.field))


@dataclass(frozen=True, init=False)
class Positional(Rule):
    """Append each source's token unconditionally, in the given order.

    A source is a field name or a callable receiving the config.
    """

    sources: Tuple[Source, ...]

    def __init__(self, *sources: Source) -> None:
        if not sources:
            raise RuleDefinitionError("Positional needs at least one source")
        for source in sources:
            if not callable(source):
                check_field_name(source)
        object.__setattr__(self, "sources", tuple(sources))

    def apply(self, config: Any, builder: CommandBuilder) -> None:
        for source in self.sources:
            if callable(source):
                builder.add_positional(to_token(source(config)))
            else:
                builder.add_positional(to_token(read_field(config, source), source))


@dataclass(frozen=True)
class RepeatedMapped(Rule):
    """Append ``mapper(item)`` for every element of a collection field."""

    field: str
    mapper: Mapper

    def __post_init__(self) -> None:
        check_field_name(self.field)
        _check_mapper(self.mapper)

    def apply(self, config: Any, builder: CommandBuilder) -> None:
        for item in _read_collection(config, self.field):
            builder.add_display(ensure_token(self.mapper(item), self.field))


@dataclass(frozen=True)
class RepeatedDisplay(Rule):
    """Append every element's canonical string form."""

    field: str

    def __post_init__(self) -> None:
        check_field_name(self.field)

    def apply(self, config: Any, builder: CommandBuilder) -> None:
        for item in _read_collection(config, self.field):
            builder.add_display(to_token(item, self.field))


class Assembler:
    """Fixed, ordered rule list for one configuration shape.

    Args:
        command: Seed token (program or subcommand name)
        rules: Rules applied in declaration order
    """

    def __init__(self, command: str, rules: Sequence[Rule] = ()):
        if not isinstance(command, str) or not command:
            raise RuleDefinitionError(f"Command name must be a non-empty string: {command!r}")
        for rule in rules:
            if not isinstance(rule, Rule):
                raise RuleDefinitionError(f"Not a rule: {rule!r}")
        self.command = command
        self.rules: Tuple[Rule, ...] = tuple(rules)

    def assemble(self, config: Any) -> List[str]:
        """Assemble config into a fresh token list.

        Args:
            config: Configuration value read by the rules

        Returns:
            Tokens, starting with the command name

        Raises:
            InvalidFieldValueError: If a field is missing or has no token form
        """
        builder = CommandBuilder(self.command)
        for rule in self.rules:
            rule.apply(config, builder)
        parts = builder.build()
        logger.debug("Assembled command", command=self.command, tokens=len(parts))
        return parts

    def __repr__(self) -> str:
        return f"Assembler({self.command!r}, rules={len(self.rules)})"


class CommandConfig:
    """Mixin for dataclass configuration values bound to an assembler.

    Subclasses set ``assembler`` at class level:

        @dataclass
        class KillCommand(CommandConfig):
            force: bool = False
            assembler: ClassVar[Assembler] = Assembler("kill", [Flag("force", "--force")])
    """

    assembler: ClassVar[Assembler]

    def to_parts(self) -> List[str]:
        """Assemble this configuration into its token list."""
        return type(self).assembler.assemble(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Any:
        """Create a configuration from a mapping of declared field names.

        Each value goes through the conversion of the setter declared for its
        field, so mapped documents are checked the same way as fluent calls.

        Raises:
            InvalidFieldValueError: If a key is not a declared field or a value
                fails its field's conversion
        """
        if not dataclasses.is_dataclass(cls):
            raise RuleDefinitionError(f"{cls.__name__} is not a dataclass")
        known = {f.name for f in dataclasses.fields(cls) if f.init}
        converters = mapping_converters(cls)
        values = {}
        for key, value in data.items():
            if key not in known:
                raise InvalidFieldValueError(
                    f"unknown field for {cls.__name__}", str(key), value
                )
            if key in converters:
                values[key] = converters[key](value)
            else:
                values[key] = list(value) if isinstance(value, (list, tuple)) else value
        return cls(**values)
