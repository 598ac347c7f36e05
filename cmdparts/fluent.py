"""Setter factories for fluent configuration values.

Assign the factories' results as class attributes of a dataclass; each
generated setter mutates the instance and returns it so calls chain:

    @dataclass
    class KillCommand(CommandConfig):
        force: bool = False
        signal: Optional[str] = None
        pids: List[int] = field(default_factory=list)

        new = new_default()
        with_force = flag_setter("force")
        with_signal = optional_setter("signal", into=str)
        with_pids = collection_setter("pids", into=int)
        push_pid = append_setter("pids", into=int)

    KillCommand.new().with_force().with_pids([12, 34])

Setter names must differ from field names: a dataclass default stored under
the same class attribute would replace the setter.

Each setter remembers its field and conversion, and
:func:`mapping_converters` collects them so values loaded from documents
are converted exactly like fluent calls. ``parse`` overrides ``into`` for
that path when a document spells a value differently, e.g. a file mode
written as the digits ``755``.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar, Union

from .errors import InvalidFieldValueError, RuleDefinitionError
from .fields import check_field_name, require_bool

T = TypeVar("T")
Converter = Union[type, Callable[[Any], Any]]

_SETTER_ATTR = "_cmdparts_setter"

# Setter kinds that replace a field's whole value
_REPLACING = ("plain", "optional", "collection", "flag")


def _check_into(into: Optional[Converter]) -> None:
    if into is not None and not callable(into):
        raise RuleDefinitionError(f"Converter must be a type or callable: {into!r}")


def convert(value: Any, into: Optional[Converter], field: Optional[str] = None) -> Any:
    """Convert value with ``into``, passing through values already of that type.

    Raises:
        InvalidFieldValueError: If the conversion raises TypeError or ValueError
    """
    if into is None:
        return value
    if isinstance(into, type) and isinstance(value, into):
        return value
    try:
        return into(value)
    except (TypeError, ValueError) as e:
        raise InvalidFieldValueError(f"cannot convert {value!r}: {e}", field, value) from e


def _as_items(values: Any) -> Iterable[Any]:
    # A lone string is one element, not a sequence of characters
    if isinstance(values, (str, bytes, bytearray)):
        return [values]
    try:
        return list(values)
    except TypeError:
        return [values]


def _mark(func: Callable, kind: str, field: str, parse: Optional[Converter]) -> None:
    setattr(func, _SETTER_ATTR, (kind, field, parse))


def _mapping_converter(kind: str, field: str, parse: Optional[Converter]) -> Callable[[Any], Any]:
    if kind == "flag":
        return lambda value: require_bool(value, field)
    if kind == "optional":
        return lambda value: None if value is None else convert(value, parse, field)
    if kind in ("collection", "append"):
        return lambda values: [convert(item, parse, field) for item in _as_items(values)]
    return lambda value: convert(value, parse, field)


def mapping_converters(cls: type) -> Dict[str, Callable[[Any], Any]]:
    """Collect per-field conversions from the setters declared on ``cls``.

    A replacing setter (plain, optional, collection, flag) wins over an
    append setter for the same field; subclasses override base classes.
    """
    replacing: Dict[str, Callable[[Any], Any]] = {}
    appending: Dict[str, Callable[[Any], Any]] = {}
    for klass in reversed(cls.__mro__):
        for attr in vars(klass).values():
            marker = getattr(attr, _SETTER_ATTR, None)
            if marker is None:
                continue
            kind, field, parse = marker
            target = replacing if kind in _REPLACING else appending
            target[field] = _mapping_converter(kind, field, parse)
    return {**appending, **replacing}


def new_default() -> classmethod:
    """Generate a ``new()`` constructor that delegates to the zero-argument constructor."""

    def new(cls: Any) -> Any:
        return cls()

    new.__doc__ = "Create a configuration with every field at its default."
    return classmethod(new)


def setter(
    field: str, into: Optional[Converter] = None, parse: Optional[Converter] = None
) -> Callable[[T, Any], T]:
    """Generate a setter that replaces a required field's value."""
    check_field_name(field)
    _check_into(into)
    _check_into(parse)

    def set_value(self: T, value: Any) -> T:
        setattr(self, field, convert(value, into, field))
        return self

    set_value.__doc__ = f"Set ``{field}``."
    _mark(set_value, "plain", field, parse or into)
    return set_value


def optional_setter(
    field: str, into: Optional[Converter] = None, parse: Optional[Converter] = None
) -> Callable[[T, Any], T]:
    """Generate a setter that marks an optional field present.

    None is rejected; leaving the setter uncalled is how absence is expressed.
    """
    check_field_name(field)
    _check_into(into)
    _check_into(parse)

    def set_optional(self: T, value: Any) -> T:
        if value is None:
            raise InvalidFieldValueError("optional setter requires a value", field, value)
        setattr(self, field, convert(value, into, field))
        return self

    set_optional.__doc__ = f"Set ``{field}`` to a present value."
    _mark(set_optional, "optional", field, parse or into)
    return set_optional


def collection_setter(
    field: str, into: Optional[Converter] = None, parse: Optional[Converter] = None
) -> Callable[[T, Any], T]:
    """Generate a setter that replaces a list field from any iterable or single value."""
    check_field_name(field)
    _check_into(into)
    _check_into(parse)

    def set_items(self: T, values: Any) -> T:
        items: List[Any] = [convert(item, into, field) for item in _as_items(values)]
        setattr(self, field, items)
        return self

    set_items.__doc__ = f"Replace ``{field}`` with the given elements."
    _mark(set_items, "collection", field, parse or into)
    return set_items


def append_setter(
    field: str, into: Optional[Converter] = None, parse: Optional[Converter] = None
) -> Callable[[T, Any], T]:
    """Generate a method that appends one element to a list field."""
    check_field_name(field)
    _check_into(into)
    _check_into(parse)

    def push_item(self: T, value: Any) -> T:
        getattr(self, field).append(convert(value, into, field))
        return self

    push_item.__doc__ = f"Append one element to ``{field}``."
    _mark(push_item, "append", field, parse or into)
    return push_item


def flag_setter(field: str) -> Callable[[T], T]:
    """Generate a method that sets a boolean field to True."""
    check_field_name(field)

    def set_flag(self: T) -> T:
        setattr(self, field, True)
        return self

    set_flag.__doc__ = f"Enable ``{field}``."
    _mark(set_flag, "flag", field, None)
    return set_flag
