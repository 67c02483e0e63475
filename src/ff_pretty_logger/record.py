"""
Record model: attributes, groups, lazy values and the log record itself.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Iterator, Mapping, Protocol, runtime_checkable

from .levels import INFO

MAX_RESOLVE_ROUNDS = 100


@runtime_checkable
class LogValuer(Protocol):
    """A lazily computed value. ``log_value()`` is called before rendering."""

    def log_value(self) -> Any: ...


@dataclass(frozen=True)
class Attr:
    """A single key/value attribute. ``Attr()`` is the empty attribute."""

    key: str = ""
    value: Any = None

    def is_empty(self) -> bool:
        """True for the empty attribute (no key, no value)."""
        return self.key == "" and self.value is None

    def resolved(self) -> "Attr":
        """Return this attribute with a lazy value replaced by its resolved form."""
        if isinstance(self.value, LogValuer):
            return Attr(self.key, resolve_value(self.value))
        return self


@dataclass(frozen=True)
class Group:
    """An ordered collection of attributes, used as an attribute value."""

    attrs: tuple[Attr, ...] = ()

    @classmethod
    def of(cls, *attrs: Attr, **kwargs: Any) -> "Group":
        """Build a group from positional attrs followed by keyword attrs."""
        return cls(tuple(attrs) + attrs_from_kwargs(kwargs))

    def __iter__(self) -> Iterator[Attr]:
        return iter(self.attrs)

    def __len__(self) -> int:
        return len(self.attrs)


@dataclass(frozen=True)
class Source:
    """Source location of the logging call."""

    file: str
    line: int
    function: str = ""

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


@dataclass(frozen=True)
class Record:
    """
    A single log event.

    Attributes:
        message: Log message
        level: Integer level (see ``ff_pretty_logger.levels``)
        time: Event time; ``None`` means the time is unset and is not rendered
        attrs: Ordered per-record attributes
        source: Optional source location
    """

    message: str
    level: int = INFO
    time: datetime | None = None
    attrs: tuple[Attr, ...] = field(default_factory=tuple)
    source: Source | None = None


def group(key: str, *attrs: Attr, **kwargs: Any) -> Attr:
    """Build a group attribute: ``group("req", id=1, path="/")``."""
    return Attr(key, Group.of(*attrs, **kwargs))


def attrs_from_kwargs(values: Mapping[str, Any]) -> tuple[Attr, ...]:
    """Convert a mapping of keyword arguments to attributes, keeping order."""
    return tuple(Attr(key, value) for key, value in values.items())


def nest(groups: Iterable[str], attrs: tuple[Attr, ...]) -> tuple[Attr, ...]:
    """Wrap attrs in the given groups, outermost first."""
    for name in reversed(tuple(groups)):
        attrs = (Attr(name, Group(attrs)),)
    return attrs


def resolve_value(value: Any) -> Any:
    """
    Resolve a lazy value to its concrete form.

    Never raises: an exception from ``log_value()`` becomes the value, and
    values that keep producing lazy values are cut off after
    MAX_RESOLVE_ROUNDS with a RecursionError value.
    """
    for _ in range(MAX_RESOLVE_ROUNDS):
        if not isinstance(value, LogValuer):
            return value
        try:
            value = value.log_value()
        except Exception as e:
            return e
    if isinstance(value, LogValuer):
        return RecursionError(
            f"log_value called too many times on value of type {type(value).__name__}"
        )
    return value
