"""
Base handler implementation shared by the pretty and JSON handlers.
"""

import copy
import io
import sys
import threading
from typing import Any, Iterable, TypeVar

from .options import HandlerOptions
from .record import Attr, Record, nest

H = TypeVar("H", bound="BaseHandler")


class BaseHandler:
    """
    Base class for record handlers.

    A handler owns a sink, its options, and a snapshot of bound attributes.
    ``with_attrs`` and ``with_group`` never modify the handler they are
    called on; they return a new handler that shares the sink, the write
    lock and the options but carries its own attribute snapshot.

    Subclasses implement ``format``.
    """

    def __init__(
        self,
        sink: Any = None,
        options: HandlerOptions | None = None,
        **overrides: Any,
    ):
        """
        Initialize a handler.

        Args:
            sink: Output stream, text or binary (default: sys.stdout)
            options: Handler options
            **overrides: Option values applied on top of ``options``
        """
        self.sink = sink if sink is not None else sys.stdout
        if options is None:
            options = HandlerOptions(**overrides)
        elif overrides:
            options = HandlerOptions(**{**options.model_dump(), **overrides})
        self.options = options

        self._lock = threading.Lock()
        self._binary = isinstance(self.sink, io.RawIOBase | io.BufferedIOBase)
        self._attrs: tuple[Attr, ...] = ()
        self._groups: tuple[str, ...] = ()

    @property
    def attrs(self) -> tuple[Attr, ...]:
        """Attributes bound to this handler."""
        return self._attrs

    @property
    def groups(self) -> tuple[str, ...]:
        """Names of the open groups, outermost first."""
        return self._groups

    def enabled(self, level: int) -> bool:
        """Whether records at this level are handled."""
        return level >= self.options.min_level

    def with_attrs(self: H, attrs: Iterable[Attr]) -> H:
        """
        Return a handler with additional bound attributes.

        The attributes are placed inside the currently open groups.
        """
        attrs = tuple(attrs)
        if not attrs:
            return self
        return self._derive(attrs=self._attrs + nest(self._groups, attrs))

    def with_group(self: H, name: str) -> H:
        """
        Return a handler that nests later attributes under ``name``.

        Applies to attributes bound afterwards and to record attributes.
        """
        if not name:
            return self
        return self._derive(groups=self._groups + (name,))

    def _derive(
        self: H,
        attrs: tuple[Attr, ...] | None = None,
        groups: tuple[str, ...] | None = None,
    ) -> H:
        derived = copy.copy(self)
        if attrs is not None:
            derived._attrs = attrs
        if groups is not None:
            derived._groups = groups
        return derived

    def record_attrs(self, record: Record) -> tuple[Attr, ...]:
        """The record's attributes placed inside the open groups."""
        return nest(self._groups, record.attrs)

    def format(self, record: Record) -> str:
        """Render a record as a single line without terminator."""
        raise NotImplementedError

    def handle(self, record: Record) -> None:
        """
        Format a record and write it to the sink.

        The whole line is written with one call while holding the sink's
        lock. Errors raised by the sink propagate to the caller.
        """
        self._write(self.format(record))

    def _write(self, line: str) -> None:
        data: str | bytes = line + "\n"
        if self._binary:
            data = data.encode("utf-8")
        with self._lock:
            self.sink.write(data)
            flush = getattr(self.sink, "flush", None)
            if flush is not None:
                flush()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(attrs={len(self._attrs)}, "
            f"groups={self._groups!r}, options={self.options!r})"
        )
