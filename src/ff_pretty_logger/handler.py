"""
Pretty handler: colorized, human-readable single-line output.
"""

from typing import Any, Iterable

from .base import BaseHandler
from .collect import collect_fields
from .colors import ERROR_VALUE, KEY, MESSAGE, SOURCE, VALUE, ColorPolicy
from .json import JSONHandler
from .levels import level_name
from .options import HandlerOptions
from .record import Attr, Record, Source
from .render import render_value


class PrettyHandler(BaseHandler):
    """
    A handler that writes one readable line per record::

        03:04PM INFO > user action metadata={user={id=123 name=Test User}}

    The line holds the time, the level, the optional source location, a
    ``>`` separator, the message and then every attribute as ``key=value``
    in ascending key order. Level filtering is owned by the JSON handler
    it wraps.
    """

    def __init__(
        self,
        sink: Any = None,
        options: HandlerOptions | None = None,
        **overrides: Any,
    ):
        """
        Initialize a pretty handler.

        Args:
            sink: Output stream, text or binary (default: sys.stdout)
            options: Handler options
            **overrides: Option values, e.g. ``no_color=True``
        """
        super().__init__(sink, options, **overrides)
        self.colors = ColorPolicy(
            enabled=not self.options.no_color,
            level_colors=self.options.level_colors,
        )

        self.fallback = JSONHandler(self.sink, self.options)
        self.fallback._lock = self._lock

    def enabled(self, level: int) -> bool:
        return self.fallback.enabled(level)

    def with_attrs(self, attrs: Iterable[Attr]) -> "PrettyHandler":
        attrs = tuple(attrs)
        derived = super().with_attrs(attrs)
        if derived is not self:
            derived.fallback = self.fallback.with_attrs(attrs)
        return derived

    def with_group(self, name: str) -> "PrettyHandler":
        derived = super().with_group(name)
        if derived is not self:
            derived.fallback = self.fallback.with_group(name)
        return derived

    def format(self, record: Record) -> str:
        fields = collect_fields(self._attrs, self.record_attrs(record))

        parts = []
        if record.time is not None:
            parts.append(record.time.strftime(self.options.time_format))
        parts.append(self.colors.level(record.level, level_name(record.level)))

        if self.options.add_source:
            source = source_string(record.source)
            if source:
                parts.append(self.colors.wrap(SOURCE, source))

        parts.append(">")
        parts.append(self.colors.wrap(MESSAGE, record.message))

        for key in sorted(fields):
            parts.append(self.format_field(key, fields[key]))

        return " ".join(parts)

    def format_field(self, key: str, value: Any) -> str:
        """Render a single ``key=value`` field."""
        category = ERROR_VALUE if key == "error" else VALUE
        return self.colors.wrap(KEY, key + "=") + self.colors.wrap(category, render_value(value))


def source_string(source: Source | None) -> str:
    """``file:line`` for a usable source location, else an empty string."""
    if source is None or not source.file or not source.line:
        return ""
    return str(source)
