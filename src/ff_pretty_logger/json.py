"""
JSON handler: the structured encoder that sits behind the pretty handler.
"""

from typing import Any, Iterable

import structlog

from .base import BaseHandler
from .levels import level_name
from .record import Attr, Group, Record


class JSONHandler(BaseHandler):
    """
    A handler that writes one JSON object per record.

    Groups become nested objects, exceptions are written as their message
    and other values that JSON cannot represent fall back to ``str()``.
    """

    def __init__(self, sink: Any = None, options=None, **overrides: Any):
        super().__init__(sink, options, **overrides)
        self._renderer = structlog.processors.JSONRenderer(default=_json_default)

    def format(self, record: Record) -> str:
        event: dict[str, Any] = {}
        if record.time is not None:
            event["time"] = record.time.isoformat()
        event["level"] = level_name(record.level)
        if self.options.add_source and record.source is not None:
            event["source"] = {
                "function": record.source.function,
                "file": record.source.file,
                "line": record.source.line,
            }
        event["msg"] = record.message

        _merge_attrs(event, self._attrs)
        _merge_attrs(event, self.record_attrs(record))

        return self._renderer(None, "", event)


def _merge_attrs(target: dict[str, Any], attrs: Iterable[Attr]) -> None:
    for attr in attrs:
        attr = attr.resolved()
        if attr.is_empty():
            continue

        if not isinstance(attr.value, Group):
            target[attr.key] = _json_value(attr.value)
            continue

        nested: dict[str, Any] = {}
        _merge_attrs(nested, attr.value)
        if not nested:
            continue
        if not attr.key:
            _deep_merge(target, nested)
        elif isinstance(target.get(attr.key), dict):
            _deep_merge(target[attr.key], nested)
        else:
            target[attr.key] = nested


def _deep_merge(target: dict[str, Any], source: dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        else:
            target[key] = value


def _json_value(value: Any) -> Any:
    if isinstance(value, BaseException):
        return str(value)
    return value


def _json_default(value: Any) -> Any:
    if isinstance(value, Group):
        nested: dict[str, Any] = {}
        _merge_attrs(nested, value)
        return nested
    return str(value)
