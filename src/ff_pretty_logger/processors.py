"""
structlog processors that hand events over to a handler.
"""

import sys
from datetime import datetime
from typing import Any

import structlog

from .base import BaseHandler
from .levels import INFO, parse_level
from .record import Attr, Record, Source
from .render import render_value

# Private keys used by PrettyLogger to pass an explicit level and the event time
LEVEL_KEY = "_level"
TIME_KEY = "_timestamp"

# Keys written by structlog's CallsiteParameterAdder
CALLSITE_KEYS = ("pathname", "lineno", "func_name")


class HandlerProcessor:
    """
    Final structlog processor: converts the event dict to a Record, writes it
    through the handler and stops the chain.

    Callsite keys are only read as the source location when the handler
    asks for it; otherwise they stay ordinary fields.
    """

    def __init__(self, handler: BaseHandler):
        self.handler = handler

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> Any:
        record = record_from_event_dict(
            method_name, event_dict, add_source=self.handler.options.add_source
        )
        if self.handler.enabled(record.level):
            self.handler.handle(record)
        raise structlog.DropEvent

    def __repr__(self) -> str:
        return f"HandlerProcessor({self.handler!r})"


def record_from_event_dict(
    method_name: str, event_dict: dict[str, Any], add_source: bool = False
) -> Record:
    """
    Build a Record from a structlog event dict.

    ``event`` becomes the message, ``_timestamp`` the time and ``exc_info``
    an ``error`` attribute. With ``add_source`` the callsite keys
    (``pathname``, ``lineno``, ``func_name``) become the source. Every other
    key becomes an attribute, in order.
    """
    values = dict(event_dict)

    event = values.pop("event", "")
    message = event if isinstance(event, str) else render_value(event)
    level = _event_level(method_name, values.pop(LEVEL_KEY, None))
    time = _event_time(values.pop(TIME_KEY, None))
    source = None
    if add_source:
        source = _event_source(*(values.pop(key, None) for key in CALLSITE_KEYS))
    error = _event_exception(values.pop("exc_info", None))

    attrs = [Attr(str(key), value) for key, value in values.items()]
    if error is not None:
        attrs.append(Attr("error", error))

    return Record(message=message, level=level, time=time, attrs=tuple(attrs), source=source)


def _event_level(method_name: str, explicit: Any) -> int:
    try:
        return parse_level(explicit if explicit is not None else method_name)
    except ValueError:
        return INFO


def _event_time(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    try:
        if isinstance(value, int | float):
            return datetime.fromtimestamp(value)
        if isinstance(value, str):
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, OverflowError, OSError):
        return None
    return None


def _event_source(pathname: Any, lineno: Any, func_name: Any) -> Source | None:
    if not pathname or not lineno:
        return None
    try:
        line = int(lineno)
    except (TypeError, ValueError):
        return None
    return Source(file=str(pathname), line=line, function=str(func_name or ""))


def _event_exception(exc_info: Any) -> BaseException | None:
    if not exc_info:
        return None
    if isinstance(exc_info, BaseException):
        return exc_info
    if isinstance(exc_info, tuple):
        return exc_info[1] if len(exc_info) > 1 else None
    return sys.exc_info()[1]
