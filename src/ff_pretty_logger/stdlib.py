"""
Bridge for the standard library ``logging`` module.
"""

import logging
from datetime import datetime
from typing import Any, Iterable

from .base import BaseHandler
from .handler import PrettyHandler
from .record import Attr, Record, Source, attrs_from_kwargs
from .utils import extra_fields


class PrettyLoggingHandler(logging.Handler):
    """
    A ``logging.Handler`` that writes records through a PrettyHandler.

    Fields passed with ``extra=`` become attributes and an attached
    exception becomes the ``error`` field::

        logging.getLogger("app").addHandler(PrettyLoggingHandler(no_color=True))
        logging.getLogger("app").warning("slow", extra={"duration": 1500})
    """

    def __init__(
        self,
        handler: BaseHandler | None = None,
        level: int | str = logging.NOTSET,
        stream=None,
        **options: Any,
    ):
        """
        Initialize the bridge.

        Args:
            handler: Handler to write through (default: a PrettyHandler)
            level: logging level of this handler
            stream: Output stream for the default handler (default: sys.stdout)
            **options: Handler options for the default handler
        """
        super().__init__(level)
        self.handler = handler if handler is not None else PrettyHandler(stream, **options)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            converted = record_from_log_record(record)
            if self.handler.enabled(converted.level):
                self.handler.handle(converted)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def with_attrs(self, attrs: Iterable[Attr]) -> "PrettyLoggingHandler":
        """Return a bridge whose handler carries additional attributes."""
        return self.__class__(self.handler.with_attrs(attrs), level=self.level)

    def with_group(self, name: str) -> "PrettyLoggingHandler":
        """Return a bridge whose handler nests later attributes under ``name``."""
        return self.__class__(self.handler.with_group(name), level=self.level)


def record_from_log_record(record: logging.LogRecord) -> Record:
    """Convert a LogRecord to a Record."""
    attrs = attrs_from_kwargs(extra_fields(record))
    if record.exc_info and record.exc_info[1] is not None:
        attrs += (Attr("error", record.exc_info[1]),)

    source = None
    if record.pathname and record.lineno:
        source = Source(file=record.pathname, line=record.lineno, function=record.funcName or "")

    return Record(
        message=record.getMessage(),
        level=record.levelno,
        time=datetime.fromtimestamp(record.created),
        attrs=attrs,
        source=source,
    )
