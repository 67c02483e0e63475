"""
Scoped logger facade built on structlog.
"""

import copy
from typing import Any

import structlog
from structlog.types import Processor

from .base import BaseHandler
from .handler import PrettyHandler
from .levels import CRITICAL, DEBUG, ERROR, INFO, WARNING, parse_level
from .processors import LEVEL_KEY, TIME_KEY, HandlerProcessor
from .record import attrs_from_kwargs


class PrettyLogger:
    """
    A scoped logger that writes through a handler.

    Each instance has its own context and processor chain. Context is bound
    to the handler as attributes, so every line carries it. ``bind`` and
    ``group`` return new loggers; the original is never changed.

    Example:
        logger = PrettyLogger("app", context={"env": "dev"})
        logger.info("service started", port=8080)
        request_logger = logger.group("request").bind(id="abc")
    """

    def __init__(
        self,
        name: str,
        handler: BaseHandler | None = None,
        context: dict[str, Any] | None = None,
        processors: list[Processor] | None = None,
        stream=None,
        **options: Any,
    ):
        """
        Initialize a scoped logger.

        Args:
            name: Logger name/scope identifier
            handler: Handler to write through (default: a PrettyHandler)
            context: Initial context dictionary
            processors: Extra structlog processors run before the handler
            stream: Output stream for the default handler (default: sys.stdout)
            **options: Handler options for the default handler
        """
        self.name = name
        self._context = dict(context or {})
        self._context["logger"] = name
        self._extra_processors = list(processors or [])

        if handler is None:
            handler = PrettyHandler(stream, **options)
        self.handler = handler.with_attrs(attrs_from_kwargs(self._context))

        self._logger = self._build_logger()

    def _build_logger(self) -> Any:
        processors: list[Processor] = [structlog.processors.TimeStamper(fmt=None, key=TIME_KEY)]

        if self.handler.options.add_source:
            processors.append(
                structlog.processors.CallsiteParameterAdder(
                    parameters=[
                        structlog.processors.CallsiteParameter.PATHNAME,
                        structlog.processors.CallsiteParameter.LINENO,
                        structlog.processors.CallsiteParameter.FUNC_NAME,
                    ],
                    additional_ignores=[__package__],
                )
            )

        processors.extend(self._extra_processors)
        processors.append(HandlerProcessor(self.handler))

        return structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=processors,
            wrapper_class=structlog.BoundLogger,
        )

    def _derive(self, handler: BaseHandler, context: dict[str, Any]) -> "PrettyLogger":
        new_logger = copy.copy(self)
        new_logger.handler = handler
        new_logger._context = context
        new_logger._logger = new_logger._build_logger()
        return new_logger

    def bind(self, **kwargs: Any) -> "PrettyLogger":
        """
        Bind additional context to the logger.
        Returns a new logger instance with the bound context.

        Args:
            **kwargs: Key-value pairs to bind to the logger context

        Returns:
            New PrettyLogger instance with bound context
        """
        handler = self.handler.with_attrs(attrs_from_kwargs(kwargs))
        return self._derive(handler, {**self._context, **kwargs})

    def group(self, name: str) -> "PrettyLogger":
        """
        Return a logger whose later context and event fields are nested
        under ``name`` (rendered as ``name.key=value``).
        """
        return self._derive(self.handler.with_group(name), dict(self._context))

    def is_enabled_for(self, level: str | int) -> bool:
        """Whether an event at this level would be written."""
        return self.handler.enabled(parse_level(level))

    def debug(self, event: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug message."""
        self.log(DEBUG, event, *args, **kwargs)

    def info(self, event: str, *args: Any, **kwargs: Any) -> None:
        """Log an info message."""
        self.log(INFO, event, *args, **kwargs)

    def warning(self, event: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning message."""
        self.log(WARNING, event, *args, **kwargs)

    warn = warning

    def error(self, event: str, *args: Any, **kwargs: Any) -> None:
        """Log an error message."""
        self.log(ERROR, event, *args, **kwargs)

    def critical(self, event: str, *args: Any, **kwargs: Any) -> None:
        """Log a critical message."""
        self.log(CRITICAL, event, *args, **kwargs)

    def exception(self, event: str, *args: Any, **kwargs: Any) -> None:
        """Log an error with the exception being handled as the ``error`` field."""
        kwargs.setdefault("exc_info", True)
        self.log(ERROR, event, *args, **kwargs)

    def log(self, level: str | int, event: str, /, *args: Any, **kwargs: Any) -> None:
        """
        Log at a specific level.

        Args:
            level: Level name or number
            event: Event/message to log, ``%``-formatted with ``args`` if any
            **kwargs: Additional fields
        """
        level = parse_level(level)
        if not self.handler.enabled(level):
            return
        if args:
            event = event % args
        kwargs[LEVEL_KEY] = level
        self._logger.msg(event, **kwargs)

    @property
    def context(self) -> dict[str, Any]:
        """Get the current logger context."""
        return self._context.copy()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, context={self._context!r})"
