"""
ff-pretty-logger: colorized, human-readable log lines for Fenixflow applications.

Provides a pretty handler with a JSON fallback, plus structlog and stdlib
logging front ends.
"""

__version__ = "0.1.0"

from .base import BaseHandler
from .colors import ColorPolicy
from .config import configure_logging, get_logger
from .handler import PrettyHandler
from .json import JSONHandler
from .logger import PrettyLogger
from .options import HandlerOptions
from .record import Attr, Group, LogValuer, Record, Source, group
from .stdlib import PrettyLoggingHandler

__all__ = [
    "Attr",
    "BaseHandler",
    "ColorPolicy",
    "Group",
    "HandlerOptions",
    "JSONHandler",
    "LogValuer",
    "PrettyHandler",
    "PrettyLogger",
    "PrettyLoggingHandler",
    "Record",
    "Source",
    "configure_logging",
    "get_logger",
    "group",
]
