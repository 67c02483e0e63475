"""
ANSI color policy for console output.
"""

from types import MappingProxyType
from typing import Mapping

from .levels import CRITICAL, DEBUG, ERROR, INFO, WARNING

RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
BOLD_RED = "\033[1;31m"
BOLD_WHITE = "\033[1;37m"

DEFAULT_LEVEL_COLORS: Mapping[int, str] = MappingProxyType(
    {
        DEBUG: MAGENTA,
        INFO: BLUE,
        WARNING: YELLOW,
        ERROR: RED,
        CRITICAL: BOLD_RED,
    }
)

# Segment categories of a rendered line
KEY = "key"
VALUE = "value"
ERROR_VALUE = "error"
MESSAGE = "message"
SOURCE = "source"

CATEGORY_COLORS: Mapping[str, str] = MappingProxyType(
    {
        KEY: CYAN,
        VALUE: WHITE,
        ERROR_VALUE: BOLD_RED,
        MESSAGE: BOLD_WHITE,
        SOURCE: BOLD_WHITE,
    }
)


class ColorPolicy:
    """
    Decorates text segments with escape codes.

    When disabled every method returns its input unchanged, so a line
    rendered without colors never contains an escape byte.
    """

    def __init__(
        self,
        enabled: bool = True,
        level_colors: Mapping[int, str] | None = None,
        category_colors: Mapping[str, str] = CATEGORY_COLORS,
    ):
        self.enabled = enabled
        if level_colors is None:
            level_colors = DEFAULT_LEVEL_COLORS
        self.level_colors: Mapping[int, str] = MappingProxyType(dict(level_colors))
        self.category_colors: Mapping[str, str] = MappingProxyType(dict(category_colors))

    def wrap(self, category: str, text: str) -> str:
        """Color text with the escape code of a segment category."""
        if not self.enabled:
            return text
        color = self.category_colors.get(category)
        if color is None:
            return text
        return colorize(color, text)

    def level(self, level: int, text: str) -> str:
        """Color a level name; levels missing from the table stay plain."""
        if not self.enabled:
            return text
        color = self.level_colors.get(level)
        if color is None:
            return text
        return colorize(color, text)

    def __repr__(self) -> str:
        return f"ColorPolicy(enabled={self.enabled!r})"


def colorize(color: str, text: str) -> str:
    return color + text + RESET
