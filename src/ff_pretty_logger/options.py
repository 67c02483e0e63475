"""
Handler options.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .colors import DEFAULT_LEVEL_COLORS
from .levels import INFO, parse_level

# Kitchen clock: 03:04PM
DEFAULT_TIME_FORMAT = "%I:%M%p"


class HandlerOptions(BaseModel):
    """
    Options shared by a handler and every handler derived from it.

    Attributes:
        time_format: strftime format for the timestamp
        no_color: Disable ANSI colors entirely
        level_colors: Level to escape code table; replaces the default
            table when given. Keys may be level names or numbers.
        add_source: Include the ``file:line`` of the logging call
        min_level: Lowest level that is handled
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    time_format: str = DEFAULT_TIME_FORMAT
    no_color: bool = False
    level_colors: dict[int, str] = Field(default_factory=lambda: dict(DEFAULT_LEVEL_COLORS))
    add_source: bool = False
    min_level: int = INFO

    @field_validator("time_format", mode="before")
    @classmethod
    def default_time_format(cls, v: Any) -> Any:
        """An empty format means the default one."""
        if v is None or v == "":
            return DEFAULT_TIME_FORMAT
        return v

    @field_validator("level_colors", mode="before")
    @classmethod
    def normalize_level_colors(cls, v: Any) -> Any:
        """Accept level names as keys."""
        if v is None:
            return dict(DEFAULT_LEVEL_COLORS)
        return {parse_level(level): color for level, color in dict(v).items()}

    @field_validator("min_level", mode="before")
    @classmethod
    def normalize_min_level(cls, v: Any) -> Any:
        """Accept level names."""
        if v is None:
            return INFO
        return parse_level(v)
