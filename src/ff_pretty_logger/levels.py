"""
Log levels for ff-pretty-logger.

Levels are plain integers on the standard ``logging`` scale, so records
coming from the stdlib bridge need no conversion. Any integer is a valid
level; values between the standard ones render with an offset.
"""

import logging

DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

_STANDARD_LEVELS: tuple[tuple[int, str], ...] = (
    (DEBUG, "DEBUG"),
    (INFO, "INFO"),
    (WARNING, "WARNING"),
    (ERROR, "ERROR"),
    (CRITICAL, "CRITICAL"),
)

_NAME_TO_LEVEL: dict[str, int] = {
    **{name: level for level, name in _STANDARD_LEVELS},
    "WARN": WARNING,
    "FATAL": CRITICAL,
    # structlog method names
    "EXCEPTION": ERROR,
    "MSG": INFO,
}


def parse_level(level: str | int) -> int:
    """
    Convert a level given as a name or number to its integer value.

    Args:
        level: An int, a numeric string, or a case-insensitive level name
            ("debug", "INFO", "warn", ...)

    Returns:
        Integer level

    Raises:
        ValueError: If the name is not a known level
    """
    if isinstance(level, bool):
        raise ValueError(f"Invalid log level: {level!r}")
    if isinstance(level, int):
        return level

    text = str(level).strip()
    if text.lstrip("-").isdigit():
        return int(text)

    try:
        return _NAME_TO_LEVEL[text.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}") from None


def level_name(level: int) -> str:
    """
    Display name for a level.

    Standard levels use their name; other values are shown relative to
    the closest standard level below them, e.g. ``INFO+2``. Values below
    DEBUG are shown as ``DEBUG-n``.
    """
    base, name = _STANDARD_LEVELS[0]
    if level < base:
        return f"{name}-{base - level}"

    for candidate, candidate_name in _STANDARD_LEVELS:
        if candidate > level:
            break
        base, name = candidate, candidate_name

    if level == base:
        return name
    return f"{name}+{level - base}"
