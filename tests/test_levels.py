"""
Tests for level parsing and naming.
"""

import pytest
from ff_pretty_logger.levels import CRITICAL, DEBUG, ERROR, INFO, WARNING, level_name, parse_level


@pytest.mark.parametrize(
    "value, expected",
    [
        ("INFO", INFO),
        ("debug", DEBUG),
        ("Warn", WARNING),
        ("warning", WARNING),
        ("exception", ERROR),
        ("fatal", CRITICAL),
        (25, 25),
        ("15", 15),
    ],
)
def test_parse_level(value, expected):
    assert parse_level(value) == expected


@pytest.mark.parametrize("value", ["loud", "", True])
def test_parse_level_rejects_unknown(value):
    with pytest.raises(ValueError):
        parse_level(value)


@pytest.mark.parametrize(
    "level, expected",
    [
        (DEBUG, "DEBUG"),
        (WARNING, "WARNING"),
        (INFO + 2, "INFO+2"),
        (5, "DEBUG-5"),
        (CRITICAL + 10, "CRITICAL+10"),
    ],
)
def test_level_name(level, expected):
    assert level_name(level) == expected
