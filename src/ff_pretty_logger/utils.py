"""
Helpers for bridging ``logging.LogRecord`` objects.
"""

import logging

# Attributes every LogRecord carries, plus the ones Formatter adds
LOGGING_INTERNAL_FIELDS = tuple(
    sorted(
        {
            *logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__,
            "message",
            "asctime",
        }
    )
)

RESERVED_FIELDS = frozenset(LOGGING_INTERNAL_FIELDS)


def extra_fields(record: logging.LogRecord) -> dict:
    """Fields passed through ``extra=``: everything that is not a LogRecord internal."""
    return {k: v for k, v in record.__dict__.items() if k not in RESERVED_FIELDS}
