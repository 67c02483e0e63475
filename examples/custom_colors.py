#!/usr/bin/env python3
"""
Example of replacing the level color table.
"""

import logging

from ff_pretty_logger import PrettyLoggingHandler

LEVEL_COLORS = {
    "DEBUG": "\033[36m",  # cyan
    "INFO": "\033[32m",  # green
    "WARNING": "\033[33m",  # yellow
    "ERROR": "\033[1;35m",  # bold magenta
}


def main():
    logger = logging.getLogger("custom_colors")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(
        PrettyLoggingHandler(level_colors=LEVEL_COLORS, min_level="DEBUG", add_source=True)
    )

    logger.debug("debug with cyan")
    logger.error("error with bold magenta", extra={"code": "E42"})
    # CRITICAL is not in the table, so it is printed without color
    logger.critical("critical without color")


if __name__ == "__main__":
    main()
