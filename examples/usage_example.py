#!/usr/bin/env python3
"""
Example usage of ff-pretty-logger showing the scoped logger, groups and
nested data.
"""

from ff_pretty_logger import PrettyLogger


def main():
    logger = PrettyLogger("app.main", add_source=True, min_level="DEBUG")

    logger.debug("this is a debug message", detail="some debug info")
    logger.info("application started", version="1.0.0", env="development")
    logger.warning("resource usage high", cpu=85.5, memory="3.2GB")
    logger.error(
        "failed to connect to database",
        error="connection refused",
        retry_count=3,
        db_host="localhost:5432",
    )

    logger.info(
        "user logged in",
        user_id=123,
        session={
            "id": "abc-123-xyz",
            "ip": "192.168.1.1",
            "user_agent": {"browser": "Chrome", "version": "98.0.4758.102", "platform": "macOS"},
        },
    )

    request_logger = logger.group("request").bind(id="req-456", path="/api/users")
    request_logger.info("request completed", status_code=200, duration_ms=25)


if __name__ == "__main__":
    main()
