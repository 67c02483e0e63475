"""
Tests for the logger front ends and configuration.
"""

import io
import json
import logging
import os
from unittest.mock import Mock, patch

import pytest
import structlog
from ff_pretty_logger import (
    Group,
    JSONHandler,
    PrettyHandler,
    PrettyLogger,
    PrettyLoggingHandler,
    configure_logging,
    get_logger,
)
from ff_pretty_logger.config import get_config
from ff_pretty_logger.processors import TIME_KEY, HandlerProcessor, record_from_event_dict
from ff_pretty_logger.utils import LOGGING_INTERNAL_FIELDS, RESERVED_FIELDS


class FailingSink:
    def write(self, data):
        raise OSError("disk full")


class TestPrettyLogger:
    """Test the structlog based PrettyLogger."""

    def test_console_output(self, stream):
        """Test that the logger writes a pretty line to its stream."""
        logger = PrettyLogger("test", stream=stream, no_color=True)

        logger.info("Test message", user_id=123)

        output = stream.getvalue()
        assert " INFO > Test message logger=test user_id=123\n" in output

    def test_log_levels(self, stream):
        """Test every level method."""
        logger = PrettyLogger("test", stream=stream, no_color=True, min_level="DEBUG")

        logger.debug("debug message")
        logger.info("info message")
        logger.warning("warning message")
        logger.error("error message")
        logger.critical("critical message")

        lines = stream.getvalue().splitlines()
        assert len(lines) == 5
        for line, level in zip(lines, ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]):
            assert f" {level} > {level.lower()} message" in line

    def test_min_level_filters(self, stream):
        """Test that events below the minimum level are dropped."""
        logger = PrettyLogger("test", stream=stream, no_color=True)

        logger.debug("hidden")
        assert stream.getvalue() == ""
        assert not logger.is_enabled_for("debug")
        assert logger.is_enabled_for("info")

    def test_context_binding(self, stream):
        """Test that bind returns a new logger and leaves the original alone."""
        logger = PrettyLogger("test", stream=stream, no_color=True)

        logger2 = logger.bind(user_id=123, request_id="abc")
        assert logger2.context["user_id"] == 123
        assert "user_id" not in logger.context

        logger2.info("bound")
        logger.info("unbound")
        bound, unbound = stream.getvalue().splitlines()
        assert "request_id=abc user_id=123" in bound
        assert "user_id" not in unbound

    def test_group_scope(self, stream):
        """Test that fields logged inside a group get dotted keys."""
        logger = PrettyLogger("test", stream=stream, no_color=True)

        logger.group("request").bind(id="abc").info("handled", status=200)

        assert "logger=test request.id=abc request.status=200" in stream.getvalue()

    def test_group_values(self, stream):
        """Test group attributes passed as fields."""
        logger = PrettyLogger("test", stream=stream, no_color=True)

        logger.info("m", db=Group.of(host="localhost", port=5432), empty=Group())

        output = stream.getvalue()
        assert "db.host=localhost db.port=5432" in output
        assert "empty" not in output

    def test_exception_logging(self, stream):
        """Test that the active exception is logged as the error field."""
        logger = PrettyLogger("test", stream=stream, no_color=True)

        try:
            raise ValueError("test error")
        except ValueError:
            logger.exception("error occurred")

        assert " ERROR > error occurred error=test error logger=test" in stream.getvalue()

    def test_positional_args(self, stream):
        """Test %-style message formatting."""
        logger = PrettyLogger("test", stream=stream, no_color=True)

        logger.info("Message %d of %s", 5, "ten")

        assert "> Message 5 of ten" in stream.getvalue()

    def test_custom_level(self, stream):
        """Test logging at a level between the standard ones."""
        logger = PrettyLogger("test", stream=stream, no_color=True)

        logger.log(25, "notice")
        logger.log("warn", "careful")

        lines = stream.getvalue().splitlines()
        assert " INFO+5 > notice" in lines[0]
        assert " WARNING > careful" in lines[1]

    def test_source_location(self, stream):
        """Test that the caller's file and line are included when requested."""
        logger = PrettyLogger("test", stream=stream, no_color=True, add_source=True)

        logger.info("with source")

        assert "test_loggers.py:" in stream.getvalue()

    def test_extra_processors(self, stream):
        """Test that extra structlog processors run before the handler."""

        def add_request_id(logger, name, event_dict):
            event_dict["request_id"] = "req-1"
            return event_dict

        logger = PrettyLogger("test", stream=stream, no_color=True, processors=[add_request_id])
        logger.info("m")

        assert "request_id=req-1" in stream.getvalue()

    def test_shared_handler(self, stream):
        """Test that loggers can share one handler."""
        handler = PrettyHandler(stream, no_color=True)

        PrettyLogger("a", handler=handler).info("first")
        PrettyLogger("b", handler=handler).info("second")

        lines = stream.getvalue().splitlines()
        assert "logger=a" in lines[0]
        assert "logger=b" in lines[1]

    def test_json_handler(self, stream):
        """Test the logger over the JSON handler."""
        logger = PrettyLogger("test", handler=JSONHandler(stream))

        logger.info("Test event", user_id=123, status="active")

        data = json.loads(stream.getvalue())
        assert data["msg"] == "Test event"
        assert data["user_id"] == 123
        assert data["logger"] == "test"


class TestHandlerProcessor:
    """Test the structlog to Record conversion."""

    def test_record_from_event_dict(self):
        record = record_from_event_dict(
            "warning",
            {
                "event": "slow",
                TIME_KEY: 0.0,
                "pathname": "/srv/app.py",
                "lineno": 7,
                "func_name": "run",
                "duration": 1500,
            },
            add_source=True,
        )

        assert record.message == "slow"
        assert record.level == logging.WARNING
        assert record.time is not None
        assert str(record.source) == "/srv/app.py:7"
        assert [(a.key, a.value) for a in record.attrs] == [("duration", 1500)]

    def test_callsite_names_are_fields_without_source(self):
        record = record_from_event_dict(
            "info", {"event": "m", "pathname": "a.py", "lineno": 5, "func_name": "f"}
        )

        assert record.source is None
        assert [a.key for a in record.attrs] == ["pathname", "lineno", "func_name"]

    def test_user_fields_named_like_callsite_keys_are_kept(self, stream):
        logger = PrettyLogger("test", stream=stream, no_color=True)

        logger.info("m", lineno=5, pathname="a.py", func_name="f", timestamp="x")

        output = stream.getvalue()
        assert "func_name=f lineno=5 logger=test pathname=a.py timestamp=x\n" in output

    def test_non_numeric_line_number_gives_no_source(self):
        record = record_from_event_dict(
            "info", {"event": "m", "pathname": "/x", "lineno": "abc"}, add_source=True
        )

        assert record.source is None

    def test_bad_time_value_gives_no_time(self):
        assert record_from_event_dict("info", {"event": "m", TIME_KEY: "not a time"}).time is None
        assert record_from_event_dict("info", {"event": "m", TIME_KEY: 1e300}).time is None

    def test_iso_timestamp(self):
        record = record_from_event_dict("info", {"event": "m", TIME_KEY: "2025-09-16T12:00:00Z"})
        assert record.time.hour == 12

    def test_unknown_method_defaults_to_info(self):
        assert record_from_event_dict("trace", {"event": "m"}).level == logging.INFO

    def test_processor_drops_event(self, stream):
        processor = HandlerProcessor(PrettyHandler(stream, no_color=True))

        with pytest.raises(structlog.DropEvent):
            processor(None, "info", {"event": "m", "k": 1})

        assert stream.getvalue() == "INFO > m k=1\n"


class TestStdlibBridge:
    """Test the logging.Handler bridge."""

    @pytest.fixture
    def std_logger(self, request):
        logger = logging.getLogger(f"ff_pretty_logger.tests.{request.node.name}")
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        yield logger
        logger.handlers.clear()

    def test_extra_fields(self, std_logger, stream):
        std_logger.addHandler(PrettyLoggingHandler(stream=stream, no_color=True))

        std_logger.warning("slow %s", "call", extra={"duration": 1500, "endpoint": "/api"})

        assert " WARNING > slow call duration=1500 endpoint=/api\n" in stream.getvalue()

    def test_exception(self, std_logger, stream):
        std_logger.addHandler(PrettyLoggingHandler(stream=stream, no_color=True))

        try:
            raise RuntimeError("boom")
        except RuntimeError:
            std_logger.exception("failed")

        assert " ERROR > failed error=boom" in stream.getvalue()

    def test_source(self, std_logger, stream):
        std_logger.addHandler(PrettyLoggingHandler(stream=stream, no_color=True, add_source=True))

        std_logger.info("with source")

        assert "test_loggers.py:" in stream.getvalue()

    def test_min_level(self, std_logger, stream):
        std_logger.addHandler(PrettyLoggingHandler(stream=stream, no_color=True))

        std_logger.debug("hidden")

        assert stream.getvalue() == ""

    def test_with_group(self, std_logger, stream):
        bridge = PrettyLoggingHandler(stream=stream, no_color=True).with_group("job")
        std_logger.addHandler(bridge)

        std_logger.info("done", extra={"id": 9})

        assert "job.id=9" in stream.getvalue()

    def test_write_failure_goes_to_handle_error(self, std_logger):
        bridge = PrettyLoggingHandler(stream=FailingSink(), no_color=True)
        bridge.handleError = Mock()
        std_logger.addHandler(bridge)

        std_logger.info("lost")

        bridge.handleError.assert_called_once()


class TestReservedFields:
    """Test the LogRecord field tables."""

    def test_reserved_fields_uses_logging_internals(self):
        assert RESERVED_FIELDS == frozenset(LOGGING_INTERNAL_FIELDS)

    def test_reserved_fields_is_frozenset(self):
        assert isinstance(RESERVED_FIELDS, frozenset)

    def test_known_internals(self):
        for field in ("name", "msg", "args", "levelno", "pathname", "message", "asctime"):
            assert field in RESERVED_FIELDS


class TestConfiguration:
    """Test the configuration system."""

    def test_configure_logging(self):
        """Test global configuration."""
        configure_logging(
            level="debug",
            format="JSON",
            no_color=True,
            add_source=True,
            use_env=False,
        )

        config = get_config()

        assert config["level"] == "DEBUG"
        assert config["format"] == "json"
        assert config["no_color"] is True
        assert config["add_source"] is True

    def test_environment_variables(self):
        """Test configuration from environment variables."""
        with patch.dict(
            os.environ,
            {
                "FF_LOG_LEVEL": "error",
                "FF_LOG_FORMAT": "json",
                "FF_LOG_NO_COLOR": "true",
                "FF_LOG_ADD_SOURCE": "1",
                "FF_LOG_TIME_FORMAT": "%H:%M",
            },
        ):
            configure_logging(use_env=True)

            config = get_config()

            assert config["level"] == "ERROR"
            assert config["format"] == "json"
            assert config["no_color"] is True
            assert config["add_source"] is True
            assert config["time_format"] == "%H:%M"

    def test_config_file(self, tmp_path):
        """Test configuration from a JSON file, overridden by arguments."""
        config_file = tmp_path / "logging.json"
        config_file.write_text(json.dumps({"level": "warning", "time_format": "%H:%M:%S"}))

        configure_logging(config_file=config_file, time_format="%H", use_env=False)

        config = get_config()
        assert config["level"] == "WARNING"
        assert config["time_format"] == "%H"

    def test_get_logger_with_config(self):
        """Test get_logger respects configuration."""
        configure_logging(format="json", level="warning", use_env=False)

        logger = get_logger("test", stream=io.StringIO())
        assert isinstance(logger.handler, JSONHandler)
        assert logger.handler.options.min_level == logging.WARNING

        # Can override type
        logger2 = get_logger("test2", logger_type="pretty", stream=io.StringIO())
        assert isinstance(logger2.handler, PrettyHandler)

        # Handler options can be overridden per logger
        logger3 = get_logger("test3", logger_type="console", min_level="debug")
        assert logger3.handler.options.min_level == logging.DEBUG

    def test_get_logger_level_colors(self, stream):
        """Test level colors from the global configuration."""
        configure_logging(level_colors={"INFO": "\033[32m"}, use_env=False)

        logger = get_logger("test", stream=stream)
        logger.info("m")

        assert "\033[32mINFO\033[0m" in stream.getvalue()

    def test_unknown_logger_type(self):
        with pytest.raises(ValueError, match="Unknown logger type"):
            get_logger("test", logger_type="xml")

    def test_structlog_routed_through_handler(self, capsys):
        """Test that configure_logging routes structlog.get_logger() output."""
        configure_logging(format="pretty", no_color=True, use_env=False)

        structlog.get_logger().warning("hello", a=1)
        structlog.get_logger().debug("hidden")

        out = capsys.readouterr().out
        assert " WARNING > hello a=1\n" in out
        assert "hidden" not in out
