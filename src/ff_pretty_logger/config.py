"""
Configuration system for ff-pretty-logger.

Supports environment variables, config files, and programmatic configuration.
"""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict

from .base import BaseHandler
from .handler import PrettyHandler
from .json import JSONHandler
from .levels import parse_level
from .logger import PrettyLogger
from .options import DEFAULT_TIME_FORMAT
from .processors import TIME_KEY, HandlerProcessor

_DEFAULT_CONFIG: dict[str, Any] = {
    "level": "INFO",
    "format": "pretty",
    "time_format": DEFAULT_TIME_FORMAT,
    "no_color": False,
    "add_source": False,
    "level_colors": None,
}

# Global configuration
_GLOBAL_CONFIG: dict[str, Any] = dict(_DEFAULT_CONFIG)

# Handler type mapping
_HANDLER_TYPES: dict[str, type[BaseHandler]] = {
    "pretty": PrettyHandler,
    "console": PrettyHandler,  # Alias for pretty
    "json": JSONHandler,
}


class LogSettings(BaseSettings):
    """Logging settings read from ``FF_LOG_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FF_LOG_",
        case_sensitive=False,
        extra="ignore",
    )

    level: str | None = None
    format: str | None = None
    time_format: str | None = None
    no_color: bool | None = None
    add_source: bool | None = None


def configure_logging(
    level: str | int | None = None,
    format: str | None = None,
    time_format: str | None = None,
    no_color: bool | None = None,
    add_source: bool | None = None,
    level_colors: dict[str | int, str] | None = None,
    config_file: str | Path | None = None,
    use_env: bool = True,
) -> None:
    """
    Configure global logging settings.

    Later sources win: config file, then environment, then arguments.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format (pretty, console, json)
        time_format: strftime format for timestamps
        no_color: Disable colors in pretty output
        add_source: Include the source location of each call
        level_colors: Level to escape code table, replaces the default one
        config_file: Path to JSON config file
        use_env: Whether to read from environment variables
    """
    global _GLOBAL_CONFIG

    # Load from config file if provided
    if config_file:
        config_path = Path(config_file)
        if config_path.exists():
            with open(config_path) as f:
                file_config = json.load(f)
                _GLOBAL_CONFIG.update(_normalize(file_config))

    # Load from environment variables if enabled
    if use_env:
        _GLOBAL_CONFIG.update(_load_env_config())

    # Apply explicit arguments (highest priority)
    _GLOBAL_CONFIG.update(
        _normalize(
            {
                "level": level,
                "format": format,
                "time_format": time_format,
                "no_color": no_color,
                "add_source": add_source,
                "level_colors": level_colors,
            }
        )
    )

    # Configure structlog globally
    _configure_structlog()


def _normalize(values: dict[str, Any]) -> dict[str, Any]:
    config = {k: v for k, v in values.items() if k in _DEFAULT_CONFIG and v is not None}
    if "level" in config:
        level = config["level"]
        config["level"] = level.upper() if isinstance(level, str) else level
    if "format" in config:
        config["format"] = config["format"].lower()
    return config


def _load_env_config() -> dict[str, Any]:
    """Load configuration from environment variables."""
    settings = LogSettings()
    return _normalize(settings.model_dump(exclude_none=True))


def _handler_options() -> dict[str, Any]:
    options = {
        "min_level": parse_level(_GLOBAL_CONFIG["level"]),
        "time_format": _GLOBAL_CONFIG["time_format"],
        "no_color": _GLOBAL_CONFIG["no_color"],
        "add_source": _GLOBAL_CONFIG["add_source"],
    }
    if _GLOBAL_CONFIG.get("level_colors") is not None:
        options["level_colors"] = _GLOBAL_CONFIG["level_colors"]
    return options


def _handler_class(format: str) -> type[BaseHandler]:
    handler_class = _HANDLER_TYPES.get(format.lower())
    if handler_class is None:
        raise ValueError(f"Unknown logger type: {format}")
    return handler_class


def _configure_structlog() -> None:
    """Route ``structlog.get_logger()`` through a handler built from the global settings."""
    options = _handler_options()
    handler = _handler_class(_GLOBAL_CONFIG["format"])(**options)

    processors = [structlog.processors.TimeStamper(fmt=None, key=TIME_KEY)]
    if options["add_source"]:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.PATHNAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )
    processors.append(HandlerProcessor(handler))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(options["min_level"]),
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str, logger_type: str | None = None, **kwargs: Any) -> PrettyLogger:
    """
    Get a logger instance based on configuration.

    Args:
        name: Logger name/scope
        logger_type: Override output type (pretty, console, json)
        **kwargs: ``stream``, ``context``, ``processors`` or handler options

    Returns:
        PrettyLogger writing through the configured handler type

    Example:
        # Uses global config
        logger = get_logger("my_service")

        # Override type
        logger = get_logger("my_service", logger_type="json")

        # With custom settings
        logger = get_logger("my_service", add_source=True)
    """
    handler_class = _handler_class(logger_type or _GLOBAL_CONFIG.get("format", "pretty"))

    stream = kwargs.pop("stream", None)
    context = kwargs.pop("context", None)
    processors = kwargs.pop("processors", None)

    handler = handler_class(stream, **{**_handler_options(), **kwargs})
    return PrettyLogger(name, handler=handler, context=context, processors=processors)


def get_config() -> dict[str, Any]:
    """Get current global configuration."""
    return _GLOBAL_CONFIG.copy()


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _GLOBAL_CONFIG
    _GLOBAL_CONFIG = dict(_DEFAULT_CONFIG)
    structlog.reset_defaults()
