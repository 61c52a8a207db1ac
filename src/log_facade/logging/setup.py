"""Engine construction with structlog and optional Logfire integration.

The engine is built per call and never installed globally: ``setup_logging``
returns a Logger that the application passes to the components that need it.
Settings come from ``LoggingSettings`` (``LOG_*`` environment variables or
``.env``).
"""

import sys
from typing import TextIO

import logfire
import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor, WrappedLogger
from structlog.typing import FilteringBoundLogger

from log_facade.core.config import LoggingSettings
from log_facade.core.errors import ConfigurationError

from .interface import Level, Logger
from .structlog_logger import new_structlog_logger

# structlog method names mapped to the level names written to records
LEVEL_NAMES = {
    "debug": Level.DEBUG.label,
    "info": Level.INFO.label,
    "warn": Level.WARN.label,
    "warning": Level.WARN.label,
    "error": Level.ERROR.label,
    "exception": Level.ERROR.label,
}


def add_level_name(
    _logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add the upper-case level name (``DEBUG``, ``INFO``, ``WARN``, ``ERROR``)."""
    event_dict["level"] = LEVEL_NAMES.get(method_name, method_name.upper())
    return event_dict


def build_processors(settings: LoggingSettings) -> list[Processor]:
    """Assemble the processor chain that stamps, renders and writes records.

    JSON output carries the keys ``time``, ``level`` and ``msg`` alongside the
    record's attributes.
    """
    json_output = settings.format == "json"

    processors: list[Processor] = [
        # Merge context from contextvars
        structlog.contextvars.merge_contextvars,
        add_level_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="time" if json_output else "timestamp"),
        # Stack trace formatting
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info if json_output else structlog.dev.set_exc_info,
    ]

    if settings.logfire_enabled:
        # Must come before the final renderer
        processors.append(logfire.StructlogProcessor())

    if json_output:
        processors.append(structlog.processors.EventRenamer("msg"))
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Default styles are keyed by lower-case method names
        level_styles = {
            name.upper(): style
            for name, style in structlog.dev.ConsoleRenderer.get_default_level_styles(settings.colors).items()
        }
        processors.append(structlog.dev.ConsoleRenderer(colors=settings.colors, level_styles=level_styles))

    return processors


def create_engine(
    settings: LoggingSettings | None = None,
    stream: TextIO | None = None,
) -> FilteringBoundLogger:
    """Create a structlog logger writing to ``stream`` (stdout by default).

    Args:
        settings: Logging settings; loaded from the environment when omitted.
        stream: Text sink every rendered record is printed to.

    Returns:
        FilteringBoundLogger: A bound logger dropping records below ``settings.level``.
    """
    settings = settings or load_settings()

    return structlog.wrap_logger(
        structlog.PrintLogger(stream if stream is not None else sys.stdout),
        processors=build_processors(settings),
        wrapper_class=structlog.make_filtering_bound_logger(settings.level),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def load_settings() -> LoggingSettings:
    """Read ``LoggingSettings`` from the environment."""
    try:
        return LoggingSettings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid logging configuration: {e.error_count()} error(s)",
            details={"source": __name__, "operation": "load_settings"},
        ) from e


def setup_logging(
    settings: LoggingSettings | None = None,
    stream: TextIO | None = None,
) -> Logger:
    """Set up a Logger backed by structlog, and Logfire when enabled.

    Logfire is configured from the settings:
    - LOG_LOGFIRE_ENABLED: Add the Logfire processor to the chain
    - LOG_LOGFIRE_TOKEN: Authentication token
    - LOG_SERVICE_NAME: Service name

    Returns:
        Logger: The base logger for the application to pass around.
    """
    settings = settings or load_settings()

    if settings.logfire_enabled:
        logfire.configure(
            service_name=settings.service_name,
            token=settings.logfire_token,
            send_to_logfire="if-token-present",
            console=False,
        )

    logger = new_structlog_logger(
        create_engine(settings, stream),
        add_source=settings.add_source,
    )
    logger.debugf("Logging configured: level=%s format=%s", settings.level, settings.format)
    return logger
