"""Structured logging facade over structlog."""

from .core import ConfigurationError, LoggerConstructionError, LoggerPanic, LoggingSettings
from .logging import (
    Fields,
    Level,
    Logger,
    StructlogLogEntry,
    StructlogLogger,
    create_engine,
    new_structlog_logger,
    setup_logging,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Fields",
    "Level",
    "Logger",
    "LoggerConstructionError",
    "LoggerPanic",
    "LoggingSettings",
    "StructlogLogEntry",
    "StructlogLogger",
    "create_engine",
    "new_structlog_logger",
    "setup_logging",
]
