"""Structured logging facade.

Application code is written against :class:`Logger`; ``setup_logging`` and
``new_structlog_logger`` provide the structlog-backed implementation.
"""

from .interface import Fields, Level, Logger
from .setup import create_engine, setup_logging
from .structlog_logger import StructlogLogEntry, StructlogLogger, new_structlog_logger

__all__ = [
    "Fields",
    "Level",
    "Logger",
    "StructlogLogEntry",
    "StructlogLogger",
    "create_engine",
    "new_structlog_logger",
    "setup_logging",
]
