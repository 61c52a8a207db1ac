"""Specific error types for the logging facade."""

from .base import ApplicationError, ErrorCode, ErrorLevel, LoggerErrorDetails


class LoggerConstructionError(ApplicationError):
    """The engine handed to a logger constructor cannot back a Logger."""

    def __init__(self, message: str, details: LoggerErrorDetails | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.LOGGER_CONSTRUCTION,
            level=ErrorLevel.ERROR,
            details=details or LoggerErrorDetails(
                source="logger",
                operation="construct",
            )
        )


class LoggerPanic(ApplicationError):
    """Raised by ``panic``/``panicf`` after the record has been handed to the engine.

    The formatted log message is the payload, available as ``message`` and
    as ``str(exc)``.
    """

    def __init__(self, message: str, details: LoggerErrorDetails | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.PANIC,
            level=ErrorLevel.CRITICAL,
            details=details or LoggerErrorDetails(
                source="logger",
                operation="panic",
            )
        )


class ConfigurationError(ApplicationError):
    """Invalid logging configuration."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.CONFIG_INVALID,
            level=ErrorLevel.ERROR,
            details=details
        )
