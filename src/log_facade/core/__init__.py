from .base import ApplicationError, ErrorCode, ErrorDetails, ErrorLevel, LoggerErrorDetails
from .config import LoggingSettings
from .errors import ConfigurationError, LoggerConstructionError, LoggerPanic
