"""Logger contract.

Application code depends on :class:`Logger` only; the concrete engine behind
it is chosen once at wiring time and passed to components that need to log.
"""

import logging
from collections.abc import Mapping
from enum import IntEnum
from typing import Any, NoReturn, Protocol, TypeAlias, runtime_checkable

# Key-value pairs attached to every record emitted through a logger
Fields: TypeAlias = Mapping[str, Any]


class Level(IntEnum):
    """Record severities, numerically compatible with the standard library."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @property
    def label(self) -> str:
        """Name written to the ``level`` key of a record."""
        return self.name


@runtime_checkable
class Logger(Protocol):
    """Contract for every engine-backed logger."""

    def debug(self, *args: Any) -> None:
        """Concatenate ``args`` and log the message at DEBUG."""
        ...

    def info(self, *args: Any) -> None:
        """Concatenate ``args`` and log the message at INFO."""
        ...

    def warn(self, *args: Any) -> None:
        """Concatenate ``args`` and log the message at WARN."""
        ...

    def error(self, *args: Any) -> None:
        """Concatenate ``args`` and log the message at ERROR."""
        ...

    def panic(self, *args: Any) -> NoReturn:
        """Concatenate ``args``, log the message at ERROR, then raise ``LoggerPanic``."""
        ...

    def fatal(self, *args: Any) -> NoReturn:
        """Concatenate ``args``, log the message at ERROR, then exit with status 1."""
        ...

    def debugf(self, template: str, *args: Any) -> None:
        """Log ``template % args`` at DEBUG."""
        ...

    def infof(self, template: str, *args: Any) -> None:
        """Log ``template % args`` at INFO."""
        ...

    def warnf(self, template: str, *args: Any) -> None:
        """Log ``template % args`` at WARN."""
        ...

    def errorf(self, template: str, *args: Any) -> None:
        """Log ``template % args`` at ERROR."""
        ...

    def panicf(self, template: str, *args: Any) -> NoReturn:
        """Log ``template % args`` at ERROR, then raise ``LoggerPanic``."""
        ...

    def fatalf(self, template: str, *args: Any) -> NoReturn:
        """Log ``template % args`` at ERROR, then exit with status 1."""
        ...

    def with_fields(self, fields: Fields | None = None, /, **kwargs: Any) -> "Logger":
        """Return a new logger whose records also carry ``fields``.

        Keyword arguments are merged over ``fields``. On key collision with
        fields already attached to the receiver, the new values win. The
        receiver is never modified.
        """
        ...
