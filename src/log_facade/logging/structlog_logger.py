"""structlog-backed implementation of the Logger contract.

``StructlogLogger`` wraps one configured structlog bound logger (the engine).
``with_fields`` hands out ``StructlogLogEntry`` values that carry a read-only
field mapping and forward every record to the logger they came from.
"""

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from types import FrameType, MappingProxyType
from typing import Any, NoReturn

from structlog.typing import FilteringBoundLogger

from log_facade.core.base import LoggerErrorDetails
from log_facade.core.errors import LoggerConstructionError, LoggerPanic

from .formatting import format_message
from .interface import Fields, Level, Logger

FATAL_EXIT_CODE = 1

ExitFunc = Callable[[int], Any]

# Frames between a public logging method's caller and ``StructlogLogger._log``
_CALLER_DEPTH = 2

# Record keys written by the engine itself; fields using them move to "fields.<key>"
RESERVED_KEYS = frozenset({"event", "level", "msg", "time", "timestamp"})


def _merge_fields(fields: Fields | None, kwargs: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(fields or {})
    merged.update(kwargs)
    return merged


def _namespace_reserved(attrs: Mapping[str, Any], reserved: frozenset[str]) -> dict[str, Any]:
    return {f"fields.{key}" if key in reserved else key: value for key, value in attrs.items()}


def _source(frame: FrameType) -> dict[str, Any]:
    code = frame.f_code
    return {"function": code.co_name, "file": code.co_filename, "line": frame.f_lineno}


class _LevelMethods(ABC):
    """Level methods shared by the base logger and its field-scoped entries.

    Every public method calls ``_log`` directly, so the application frame is
    always the same number of frames above it.
    """

    @property
    @abstractmethod
    def fields(self) -> Mapping[str, Any]:
        """Fields attached to every record from this logger."""

    @abstractmethod
    def _log(
        self,
        level: Level,
        template: str | None,
        args: tuple[Any, ...],
        stacklevel: int = _CALLER_DEPTH,
    ) -> str | None:
        """Emit one record; return its message, or None when ``level`` is disabled."""

    @abstractmethod
    def _exit(self, code: int) -> NoReturn: ...

    @abstractmethod
    def with_fields(self, fields: Fields | None = None, /, **kwargs: Any) -> Logger: ...

    def _panic_error(self, message: str) -> LoggerPanic:
        details = LoggerErrorDetails(
            source=__name__,
            operation="panic",
            logger_type=type(self).__name__,
            fields=dict(self.fields),
        )
        return LoggerPanic(message, details=details)

    def debug(self, *args: Any) -> None:
        self._log(Level.DEBUG, None, args)

    def info(self, *args: Any) -> None:
        self._log(Level.INFO, None, args)

    def warn(self, *args: Any) -> None:
        self._log(Level.WARN, None, args)

    def error(self, *args: Any) -> None:
        self._log(Level.ERROR, None, args)

    def panic(self, *args: Any) -> NoReturn:
        message = self._log(Level.ERROR, None, args)
        if message is None:
            message = format_message(None, args)
        raise self._panic_error(message)

    def fatal(self, *args: Any) -> NoReturn:
        self._log(Level.ERROR, None, args)
        self._exit(FATAL_EXIT_CODE)

    def debugf(self, template: str, *args: Any) -> None:
        self._log(Level.DEBUG, template, args)

    def infof(self, template: str, *args: Any) -> None:
        self._log(Level.INFO, template, args)

    def warnf(self, template: str, *args: Any) -> None:
        self._log(Level.WARN, template, args)

    def errorf(self, template: str, *args: Any) -> None:
        self._log(Level.ERROR, template, args)

    def panicf(self, template: str, *args: Any) -> NoReturn:
        message = self._log(Level.ERROR, template, args)
        if message is None:
            message = format_message(template, args)
        raise self._panic_error(message)

    def fatalf(self, template: str, *args: Any) -> NoReturn:
        self._log(Level.ERROR, template, args)
        self._exit(FATAL_EXIT_CODE)


class StructlogLogger(_LevelMethods):
    """Logger backed by a structlog bound logger."""

    def __init__(
        self,
        engine: FilteringBoundLogger,
        *,
        add_source: bool = False,
        exit_func: ExitFunc = sys.exit,
    ) -> None:
        self._engine = engine
        self._add_source = add_source
        self._exit_func = exit_func

    @property
    def engine(self) -> FilteringBoundLogger:
        return self._engine

    @property
    def fields(self) -> Mapping[str, Any]:
        return MappingProxyType({})

    def is_enabled(self, level: Level) -> bool:
        """Whether the engine currently writes records at ``level``."""
        return bool(self._engine.is_enabled_for(int(level)))

    def _log(
        self,
        level: Level,
        template: str | None,
        args: tuple[Any, ...],
        stacklevel: int = _CALLER_DEPTH,
        attrs: Mapping[str, Any] | None = None,
    ) -> str | None:
        if not self.is_enabled(level):
            return None

        message = format_message(template, args)

        reserved = RESERVED_KEYS | {"source"} if self._add_source else RESERVED_KEYS
        attrs = _namespace_reserved(attrs or {}, reserved)
        if self._add_source:
            attrs["source"] = _source(sys._getframe(stacklevel))

        engine = self._engine.bind(**attrs) if attrs else self._engine
        engine.log(int(level), message)
        return message

    def _exit(self, code: int) -> NoReturn:
        self._exit_func(code)
        raise SystemExit(code)

    def with_fields(self, fields: Fields | None = None, /, **kwargs: Any) -> Logger:
        """Adds a mapping of fields to the logging context."""
        return StructlogLogEntry(self, _merge_fields(fields, kwargs))


class StructlogLogEntry(_LevelMethods):
    """Field-scoped view of a :class:`StructlogLogger`."""

    def __init__(self, base: StructlogLogger, fields: Fields) -> None:
        self._base = base
        self._fields = MappingProxyType(dict(fields))

    @property
    def base(self) -> StructlogLogger:
        return self._base

    @property
    def fields(self) -> Mapping[str, Any]:
        return self._fields

    def _log(
        self,
        level: Level,
        template: str | None,
        args: tuple[Any, ...],
        stacklevel: int = _CALLER_DEPTH,
    ) -> str | None:
        return self._base._log(level, template, args, stacklevel + 1, attrs=self._fields)

    def _exit(self, code: int) -> NoReturn:
        self._base._exit(code)

    def with_fields(self, fields: Fields | None = None, /, **kwargs: Any) -> Logger:
        """Adds fields to the logging context; new values win on collision."""
        merged = dict(self._fields)
        merged.update(_merge_fields(fields, kwargs))
        return self._base.with_fields(merged)


def new_structlog_logger(
    engine: FilteringBoundLogger | None,
    *,
    add_source: bool = False,
    exit_func: ExitFunc = sys.exit,
) -> Logger:
    """Create a Logger on top of a configured structlog logger.

    Args:
        engine: The structlog bound logger every record is handed to. A lazy
            proxy (as returned by ``structlog.get_logger``/``wrap_logger``) is
            bound once here, so later ``structlog.configure`` calls do not
            affect the returned logger.
        add_source: Attach the caller's function, file and line to every
            record as a ``source`` attribute.
        exit_func: Called with status 1 by ``fatal``/``fatalf``.

    Returns:
        Logger: The base logger.

    Raises:
        LoggerConstructionError: If ``engine`` cannot back a logger.
    """
    if engine is None:
        raise LoggerConstructionError("A structlog logger is required")

    bind = getattr(engine, "bind", None)
    if not callable(bind):
        raise LoggerConstructionError(f"{type(engine).__name__} does not provide bind()")

    # Lazy proxies resolve to their bound logger class here
    engine = bind()

    # Checked on the class: generic bound loggers turn any attribute lookup into a log method
    for capability in ("is_enabled_for", "log"):
        if not callable(getattr(type(engine), capability, None)):
            raise LoggerConstructionError(
                f"{type(engine).__name__} does not provide {capability}()",
                details=LoggerErrorDetails(
                    source=__name__,
                    operation="construct",
                    logger_type=type(engine).__name__,
                ),
            )

    return StructlogLogger(engine, add_source=add_source, exit_func=exit_func)
