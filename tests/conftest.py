"""Shared fixtures: an in-memory sink and loggers writing JSON lines to it."""

from __future__ import annotations

import io
import json
import sys
from collections.abc import Callable
from typing import Any

import pytest

from log_facade import Level, LoggingSettings, create_engine, new_structlog_logger
from log_facade.logging.structlog_logger import StructlogLogger


class FatalExit(Exception):
    """Raised by the test exit function in place of terminating the process."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep ``LOG_*`` variables and a local ``.env`` out of the settings under test."""

    monkeypatch.chdir(tmp_path)
    for key in (
        "LOG_LEVEL",
        "LOG_FORMAT",
        "LOG_ADD_SOURCE",
        "LOG_COLORS",
        "LOG_SERVICE_NAME",
        "LOG_LOGFIRE_ENABLED",
        "LOG_LOGFIRE_TOKEN",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_logger(buffer: io.StringIO) -> Callable[..., StructlogLogger]:
    """Build a JSON logger at ``level`` writing to ``buffer``."""

    def factory(
        level: Level = Level.DEBUG,
        add_source: bool = False,
        exit_func: Callable[[int], Any] = sys.exit,
    ) -> StructlogLogger:
        settings = LoggingSettings(level=int(level), format="json")
        engine = create_engine(settings, buffer)
        return new_structlog_logger(engine, add_source=add_source, exit_func=exit_func)

    return factory


@pytest.fixture
def records(buffer: io.StringIO) -> Callable[[], list[dict[str, Any]]]:
    """Parse every JSON line written to ``buffer`` so far."""

    def read() -> list[dict[str, Any]]:
        return [json.loads(line) for line in buffer.getvalue().splitlines() if line]

    return read


@pytest.fixture
def exit_calls() -> list[int]:
    return []


@pytest.fixture
def exit_func(exit_calls: list[int]) -> Callable[[int], None]:
    def fake_exit(code: int) -> None:
        exit_calls.append(code)
        raise FatalExit(code)

    return fake_exit
