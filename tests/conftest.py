from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime

import pytest

from disco_log.core.models import Level, LogEvent
from disco_log.logger import uninstall

FIXED_NOW = datetime(2025, 12, 30, 8, 12, 4, 123456, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("DISCO_LOG_LEVEL", "DISCO_LOG_THEME", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    yield
    uninstall()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def make_event() -> Callable[..., LogEvent]:
    def _make(level: Level = Level.INFO, target: str = "test", message: str = "foo") -> LogEvent:
        return LogEvent(level=level, target=target, message=message)

    return _make
