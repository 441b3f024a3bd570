"""Record formatting ("sculpting").

Turns a LogEvent into a plain, uncolored string in one of the supported
structural formats.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from pydantic import BaseModel

from .models import LogEvent


@dataclass(frozen=True, slots=True)
class Json:
    """One JSON object per record with keys time, level, target, message."""


@dataclass(frozen=True, slots=True)
class Simple:
    """``<timestamp> [<target>] <LEVEL> - <message>``"""


@dataclass(frozen=True, slots=True)
class Custom:
    """Caller-supplied formatter; must be safe to call from several threads."""

    func: Callable[[LogEvent], str]


RecordFormat = Json | Simple | Custom


class JsonRecord(BaseModel):
    """Wire shape of a JSON-formatted record."""

    time: str
    level: str
    target: str
    message: str


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_timestamp(ts: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with microseconds and a ``Z`` suffix."""
    return ts.astimezone(UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class LogSculptor:
    """Create structurally formatted strings from log events."""

    record_format: RecordFormat = field(default_factory=Simple)
    clock: Callable[[], datetime] = utc_now

    def sculpt(self, event: LogEvent) -> str:
        """Format an event according to the configured record format."""
        fmt = self.record_format
        if isinstance(fmt, Custom):
            return fmt.func(event)

        now = format_timestamp(self.clock())
        if isinstance(fmt, Json):
            return JsonRecord(
                time=now,
                level=event.level.name,
                target=event.target,
                message=event.message,
            ).model_dump_json()
        return f"{now} [{event.target}] {event.level.name} - {event.message}"
