"""Core data models for log rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

# stdlib logging has no TRACE; registered by disco_log.logger.install().
TRACE_LEVEL = 5


class Level(IntEnum):
    """Severity of a log event (lower value = more severe)."""

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def from_python_level(cls, levelno: int) -> Level:
        """Map a stdlib ``logging`` level number onto a Level."""
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


class LevelFilter(IntEnum):
    """Severity threshold; a level passes iff ``level <= filter``."""

    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def from_name(cls, name: str) -> LevelFilter:
        """Parse a case-insensitive filter name (``warning`` is accepted for WARN)."""
        normalized = name.strip().upper()
        if normalized == "WARNING":
            normalized = "WARN"
        try:
            return cls[normalized]
        except KeyError as exc:
            valid = ", ".join(f.name.lower() for f in cls)
            raise ValueError(f"Unknown log level '{name}'. Valid values: {valid}.") from exc

    def to_python_level(self) -> int:
        """Return the lowest stdlib level number that passes this filter."""
        return _PYTHON_LEVELS[self]


_PYTHON_LEVELS: dict[LevelFilter, int] = {
    LevelFilter.OFF: logging.CRITICAL + 1,
    LevelFilter.ERROR: logging.ERROR,
    LevelFilter.WARN: logging.WARNING,
    LevelFilter.INFO: logging.INFO,
    LevelFilter.DEBUG: logging.DEBUG,
    LevelFilter.TRACE: TRACE_LEVEL,
}


@dataclass(frozen=True, slots=True)
class LogEvent:
    """A single event handed over by the logging facade."""

    level: Level
    target: str = ""
    message: str = ""


@dataclass(frozen=True, slots=True)
class Rgb:
    """24-bit RGB triplet."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"RGB channels must be within 0..255, got {channel}")


@dataclass(frozen=True, slots=True)
class RgbRange:
    """Bounds of a linear color gradient."""

    start: Rgb
    end: Rgb
