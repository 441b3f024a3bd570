"""Color themes.

A theme maps each severity to a representative solid color and to the
bounds of a linear gradient.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .colors import Color
from .models import Level, Rgb, RgbRange


class Theme(Protocol):
    """Theme interface used by the painter."""

    def solid(self, level: Level) -> Rgb:
        """Color used for a whole line by the Solid color format."""
        ...

    def range(self, level: Level) -> RgbRange:
        """Gradient bounds used by the gradient color formats."""
        ...


def _span(start: Color, end: Color) -> RgbRange:
    return RgbRange(start=start.value, end=end.value)


@dataclass(frozen=True, slots=True)
class SimpleTheme:
    """Each level fades between a dark and a light shade of one hue."""

    def solid(self, level: Level) -> Rgb:
        return _SIMPLE_SOLID[level].value

    def range(self, level: Level) -> RgbRange:
        return _SIMPLE_RANGES[level]


@dataclass(frozen=True, slots=True)
class SpectralTheme:
    """Each level sweeps across neighbouring hues of the spectrum."""

    def solid(self, level: Level) -> Rgb:
        return _SPECTRAL_SOLID[level].value

    def range(self, level: Level) -> RgbRange:
        return _SPECTRAL_RANGES[level]


_SIMPLE_SOLID: dict[Level, Color] = {
    Level.TRACE: Color.PINK,
    Level.DEBUG: Color.CYAN,
    Level.INFO: Color.GREEN,
    Level.WARN: Color.YELLOW,
    Level.ERROR: Color.RED,
}

_SIMPLE_RANGES: dict[Level, RgbRange] = {
    Level.TRACE: _span(Color.DARK_PINK, Color.PINK),
    Level.DEBUG: _span(Color.DARK_CYAN, Color.CYAN),
    Level.INFO: _span(Color.DARK_GREEN, Color.GREEN),
    Level.WARN: _span(Color.DARK_YELLOW, Color.YELLOW),
    Level.ERROR: _span(Color.DARK_RED, Color.RED),
}

_SPECTRAL_SOLID: dict[Level, Color] = {
    Level.TRACE: Color.MAGENTA,
    Level.DEBUG: Color.BLUE,
    Level.INFO: Color.GREEN,
    Level.WARN: Color.YELLOW,
    Level.ERROR: Color.RED,
}

_SPECTRAL_RANGES: dict[Level, RgbRange] = {
    Level.TRACE: _span(Color.DARK_PINK, Color.MAGENTA),
    Level.DEBUG: _span(Color.DARK_BLUE, Color.CYAN),
    Level.INFO: _span(Color.CYAN, Color.GREEN),
    Level.WARN: _span(Color.YELLOW, Color.ORANGE),
    Level.ERROR: _span(Color.RED, Color.DARK_RED),
}

_BUILTIN_THEMES: dict[str, type[SimpleTheme] | type[SpectralTheme]] = {
    "simple": SimpleTheme,
    "spectral": SpectralTheme,
}


def theme_by_name(name: str) -> Theme:
    """Return a built-in theme by case-insensitive name."""
    key = name.strip().lower()
    try:
        return _BUILTIN_THEMES[key]()
    except KeyError as exc:
        valid = ", ".join(_BUILTIN_THEMES)
        raise ValueError(f"Unknown theme '{name}'. Valid values: {valid}.") from exc
