"""Log painting: apply a theme's colors to formatted log lines."""

from __future__ import annotations

import threading
from dataclasses import dataclass

import regex

from .gradient import ansi_fg, linear_gradient, oscillate_dist, wrapping_add
from .models import Level
from .themes import Theme

_GRAPHEME_RE = regex.compile(r"\X")


def _check_steps(steps: object) -> None:
    # 0 is allowed and behaves like 1
    if isinstance(steps, bool) or not isinstance(steps, int) or steps < 0:
        raise ValueError(f"gradient steps must be a non-negative integer, got {steps!r}")


@dataclass(frozen=True, slots=True)
class Solid:
    """One theme color per line, chosen by level."""


@dataclass(frozen=True, slots=True)
class InlineGradient:
    """Gradient across the characters of a single line.

    ``steps`` is how many characters it takes to go from the start color to
    the end color.
    """

    steps: int = 20

    def __post_init__(self) -> None:
        _check_steps(self.steps)


@dataclass(frozen=True, slots=True)
class MultiLineGradient:
    """Gradient across successive lines logged at the same level.

    ``steps`` is how many lines it takes to go from the start color to the
    end color. Every level moves through its own range independently.
    """

    steps: int = 20

    def __post_init__(self) -> None:
        _check_steps(self.steps)


ColorFormat = Solid | InlineGradient | MultiLineGradient


class LogPainter:
    """Paint log lines using a theme and a color format."""

    def __init__(self, theme: Theme, color_format: ColorFormat | None) -> None:
        self.theme = theme
        self.color_format = color_format
        self._lines_logged: dict[Level, int] = {}
        self._lock = threading.Lock()

    def paint(self, text: str, level: Level) -> str:
        """Color a formatted line for the given level."""
        fmt = self.color_format
        if fmt is None:
            return text
        if isinstance(fmt, Solid):
            return self.paint_solid(text, level)
        if isinstance(fmt, InlineGradient):
            return self.paint_inline_gradient(text, level, fmt.steps)
        return self.paint_multi_line_gradient(text, level, fmt.steps)

    def paint_solid(self, text: str, level: Level) -> str:
        return ansi_fg(text, self.theme.solid(level))

    def paint_inline_gradient(self, text: str, level: Level, steps: int) -> str:
        """Color each grapheme cluster at its own point along the level's gradient."""
        color_range = self.theme.range(level)
        return "".join(
            ansi_fg(g, linear_gradient(color_range, oscillate_dist(i, steps)))
            for i, g in enumerate(_GRAPHEME_RE.findall(text))
        )

    def paint_multi_line_gradient(self, text: str, level: Level, steps: int) -> str:
        """Color the whole line at the level's current position, then advance it."""
        with self._lock:
            count = self._lines_logged.get(level, 0)
            self._lines_logged[level] = wrapping_add(count, 1)
        color = linear_gradient(self.theme.range(level), oscillate_dist(count, steps))
        return ansi_fg(text, color)

    def lines_logged(self, level: Level) -> int:
        """Number of lines painted so far at ``level`` with the multi-line gradient."""
        with self._lock:
            return self._lines_logged.get(level, 0)
