"""Color math: linear gradients, oscillating distances and 24-bit escapes."""

from __future__ import annotations

from .models import Rgb, RgbRange

# Counters behave like unsigned 64-bit integers (wrap instead of growing).
USIZE_MAX = (1 << 64) - 1

_FG_RESET = "\x1b[39m"


def wrapping_add(a: int, b: int) -> int:
    """Add with unsigned 64-bit wraparound."""
    return (a + b) & USIZE_MAX


def oscillate_dist(x: int, n: int) -> float:
    """Return where ``x`` falls along 0..``n`` as a distance in [0, 1].

    The distance moves 0 -> 1 while ``x % 2n <= n`` and 1 -> 0 afterwards,
    so a gradient indexed by a growing counter reverses direction instead of
    jumping from its end color back to its start color.

    ``n == 0`` is treated as ``n == 1``.
    """
    n = n or 1
    period = (n * 2) & USIZE_MAX
    shifted = wrapping_add(x, n)
    # 2n only wraps to zero when n == 2**63; the period is then the whole u64 range.
    pos = shifted % period if period else shifted
    return abs(pos - n) / n


def linear_gradient(color_range: RgbRange, dist: float) -> Rgb:
    """Return the color ``dist`` of the way from start to end (``dist`` clamped to [0, 1])."""
    dist = min(max(dist, 0.0), 1.0)
    start = color_range.start
    end = color_range.end
    return Rgb(
        int(start.r + dist * (end.r - start.r)),
        int(start.g + dist * (end.g - start.g)),
        int(start.b + dist * (end.b - start.b)),
    )


def ansi_fg(text: str, color: Rgb) -> str:
    """Wrap text in a true-color foreground escape."""
    if not text:
        return text
    return f"\x1b[38;2;{color.r};{color.g};{color.b}m{text}{_FG_RESET}"
