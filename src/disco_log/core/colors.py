"""Named color presets.

Helpful aliases for raw Rgb triplets when defining themes.
"""

from __future__ import annotations

from enum import Enum

from .models import Rgb


class Color(Enum):
    """Predefined colors; ``Color.X.value`` is the Rgb triplet."""

    DARK_MAGENTA = Rgb(139, 0, 139)
    MAGENTA = Rgb(255, 0, 255)
    DARK_PINK = Rgb(149, 119, 149)
    PINK = Rgb(227, 184, 227)
    DARK_CYAN = Rgb(10, 144, 144)
    CYAN = Rgb(20, 210, 210)
    DARK_BLUE = Rgb(70, 75, 185)
    BLUE = Rgb(90, 100, 240)
    DARK_GREEN = Rgb(70, 140, 10)
    GREEN = Rgb(110, 220, 10)
    DARK_YELLOW = Rgb(170, 128, 0)
    YELLOW = Rgb(255, 185, 0)
    DARK_ORANGE = Rgb(255, 128, 0)
    ORANGE = Rgb(250, 180, 110)
    DARK_RED = Rgb(200, 0, 10)
    RED = Rgb(255, 60, 10)
