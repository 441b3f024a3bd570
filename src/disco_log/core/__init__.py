"""Rendering pipeline: sculpt a record, paint it, write it."""

from __future__ import annotations

from .colors import Color
from .config import Config, resolve_config
from .gradient import linear_gradient, oscillate_dist
from .models import TRACE_LEVEL, Level, LevelFilter, LogEvent, Rgb, RgbRange
from .paint import ColorFormat, InlineGradient, LogPainter, MultiLineGradient, Solid
from .sculpt import Custom, Json, LogSculptor, RecordFormat, Simple
from .themes import SimpleTheme, SpectralTheme, Theme, theme_by_name
from .write import LogWriter

__all__ = [
    "Color",
    "ColorFormat",
    "Config",
    "Custom",
    "InlineGradient",
    "Json",
    "Level",
    "LevelFilter",
    "LogEvent",
    "LogPainter",
    "LogSculptor",
    "LogWriter",
    "MultiLineGradient",
    "RecordFormat",
    "Rgb",
    "RgbRange",
    "Simple",
    "SimpleTheme",
    "Solid",
    "SpectralTheme",
    "TRACE_LEVEL",
    "Theme",
    "linear_gradient",
    "oscillate_dist",
    "resolve_config",
    "theme_by_name",
]
