"""Colorful console log rendering for the standard ``logging`` module.

Usage:
    import logging
    from disco_log import Config, InlineGradient, LevelFilter, install

    install(Config(level=LevelFilter.TRACE, color_format=InlineGradient(20)))
    logging.getLogger("app").info("hello")
"""

from __future__ import annotations

from disco_log.core import (
    TRACE_LEVEL,
    Color,
    ColorFormat,
    Config,
    Custom,
    InlineGradient,
    Json,
    Level,
    LevelFilter,
    LogEvent,
    MultiLineGradient,
    RecordFormat,
    Rgb,
    RgbRange,
    Simple,
    SimpleTheme,
    Solid,
    SpectralTheme,
    Theme,
    resolve_config,
    theme_by_name,
)
from disco_log.logger import (
    AlreadyInstalledError,
    DiscoHandler,
    DiscoLogger,
    install,
    installed,
    uninstall,
)

__all__ = [
    "AlreadyInstalledError",
    "Color",
    "ColorFormat",
    "Config",
    "Custom",
    "DiscoHandler",
    "DiscoLogger",
    "InlineGradient",
    "Json",
    "Level",
    "LevelFilter",
    "LogEvent",
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
    "install",
    "installed",
    "resolve_config",
    "theme_by_name",
    "uninstall",
]
