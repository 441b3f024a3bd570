"""Renderer configuration and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from .models import LevelFilter
from .paint import ColorFormat, Solid
from .sculpt import RecordFormat, Simple
from .themes import SpectralTheme, Theme, theme_by_name


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration for a DiscoLogger."""

    # events less severe than this are dropped
    level: LevelFilter = LevelFilter.INFO
    record_format: RecordFormat = field(default_factory=Simple)
    # None disables coloring
    color_format: ColorFormat | None = field(default_factory=Solid)
    theme: Theme = field(default_factory=SpectralTheme)
    # True: trace..info -> stdout, warn..error -> stderr; False: everything -> stdout
    use_stderr: bool = True


def resolve_config(cfg: Config | None) -> Config:
    """Return config with optional env overrides applied.

    DISCO_LOG_LEVEL:
        Level filter name (off, error, warn, info, debug, trace).
    DISCO_LOG_THEME:
        Built-in theme name (simple, spectral).
    NO_COLOR:
        Any non-empty value disables coloring.
    """
    if cfg is None:
        cfg = Config()

    level_env = os.getenv("DISCO_LOG_LEVEL")
    if level_env:
        try:
            cfg = replace(cfg, level=LevelFilter.from_name(level_env))
        except ValueError as exc:
            raise ValueError(f"DISCO_LOG_LEVEL is invalid: {exc}") from exc

    theme_env = os.getenv("DISCO_LOG_THEME")
    if theme_env:
        try:
            cfg = replace(cfg, theme=theme_by_name(theme_env))
        except ValueError as exc:
            raise ValueError(f"DISCO_LOG_THEME is invalid: {exc}") from exc

    if os.getenv("NO_COLOR") and cfg.color_format is not None:
        cfg = replace(cfg, color_format=None)

    return cfg
