"""Logger orchestration and stdlib ``logging`` integration.

``DiscoLogger`` runs the sculpt -> paint -> write pipeline for a single event.
``install()`` registers it once per process as the root handler of the
standard ``logging`` module:

    from disco_log import install
    install()
    logging.getLogger(__name__).info("hello")
"""

from __future__ import annotations

import logging
import threading

import colorama

from disco_log.core.config import Config, resolve_config
from disco_log.core.models import TRACE_LEVEL, Level, LogEvent
from disco_log.core.paint import LogPainter
from disco_log.core.sculpt import LogSculptor
from disco_log.core.write import LogWriter

LOGGER = logging.getLogger(__name__)


class AlreadyInstalledError(RuntimeError):
    """Raised when a renderer is already registered for this process."""


class DiscoLogger:
    """Render log events to the console according to a Config."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.sculptor = LogSculptor(self.config.record_format)
        self.painter = LogPainter(self.config.theme, self.config.color_format)
        self.writer = LogWriter(self.config.use_stderr)

    def enabled(self, level: Level) -> bool:
        """Return True if events at ``level`` pass the configured threshold."""
        return level <= self.config.level

    def log(self, event: LogEvent) -> None:
        """Render and write an event; disabled events are not formatted at all."""
        if not self.enabled(event.level):
            return
        text = self.sculptor.sculpt(event)
        text = self.painter.paint(text, event.level)
        self.writer.write(text, event.level)

    def flush(self) -> None:
        self.writer.flush()


class DiscoHandler(logging.Handler):
    """``logging.Handler`` that forwards records to a DiscoLogger."""

    def __init__(self, disco: DiscoLogger) -> None:
        super().__init__(level=disco.config.level.to_python_level())
        self.disco = disco

    def emit(self, record: logging.LogRecord) -> None:
        level = Level.from_python_level(record.levelno)
        if not self.disco.enabled(level):
            return
        try:
            self.disco.log(LogEvent(level=level, target=record.name, message=record.getMessage()))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        self.disco.flush()


_install_lock = threading.Lock()
_installed: DiscoHandler | None = None
_root_level_before = logging.WARNING


def install(config: Config | None = None) -> DiscoLogger:
    """Register a DiscoLogger as the process-wide sink of the root logger.

    Raises
    ------
    AlreadyInstalledError:
        If a renderer is already installed; the existing one is kept.
    """
    global _installed, _root_level_before
    with _install_lock:
        if _installed is not None:
            raise AlreadyInstalledError("a disco_log renderer is already installed")

        logging.addLevelName(TRACE_LEVEL, "TRACE")
        colorama.just_fix_windows_console()

        disco = DiscoLogger(resolve_config(config))
        handler = DiscoHandler(disco)
        root = logging.getLogger()
        root.addHandler(handler)
        _root_level_before = root.level
        # let everything through to the handler; it applies its own threshold
        root.setLevel(TRACE_LEVEL)
        _installed = handler

    LOGGER.debug("Installed disco_log renderer (level=%s)", disco.config.level.name)
    return disco


def uninstall() -> None:
    """Remove the installed renderer, if any, and flush its streams."""
    global _installed
    with _install_lock:
        handler = _installed
        if handler is None:
            return
        root = logging.getLogger()
        root.removeHandler(handler)
        root.setLevel(_root_level_before)
        _installed = None
    handler.flush()
    LOGGER.debug("Uninstalled disco_log renderer")


def installed() -> DiscoLogger | None:
    """Return the installed DiscoLogger, or None."""
    with _install_lock:
        return _installed.disco if _installed is not None else None
