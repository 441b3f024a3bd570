"""Synchronized output of rendered log lines to stdout/stderr."""

from __future__ import annotations

import sys
import threading
from contextlib import suppress
from typing import TextIO

from colorama import Style

from .models import Level

_EMPHASIZED = frozenset({Level.WARN, Level.ERROR})


class LogWriter:
    """Write log lines to stdout, or stderr for warnings and errors.

    use_stderr:
        True sends WARN and ERROR to stderr and everything else to stdout;
        False sends every level to stdout.
    """

    def __init__(self, use_stderr: bool = True) -> None:
        self.use_stderr = use_stderr
        # stdout and stderr each serialize their own writes, but nothing stops
        # a stdout line and a stderr line from interleaving on the console.
        self._lock = threading.Lock()

    def _stream_for(self, level: Level) -> TextIO | None:
        # None when there is no console (pythonw, detached daemons)
        if level in _EMPHASIZED and self.use_stderr:
            return sys.stderr
        return sys.stdout

    def write(self, text: str, level: Level) -> None:
        """Write one line; I/O failures and missing streams are dropped.

        Each line is flushed before the lock is released so stdout and stderr
        keep their relative order when both point at the same file.
        """
        if level in _EMPHASIZED:
            text = f"{Style.BRIGHT}{text}{Style.RESET_ALL}"
        line = text + "\n"

        with self._lock:
            stream = self._stream_for(level)
            if stream is None:
                return
            with suppress(OSError, ValueError):
                stream.write(line)
                stream.flush()

    def flush(self) -> None:
        with self._lock:
            for stream in (sys.stdout, sys.stderr):
                if stream is None:
                    continue
                with suppress(OSError, ValueError):
                    stream.flush()
