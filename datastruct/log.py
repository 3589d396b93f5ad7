"""A minimal level-filtered logger."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO


class Level(IntEnum):
    """Log levels; a logger emits messages at or below its level."""

    ERROR = 0
    WARNING = 1
    INFO = 2


class Logger:
    """Writes prefixed messages to a stream, filtered by level."""

    def __init__(self, level: int = Level.INFO, stream: TextIO | None = None) -> None:
        self.level = level
        self._stream = stream

    def set_level(self, level: int) -> None:
        """Change the level at which messages are emitted."""
        self.level = level

    def _emit(self, threshold: Level, prefix: str, message: str) -> None:
        if self.level >= threshold:
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write(f"{prefix}{message}\n")

    def error(self, message: str) -> None:
        """Write an error message."""
        self._emit(Level.ERROR, "[error]:", message)

    def warn(self, message: str) -> None:
        """Write a warning message."""
        self._emit(Level.WARNING, "[WARNING]:", message)

    def info(self, message: str) -> None:
        """Write an informational message."""
        self._emit(Level.INFO, "[info]:", message)