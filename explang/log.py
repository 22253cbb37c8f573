"""Diagnostic messages and the fatal-error exception."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class LogLevel(Enum):
    """Severity of a diagnostic; the value is the text shown for it."""

    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    STATUS = "status"


class PanicError(Exception):
    """An unrecoverable internal failure."""

    def __init__(self, message: str, file: str | None = None, line: int = 0):
        super().__init__(message)
        self.message = message
        self.file = file
        self.line = line


def format_log_message(
    level: LogLevel, message: str, file: str | None = None, line: int = 0
) -> str:
    """Render a diagnostic as ``\\n[level @ file:line] message\\n``."""
    level = LogLevel(level)
    location = f" @ {file}:{line}" if file is not None else ""
    return f"\n[{level.value}{location}] {message}\n"


def log_message(
    level: LogLevel,
    message: str,
    file: str | None = None,
    line: int = 0,
    stream: TextIO | None = None,
) -> None:
    """Write a diagnostic to ``stream`` (standard error by default)."""
    target = sys.stderr if stream is None else stream
    target.write(format_log_message(level, message, file, line))