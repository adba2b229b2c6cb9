"""Process-wide logging setup with timestamped lines."""

from __future__ import annotations

import logging
import sys
from datetime import datetime

TRACE = 5

_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}


class SetLoggerError(RuntimeError):
    """Raised when the logger has already been initialized."""


def _timestamp() -> str:
    text = datetime.now().astimezone().isoformat(timespec="milliseconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


class _Handler(logging.Handler):
    """Writes errors to stderr and everything else to stdout."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stderr if record.levelno >= logging.ERROR else sys.stdout
            stream.write(f"{_timestamp()} {record.getMessage()}\n")
        except Exception:
            self.handleError(record)


def _resolve(level: int | str) -> int:
    if isinstance(level, str):
        try:
            return _LEVELS[level.lower()]
        except KeyError:
            raise ValueError(f"unknown log level: {level}") from None
    return int(level)


def init(level: int | str) -> None:
    """Install the logger on the root logger at the given level."""
    levelno = _resolve(level)
    root = logging.getLogger()
    if any(isinstance(h, _Handler) for h in root.handlers):
        raise SetLoggerError("a logger has already been initialized")
    handler = _Handler(level=levelno)
    root.addHandler(handler)
    root.setLevel(levelno)