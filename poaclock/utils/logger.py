"""
Logging for poaclock.

Every module logs through a child of the ``poaclock`` logger. Used as a
library the package stays silent; the CLI calls :func:`setup_logging` once
to send records to stderr.
"""

from __future__ import annotations

import os
import sys
import logging
from typing import IO, Optional

from poaclock.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "poaclock"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class LevelColorFormatter(logging.Formatter):
    """Formatter that tints the level name with an ANSI color."""

    LEVEL_COLORS = {
        logging.DEBUG: "36",
        logging.INFO: "32",
        logging.WARNING: "33",
        logging.ERROR: "31",
        logging.CRITICAL: "35",
    }

    def __init__(self, fmt: str, *, datefmt: Optional[str] = None, colored: bool = False) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        code = self.LEVEL_COLORS.get(record.levelno)
        if not self.colored or code is None:
            return super().format(record)
        # Work on a copy; other handlers receive the same record
        tinted = logging.makeLogRecord(record.__dict__)
        tinted.levelname = f"\033[{code}m{record.levelname}\033[0m"
        return super().format(tinted)


def _stream_wants_color(stream: IO[str]) -> bool:
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def setup_logging(
    *,
    level: int = logging.INFO,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Send poaclock log records to ``stream`` (stderr by default).

    Calling it again replaces the previous handler.

    Args:
        level: Minimum level to emit.
        verbose: Include timestamps and logger names.
        stream: Destination stream.
    """
    stream = stream or sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        LevelColorFormatter(
            LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            colored=_stream_wants_color(stream),
        )
    )

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for ``name`` inside the ``poaclock`` namespace.

    ``"core.reader"`` and ``"poaclock.core.reader"`` name the same logger;
    an empty name gives the root ``poaclock`` logger.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
