"""Shared helpers: logging, lockfile file access and terminal output."""

from __future__ import annotations

from poaclock.utils.logger import get_logger, setup_logging
from poaclock.utils.filesystem import last_modified, read_bytes, safe_write_file
from poaclock.utils.console import (
    get_console,
    print_error,
    print_success,
    print_table,
    print_warning,
    reset_console,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "last_modified",
    "read_bytes",
    "safe_write_file",
    "get_console",
    "reset_console",
    "print_error",
    "print_success",
    "print_table",
    "print_warning",
]
