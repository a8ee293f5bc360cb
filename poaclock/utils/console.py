"""
User-facing terminal output for poaclock commands, rendered with Rich.

Diagnostics go through :mod:`poaclock.utils.logger` instead.
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Sequence

from rich.table import Table
from rich.theme import Theme
from rich.console import Console

CONSOLE_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
    }
)

_console: Optional[Console] = None


def get_console() -> Console:
    """Return the shared console, creating it on first use.

    Rich decides on its own whether stdout is a terminal; ``NO_COLOR``
    and ``CI`` additionally force plain output.
    """
    global _console
    if _console is None:
        plain = bool(os.environ.get("NO_COLOR") or os.environ.get("CI"))
        _console = Console(theme=CONSOLE_THEME, no_color=plain, highlight=not plain)
    return _console


def reset_console() -> None:
    """Drop the shared console so the next call picks up the environment."""
    global _console
    _console = None


def _status_line(tag: str, message: str, style: str) -> None:
    # Messages may quote TOML tables such as [tool.poaclock]
    get_console().print(f"[{tag}] {message}", style=style, markup=False)


def print_success(message: str) -> None:
    _status_line("OK", message, "success")


def print_warning(message: str) -> None:
    _status_line("WARNING", message, "warning")


def print_error(message: str) -> None:
    _status_line("ERROR", message, "error")


def print_table(
    rows: List[Dict[str, Any]],
    *,
    columns: Sequence[str],
    title: Optional[str] = None,
    caption: Optional[str] = None,
) -> None:
    """Render ``rows`` as a table with one column per key in ``columns``."""
    table = Table(title=title, caption=caption, header_style="bold")
    for column in columns:
        table.add_column(column, overflow="fold")
    for row in rows:
        table.add_row(*(str(row.get(column, "")) for column in columns))
    get_console().print(table)
