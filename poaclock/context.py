"""
Shared context object for poaclock CLI commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from poaclock.config import PoacLockConfig


class PoacLockContext:
    """Global context object for poaclock CLI commands.

    An instance of this class is created once per CLI invocation and
    passed to commands using Click's context mechanism.

    Attributes:
        project_dir: Project root holding ``poac.toml`` and ``poac.lock``.
        config_path: Path to the configuration file, if any.
        config: Loaded configuration.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
    """

    __slots__ = ("project_dir", "config_path", "config", "verbose", "color")

    def __init__(self) -> None:
        self.project_dir: Path = Path(".")
        self.config_path: Optional[Path] = None
        self.config: PoacLockConfig = PoacLockConfig()
        self.verbose: int = 0
        self.color: bool = True


#: Click decorator for injecting :class:`PoacLockContext` into commands.
pass_context = click.make_pass_decorator(PoacLockContext, ensure=True)
