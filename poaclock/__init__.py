"""
poaclock: lockfile support for the Poac package manager.

poaclock persists a resolved dependency graph into ``poac.lock``, decides
when that file is stale relative to the ``poac.toml`` manifest, and
rebuilds a dependency graph from it.

Typical usage::

    from poaclock import generate, read, is_outdated

    generate(resolved_graph, project_dir)
    graph = read(project_dir)  # None when there is no lockfile

Callers must serialize access to a project directory; no file locking is
performed here.
"""

from __future__ import annotations

from poaclock.__version__ import __version__
from poaclock.core import generate, is_outdated, read
from poaclock.models import DependencyGraph, LockDocument, Package, PackageRecord
from poaclock.exceptions import (
    ConfigError,
    FailedToReadLockfile,
    FileOperationError,
    InvalidLockfileVersion,
    PoacLockError,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "poaclock Contributors"
__license__ = "Apache-2.0"
__description__ = "Lockfile generation, staleness checks and loading for Poac."

__all__ = [
    "__version__",
    # Operations
    "generate",
    "read",
    "is_outdated",
    # Models
    "Package",
    "DependencyGraph",
    "PackageRecord",
    "LockDocument",
    # Errors
    "PoacLockError",
    "InvalidLockfileVersion",
    "FailedToReadLockfile",
    "FileOperationError",
    "ConfigError",
]
