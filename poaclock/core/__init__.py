"""
Core lockfile operations for poaclock.

    from poaclock.core import generate, read, is_outdated

``generate``, ``read`` and ``is_outdated`` are the entry points used by
build orchestration. The remaining names expose the individual stages for
callers that need them.
"""

from __future__ import annotations

from poaclock.core.staleness import is_outdated, lockfile_path, manifest_path
from poaclock.core.converter import convert_to_deps, convert_to_lock
from poaclock.core.writer import generate, overwrite, serialize_lock
from poaclock.core.reader import parse_lock, read

__all__ = [
    "generate",
    "read",
    "is_outdated",
    "overwrite",
    "convert_to_lock",
    "convert_to_deps",
    "serialize_lock",
    "parse_lock",
    "lockfile_path",
    "manifest_path",
]
