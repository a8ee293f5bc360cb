"""
Unified data model exports for poaclock.

Example:
    >>> from poaclock.models import Package, LockDocument
"""

from __future__ import annotations

from poaclock.models.package import Dependency, DependencyGraph, Package
from poaclock.models.lockfile import LockDocument, PackageRecord

__all__ = [
    "Package",
    "Dependency",
    "DependencyGraph",
    "PackageRecord",
    "LockDocument",
]
