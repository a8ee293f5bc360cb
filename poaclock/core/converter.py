"""Conversions between dependency graphs and lockfile documents.

The two directions are deliberately not inverses. Locking a graph keeps
only the *names* of each package's dependencies; reading it back yields
edges whose version is :data:`~poaclock.constants.UNKNOWN_VERSION`. For
any graph ``g``::

    g2 = convert_to_deps(convert_to_lock(g))

``g2`` has the same packages as ``g`` and the same dependency names per
package, and every edge version in ``g2`` is ``""``.
"""

from __future__ import annotations

from typing import List, Optional

from poaclock.utils import get_logger
from poaclock.constants import LOCKFILE_VERSION, UNKNOWN_VERSION
from poaclock.models import (
    Dependency,
    DependencyGraph,
    LockDocument,
    Package,
    PackageRecord,
)

logger = get_logger("core.converter")


def convert_to_lock(graph: DependencyGraph) -> LockDocument:
    """Convert a resolved graph into a lockfile document.

    Records are sorted by package name, then version, so the same graph
    always produces the same document regardless of its iteration order.
    Dependency names keep the order the resolver gave them.

    Args:
        graph: Resolved dependency graph.

    Returns:
        A :class:`LockDocument` at the current schema version.
    """
    records: List[PackageRecord] = []
    for package in sorted(graph):
        edges = graph[package]
        records.append(
            PackageRecord(
                name=package.name,
                version=package.version,
                dependencies=[name for name, _version in edges or ()],
            )
        )

    return LockDocument(version=LOCKFILE_VERSION, package=records)


def convert_to_deps(doc: LockDocument) -> DependencyGraph:
    """Rebuild a dependency graph from a lockfile document.

    Dependency versions are not stored in the lockfile, so every edge is
    restored as ``(name, "")``. A record with no dependencies maps to
    ``None``. If the same ``(name, version)`` appears twice, the first
    record wins.

    Args:
        doc: A parsed, version-checked lockfile document.

    Returns:
        The reconstructed dependency graph.
    """
    graph: DependencyGraph = {}
    for record in doc.package:
        package = Package(record.name, record.version)
        if package in graph:
            logger.warning("Ignoring duplicate lockfile entry for %s", package)
            continue

        edges: Optional[List[Dependency]] = None
        if record.dependencies:
            edges = [(name, UNKNOWN_VERSION) for name in record.dependencies]
        graph[package] = edges

    return graph
