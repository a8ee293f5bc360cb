"""
Resolved package and dependency graph types.

A :data:`DependencyGraph` is produced by the resolver and handed to the
lockfile layer. Each key is a :class:`Package`; each value is either the
ordered list of direct dependency edges or ``None`` when the package has
no tracked dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True, order=True)
class Package:
    """A resolved package, identified by ``(name, version)``.

    Instances are immutable and hashable, so they can key a dependency
    graph. Ordering compares ``name`` first, then ``version``, which is
    the order packages are written to the lockfile.

    Attributes:
        name: Package name exactly as the resolver reported it.
        version: Resolved version string.
    """

    name: str
    version: str

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"


#: A dependency edge: ``(name, version)``. The version is empty when it
#: was restored from a lockfile and must be re-resolved if needed.
Dependency = Tuple[str, str]

#: Mapping from each resolved package to its direct dependency edges.
DependencyGraph = Dict[Package, Optional[List[Dependency]]]
