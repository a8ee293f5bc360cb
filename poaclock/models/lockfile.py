"""
Lockfile document model.

:class:`LockDocument` mirrors the on-disk TOML schema::

    version = 1

    [[package]]
    name = "..."
    version = "..."
    dependencies = ["...", ...]

``dependencies`` holds names only. Versions of dependency edges are
dropped when a graph is locked and are not recoverable from the document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from poaclock.constants import LOCKFILE_VERSION
from poaclock.exceptions import FailedToReadLockfile


@dataclass
class PackageRecord:
    """One ``[[package]]`` table of the lockfile."""

    name: str
    version: str
    dependencies: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "dependencies": list(self.dependencies),
        }

    @classmethod
    def from_dict(
        cls,
        raw: Any,
        *,
        index: int = 0,
        file_path: Optional[str] = None,
    ) -> "PackageRecord":
        """Build a record from a parsed ``[[package]]`` table.

        Raises:
            FailedToReadLockfile: A key is missing or has the wrong type.
        """
        where = f"package[{index}]"
        if not isinstance(raw, Mapping):
            raise FailedToReadLockfile(
                f"`{where}` must be a table, got {type(raw).__name__}",
                file_path=file_path,
            )

        name = _required(raw, "name", str, where, file_path)
        version = _required(raw, "version", str, where, file_path)
        dependencies = _required(raw, "dependencies", list, where, file_path)

        for dep in dependencies:
            if not isinstance(dep, str):
                raise FailedToReadLockfile(
                    f"`{where}.dependencies` must contain only strings, "
                    f"got {type(dep).__name__}",
                    file_path=file_path,
                )

        return cls(name=name, version=version, dependencies=list(dependencies))


@dataclass
class LockDocument:
    """In-memory form of a lockfile.

    Attributes:
        version: Schema generation; always :data:`LOCKFILE_VERSION` when
            created by this package.
        package: Package records in emission order.
    """

    version: int = LOCKFILE_VERSION
    package: List[PackageRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return a TOML-ready mapping (``version`` first, then ``package``)."""
        return {
            "version": self.version,
            "package": [record.to_dict() for record in self.package],
        }

    @classmethod
    def from_dict(
        cls,
        raw: Mapping[str, Any],
        *,
        file_path: Optional[str] = None,
    ) -> "LockDocument":
        """Extract a document from a parsed TOML mapping.

        Only the shape is checked here. The schema version is returned
        as found so the caller can report an unsupported value.

        Raises:
            FailedToReadLockfile: ``version`` or ``package`` is missing or
                has the wrong type.
        """
        version = _required(raw, "version", int, "lockfile", file_path)
        packages = _required(raw, "package", list, "lockfile", file_path)

        records = [
            PackageRecord.from_dict(item, index=i, file_path=file_path)
            for i, item in enumerate(packages)
        ]
        return cls(version=version, package=records)


def _required(
    raw: Mapping[str, Any],
    key: str,
    expected: type,
    where: str,
    file_path: Optional[str],
) -> Any:
    """Fetch ``raw[key]`` and check its type."""
    if key not in raw:
        raise FailedToReadLockfile(
            f"`{where}` is missing required key `{key}`",
            file_path=file_path,
        )

    value = raw[key]
    # bool is a subclass of int but never a valid schema version
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise FailedToReadLockfile(
            f"`{where}.{key}` must be {_type_label(expected)}, "
            f"got {type(value).__name__}",
            file_path=file_path,
        )
    return value


def _type_label(expected: type) -> str:
    labels = {str: "a string", int: "an integer", list: "an array"}
    return labels.get(expected, expected.__name__)
