"""Lockfile reader.

Loads ``poac.lock``, validates its shape and schema version, and rebuilds
the dependency graph. Every parser failure is reported as
:class:`~poaclock.exceptions.FailedToReadLockfile` with the parser's own
message; a schema version other than the supported one is reported as
:class:`~poaclock.exceptions.InvalidLockfileVersion`. A missing lockfile
is not an error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import tomli as tomllib

from poaclock.models import DependencyGraph, LockDocument
from poaclock.constants import LOCKFILE_VERSION, MAX_FILE_SIZE
from poaclock.core.converter import convert_to_deps
from poaclock.core.staleness import lockfile_path
from poaclock.exceptions import FailedToReadLockfile, InvalidLockfileVersion
from poaclock.utils import get_logger, read_bytes

logger = get_logger("core.reader")

PathLike = Union[str, Path]


def parse_lock(content: str, *, source: Optional[str] = None) -> LockDocument:
    """Parse lockfile text into a version-checked document.

    Args:
        content: Lockfile text.
        source: Path used in error details, if any.

    Returns:
        The parsed :class:`LockDocument`.

    Raises:
        FailedToReadLockfile: The text is not valid TOML or lacks the
            expected structure.
        InvalidLockfileVersion: The schema version is not supported.
    """
    try:
        raw = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise FailedToReadLockfile(str(exc), file_path=source) from exc

    doc = LockDocument.from_dict(raw, file_path=source)
    if doc.version != LOCKFILE_VERSION:
        raise InvalidLockfileVersion(doc.version)
    return doc


def read(
    project_dir: PathLike,
    *,
    max_size: Optional[int] = MAX_FILE_SIZE,
) -> Optional[DependencyGraph]:
    """Read the lockfile of ``project_dir`` back into a dependency graph.

    Args:
        project_dir: Project root the lockfile belongs to.
        max_size: Refuse lockfiles larger than this many bytes.

    Returns:
        The reconstructed graph, or ``None`` if there is no lockfile.
        Dependency edges carry an empty version string.

    Raises:
        FailedToReadLockfile: The lockfile is malformed or not UTF-8.
        InvalidLockfileVersion: The lockfile uses another schema version.
        FileOperationError: The lockfile exists but cannot be read.
    """
    path = lockfile_path(project_dir)
    if not path.exists():
        logger.debug("No lockfile at %s", path)
        return None

    data = read_bytes(path, max_size=max_size)
    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FailedToReadLockfile(str(exc), file_path=str(path)) from exc

    doc = parse_lock(content, source=str(path))
    logger.debug("Read %d packages from %s", len(doc.package), path)
    return convert_to_deps(doc)
