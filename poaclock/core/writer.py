"""Lockfile writer.

Writes ``poac.lock`` from a resolved dependency graph. Writes go through
a sibling temporary file that atomically replaces the lockfile, so an
interrupted write leaves the previous lockfile intact.

No inter-process locking happens here. Concurrent ``overwrite`` or
``generate`` calls against the same project race on the filesystem; the
caller must hold a workspace lock.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import tomli_w

from poaclock.models import DependencyGraph, LockDocument
from poaclock.constants import LOCKFILE_HEADER
from poaclock.core.converter import convert_to_lock
from poaclock.core.staleness import is_outdated, lockfile_path
from poaclock.utils import get_logger, safe_write_file

logger = get_logger("core.writer")

PathLike = Union[str, Path]


def serialize_lock(doc: LockDocument) -> str:
    """Render a document as lockfile text, disclaimer header included."""
    body = tomli_w.dumps(doc.to_dict())
    return f"{LOCKFILE_HEADER}\n\n{body}"


def overwrite(
    graph: DependencyGraph,
    project_dir: PathLike,
    *,
    create_backup: bool = False,
) -> Path:
    """Unconditionally rewrite the lockfile from ``graph``.

    Args:
        graph: Resolved dependency graph.
        project_dir: Project root the lockfile belongs to.
        create_backup: Keep a timestamped copy of the previous lockfile.

    Returns:
        Path of the written lockfile.

    Raises:
        FileOperationError: The lockfile or its backup cannot be written.
    """
    path = lockfile_path(project_dir)
    content = serialize_lock(convert_to_lock(graph))

    backup = safe_write_file(path, content, create_backup=create_backup)
    if backup is not None:
        logger.info("Backed up previous lockfile to %s", backup)

    logger.info("Wrote %s (%d packages)", path, len(graph))
    return path


def generate(
    graph: DependencyGraph,
    project_dir: PathLike,
    *,
    create_backup: bool = False,
) -> bool:
    """Rewrite the lockfile only if it is outdated.

    Freshness is judged by modification time alone. A lockfile newer than
    the manifest is left untouched even if its content differs from
    ``graph``.

    Args:
        graph: Resolved dependency graph.
        project_dir: Project root the lockfile belongs to.
        create_backup: Forwarded to :func:`overwrite`.

    Returns:
        ``True`` if the lockfile was written, ``False`` if it was fresh.

    Raises:
        FileOperationError: Modification times cannot be read or the
            lockfile cannot be written.
    """
    if not is_outdated(project_dir):
        logger.debug("Lockfile is up to date; skipping write")
        return False

    overwrite(graph, project_dir, create_backup=create_backup)
    return True
