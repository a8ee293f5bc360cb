"""Lockfile freshness check.

Freshness is decided from file modification times only: the lockfile is
outdated when it is missing or older than the manifest. Content is never
inspected, so a lockfile edited by hand without touching the manifest
still counts as fresh.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from poaclock.utils import get_logger, last_modified
from poaclock.constants import LOCKFILE_NAME, MANIFEST_FILE_NAME

logger = get_logger("core.staleness")

PathLike = Union[str, Path]


def lockfile_path(project_dir: PathLike) -> Path:
    """Return the lockfile location for ``project_dir``."""
    return Path(project_dir) / LOCKFILE_NAME


def manifest_path(project_dir: PathLike) -> Path:
    """Return the manifest location for ``project_dir``."""
    return Path(project_dir) / MANIFEST_FILE_NAME


def lock_last_modified(project_dir: PathLike) -> int:
    return last_modified(lockfile_path(project_dir))


def manifest_last_modified(project_dir: PathLike) -> int:
    return last_modified(manifest_path(project_dir))


def is_outdated(project_dir: PathLike) -> bool:
    """Return whether the lockfile in ``project_dir`` must be regenerated.

    Args:
        project_dir: Project root holding the manifest and the lockfile.

    Returns:
        ``True`` if the lockfile is missing or strictly older than the
        manifest, ``False`` otherwise.

    Raises:
        FileOperationError: The lockfile exists but either file's
            modification time cannot be read (including a missing
            manifest).
    """
    if not lockfile_path(project_dir).exists():
        logger.debug("No %s in %s", LOCKFILE_NAME, project_dir)
        return True

    outdated = lock_last_modified(project_dir) < manifest_last_modified(project_dir)
    logger.debug(
        "%s is %s relative to %s",
        LOCKFILE_NAME,
        "outdated" if outdated else "up to date",
        MANIFEST_FILE_NAME,
    )
    return outdated
