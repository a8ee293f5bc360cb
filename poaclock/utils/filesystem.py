"""
File access for the lockfile.

The lockfile is read as raw bytes so that decoding stays a parse concern
of the caller, and written through a sibling temporary file that replaces
the target in one step. Operating-system failures surface as
``FileOperationError``.

Nothing here takes a lock. Concurrent writers to one project directory
must be serialized by the caller.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from datetime import datetime
from typing import Optional, Union

from poaclock.utils.logger import get_logger
from poaclock.exceptions import FileOperationError
from poaclock.constants import MAX_FILE_SIZE


logger = get_logger("filesystem")

PathLike = Union[str, Path]


def _os_failure(action: str, path: Path, operation: str, exc: OSError) -> FileOperationError:
    return FileOperationError(
        f"Cannot {action} {path.name}: {exc.strerror or exc}",
        file_path=str(path),
        operation=operation,
        original_error=exc,
    )


def read_bytes(file_path: PathLike, *, max_size: Optional[int] = MAX_FILE_SIZE) -> bytes:
    """Return the raw content of ``file_path``.

    Args:
        file_path: File to read.
        max_size: Refuse files larger than this many bytes; ``None`` reads
            any size.

    Raises:
        FileOperationError: The file is missing, is not a regular file,
            is too large, or cannot be read.
    """
    path = Path(file_path)

    try:
        size = path.stat().st_size
    except OSError as exc:
        raise _os_failure("inspect", path, "stat", exc) from exc

    if max_size is not None and size > max_size:
        raise FileOperationError(
            f"{path.name} is too large: {size} bytes, limit is {max_size}",
            file_path=str(path),
            operation="read",
        )

    try:
        return path.read_bytes()
    except OSError as exc:
        raise _os_failure("read", path, "read", exc) from exc


def _replace_with(target: Path, content: str) -> None:
    """Write ``content`` next to ``target`` and move it into place."""
    target.parent.mkdir(parents=True, exist_ok=True)
    staged: Optional[Path] = None

    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="\n",
            dir=str(target.parent),
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            staged = Path(handle.name)
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())

        staged.replace(target)
    except OSError as exc:
        if staged is not None:
            try:
                staged.unlink(missing_ok=True)
            except OSError as unlink_exc:
                logger.warning("Left staged file %s behind: %s", staged, unlink_exc)
        raise _os_failure("write", target, "write", exc) from exc


def safe_write_file(
    file_path: PathLike,
    content: str,
    *,
    create_backup: bool = False,
) -> Optional[Path]:
    """Replace ``file_path`` with ``content`` in a single rename.

    Readers see either the old file or the new one, never a mix.

    Args:
        file_path: Destination path.
        content: Text to write, encoded as UTF-8 with LF line endings.
        create_backup: Copy an existing file aside first.

    Returns:
        The backup path, or ``None`` when no backup was taken.
    """
    path = Path(file_path)
    backup = create_timestamped_backup(path) if create_backup and path.is_file() else None
    _replace_with(path, content)
    return backup


def create_timestamped_backup(file_path: PathLike) -> Path:
    """Copy ``file_path`` to ``{name}.{timestamp}.backup`` in the same directory."""
    path = Path(file_path)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    backup = path.with_name(f"{path.name}.{stamp}.backup")

    try:
        shutil.copy2(path, backup)
    except OSError as exc:
        raise _os_failure("back up", path, "backup", exc) from exc

    logger.debug("Saved previous %s as %s", path.name, backup.name)
    return backup


def last_modified(file_path: PathLike) -> int:
    """Return the modification time of ``file_path`` in nanoseconds.

    Raises:
        FileOperationError: The file is missing or cannot be inspected.
    """
    path = Path(file_path)
    try:
        return path.stat().st_mtime_ns
    except OSError as exc:
        raise _os_failure("inspect", path, "stat", exc) from exc
