"""
Custom exception hierarchy for poaclock.

All exceptions inherit from :class:`PoacLockError` and carry optional
structured metadata via the ``details`` attribute. Exceptions raised by
third-party parsers never leave the package unwrapped; they are converted
into one of the types below at the read boundary.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional

from poaclock.constants import LOCKFILE_VERSION


class PoacLockError(Exception):
    """Base exception for all poaclock errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class InvalidLockfileVersion(PoacLockError):
    """Raised when a lockfile declares an unsupported schema version.

    There is no migration path between schema generations: any value
    other than :data:`~poaclock.constants.LOCKFILE_VERSION` is rejected.

    Args:
        found: The version value read from the lockfile.
    """

    __slots__ = ("found",)

    def __init__(self, found: int) -> None:
        super().__init__(
            f"invalid lockfile version found: {found}",
            {"expected": LOCKFILE_VERSION},
        )
        self.found = found


class FailedToReadLockfile(PoacLockError):
    """Raised when a lockfile cannot be parsed or has the wrong shape.

    Args:
        reason: Diagnostic from the underlying parser, kept verbatim.
        file_path: Path to the offending lockfile, if known.
    """

    __slots__ = ("reason", "file_path")

    def __init__(self, reason: str, *, file_path: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "file", file_path)

        super().__init__(f"failed to read lockfile:\n{reason}", details)

        self.reason = reason
        self.file_path = file_path


class FileOperationError(PoacLockError):
    """Raised when file system operations fail.

    Args:
        message: Error description.
        file_path: Path to the file involved.
        operation: Operation being performed (read/write/stat/backup).
        original_error: Original exception that triggered this error.
    """

    __slots__ = ("file_path", "operation", "original_error")

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", file_path)
        _add_if(details, "operation", operation)
        _add_if(
            details,
            "original_error",
            str(original_error) if original_error else None,
        )

        super().__init__(message, details)

        self.file_path = file_path
        self.operation = operation
        self.original_error = original_error


class ConfigError(PoacLockError):
    """Raised when a configuration file is missing, malformed, or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
