"""
Centralized constants for poaclock.

This module defines the lockfile schema constants, the fixed file names
shared with the manifest layer, and logging formats. All values are
intended to be treated as read-only.
"""

from typing import Final

# ---------------------------------------------------------------------------
# File names
# ---------------------------------------------------------------------------

#: Name of the lockfile inside a project directory.
LOCKFILE_NAME: Final[str] = "poac.lock"

#: Name of the project manifest owned by the manifest layer.
MANIFEST_FILE_NAME: Final[str] = "poac.toml"

#: Name of the standalone configuration file.
CONFIG_FILE_NAME: Final[str] = "poaclock.toml"

# ---------------------------------------------------------------------------
# Lockfile schema
# ---------------------------------------------------------------------------

#: The only schema generation this release reads and writes.
LOCKFILE_VERSION: Final[int] = 1

#: Disclaimer written above the TOML body of every lockfile.
LOCKFILE_HEADER: Final[str] = (
    "# This file is automatically generated by Poac.\n"
    "# It is not intended for manual editing."
)

#: Version placeholder for dependency edges restored from a lockfile.
UNKNOWN_VERSION: Final[str] = ""

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

#: Maximum allowed lockfile size (in bytes) when reading.
MAX_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10 MB

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
