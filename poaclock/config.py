"""Configuration file loader for poaclock.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``poaclock.toml``: settings under ``[poaclock]`` table
- ``poac.toml`` (the project manifest): settings under ``[tool.poaclock]``

Discovery order:

1. Explicit path from ``--config`` or ``POACLOCK_CONFIG``
2. ``poaclock.toml`` in the project directory
3. ``poac.toml`` with a ``[tool.poaclock]`` section in the project directory

Example (``poaclock.toml``)::

    [poaclock]
    max_file_size = 1048576
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from poaclock.exceptions import ConfigError
from poaclock.utils.logger import get_logger
from poaclock.constants import (
    CONFIG_FILE_NAME,
    MANIFEST_FILE_NAME,
    MAX_FILE_SIZE,
)

logger = get_logger("config")


@dataclass
class PoacLockConfig:
    """Parsed and validated poaclock configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        max_file_size: Largest lockfile, in bytes, the reader accepts.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    max_file_size: int = MAX_FILE_SIZE

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "max_file_size": self.max_file_size,
        }


def discover_config_file(
    explicit_path: Optional[Path] = None,
    *,
    project_dir: Optional[Path] = None,
) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.
        project_dir: Directory searched for ``poaclock.toml`` and
            ``poac.toml``. Defaults to the current directory.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    base = project_dir if project_dir is not None else Path.cwd()

    standalone = base / CONFIG_FILE_NAME
    if standalone.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, standalone)
        return standalone

    manifest = base / MANIFEST_FILE_NAME
    if manifest.is_file() and _manifest_has_poaclock_section(manifest):
        logger.debug("Found [tool.poaclock] in %s", manifest)
        return manifest

    logger.debug("No configuration file found")
    return None


def _manifest_has_poaclock_section(path: Path) -> bool:
    """Check if the manifest contains a ``[tool.poaclock]`` section.

    A manifest that cannot be parsed is treated as having no section;
    reporting manifest syntax errors belongs to the manifest layer.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Skipping unreadable manifest %s: %s", path, exc)
        return False
    tool = raw.get("tool", {})
    return isinstance(tool, dict) and "poaclock" in tool


def load_config(
    config_path: Optional[Path] = None,
    *,
    project_dir: Optional[Path] = None,
) -> PoacLockConfig:
    """Load and validate poaclock configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).
        project_dir: Directory used for auto-discovery.

    Returns:
        Validated :class:`PoacLockConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path, project_dir=project_dir)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return PoacLockConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == MANIFEST_FILE_NAME:
        tool = raw.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(
                f"tool in {MANIFEST_FILE_NAME} must be a table",
                config_path=str(resolved),
            )
        section = tool.get("poaclock", {})
    else:
        section = raw.get("poaclock", {})

    if not section:
        logger.debug("Config file found but no poaclock section, using defaults")
        return PoacLockConfig(source_path=resolved)

    if not isinstance(section, dict):
        raise ConfigError(
            "poaclock configuration must be a table",
            config_path=str(resolved),
        )

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> PoacLockConfig:
    """Parse and validate a ``[poaclock]`` or ``[tool.poaclock]`` table.

    Raises:
        ConfigError: Unknown keys or incorrect types.
    """
    config = PoacLockConfig()

    known_top = {"max_file_size"}

    unknown_top = set(section.keys()) - known_top
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    if "max_file_size" in section:
        val = section["max_file_size"]
        if isinstance(val, bool) or not isinstance(val, int) or val <= 0:
            raise ConfigError(
                f"max_file_size must be a positive integer, got {val!r}",
                config_path=config_path,
                option="max_file_size",
            )
        config.max_file_size = val

    return config
