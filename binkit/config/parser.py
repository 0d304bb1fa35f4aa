"""YAML catalog parser for binkit.

This module loads the binary catalog (which also carries the process-wide
directory settings) into a ``BinKitConfig`` that is passed explicitly to
every component.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..core.exceptions import CatalogMissingConfigError, ConfigError
from ..core.locking import DEFAULT_TIMEOUT
from ..core.paths import BinaryPaths

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "BINKIT_CATALOG"

# Keys used by the legacy data.json catalog format
LEGACY_KEYS = {
    "BIN_PARENT_DIR": "parent_dir",
    "BIN_LINK_DIR": "link_dir",
}

Command = Union[str, List[str]]


@dataclass
class BinarySpec:
    """Catalog entry for one installable binary."""

    name: str
    download_commands: List[Command] = field(default_factory=list)
    checksum_commands: List[Command] = field(default_factory=list)  # reserved
    shell: bool = False  # Run string commands through the shell
    script: bool = False  # Run all commands as one bash script


@dataclass
class BinKitConfig:
    """Complete binkit configuration."""

    parent_dir: Path
    link_dir: Path
    binaries: Dict[str, BinarySpec] = field(default_factory=dict)
    lock_timeout: float = DEFAULT_TIMEOUT
    source: Optional[Path] = None

    @property
    def binary_names(self) -> List[str]:
        """Binary names in catalog order."""
        return list(self.binaries)

    @property
    def paths(self) -> BinaryPaths:
        """Path resolver for this configuration."""
        return BinaryPaths(self.parent_dir, self.link_dir)


def default_catalog_path() -> Path:
    """
    Determine the catalog file to load.

    Returns:
        $BINKIT_CATALOG if set, otherwise ~/.binkit/catalog.yaml
    """
    env_value = os.environ.get(CATALOG_ENV_VAR)
    if env_value:
        return Path(env_value).expanduser()
    return Path.home() / ".binkit" / "catalog.yaml"


def _normalize_legacy_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalize legacy catalog keys for backwards compatibility.

    Converts BIN_PARENT_DIR/BIN_LINK_DIR to parent_dir/link_dir unless the
    modern key is already set.

    Args:
        data: Raw catalog dictionary

    Returns:
        Normalized catalog dictionary
    """
    for legacy_key, key in LEGACY_KEYS.items():
        if legacy_key in data and key not in data:
            data[key] = data.pop(legacy_key)
            logger.debug(f"Converted legacy key '{legacy_key}' to '{key}'")
    return data


def parse_catalog(config_path: Path) -> BinKitConfig:
    """
    Parse a catalog file.

    Args:
        config_path: Path to catalog YAML (or JSON) file

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If the catalog is missing, unreadable or invalid
        CatalogMissingConfigError: If parent_dir or link_dir is absent
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Catalog file '{config_path}' does not exist")

    if not os.access(config_path, os.R_OK):
        raise ConfigError(
            f"read permission is not granted for catalog file '{config_path}'"
        )

    logger.debug(f"Loading catalog from {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}")

    if data is None:
        raise ConfigError(f"Catalog file '{config_path}' is empty")

    if not isinstance(data, dict):
        raise ConfigError("Catalog must be a mapping")

    config = parse_catalog_data(data)
    config.source = config_path
    return config


def parse_catalog_data(data: Dict[str, Any]) -> BinKitConfig:
    """Parse and validate catalog data."""
    legacy = any(key in data for key in LEGACY_KEYS)
    data = _normalize_legacy_keys(dict(data))

    parent_dir = _parse_directory(data, "parent_dir")
    link_dir = _parse_directory(data, "link_dir")

    binaries: Dict[str, BinarySpec] = {}
    raw_binaries = data.get("binaries") or []
    if not isinstance(raw_binaries, list):
        raise ConfigError("'binaries' must be a list")

    for bin_data in raw_binaries:
        spec = _parse_binary(bin_data, script_default=legacy)

        if spec.name in binaries:
            raise ConfigError(f"Duplicate binary name: {spec.name}")

        binaries[spec.name] = spec

    lock_timeout = data.get("lock_timeout", DEFAULT_TIMEOUT)
    if isinstance(lock_timeout, bool) or not isinstance(lock_timeout, (int, float)):
        raise ConfigError(f"'lock_timeout' must be a number, got {lock_timeout!r}")

    return BinKitConfig(
        parent_dir=parent_dir,
        link_dir=link_dir,
        binaries=binaries,
        lock_timeout=lock_timeout,
    )


def _parse_directory(data: Dict[str, Any], key: str) -> Path:
    """Parse a required directory setting into an absolute path."""
    value = data.get(key)
    if value is None:
        raise CatalogMissingConfigError(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' must be a non-empty string")
    return Path(value).expanduser().absolute()


def _parse_binary(data: Any, script_default: bool = False) -> BinarySpec:
    """
    Parse one catalog entry.

    Legacy data.json catalogs hold bash text meant to run as one script, so
    their entries default to ``script: true``.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Binary entry must be a mapping, got {data!r}")

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigError("Binary missing required field: name")

    download = (data.get("exec") or {}).get("download") or {}
    if not isinstance(download, dict):
        raise ConfigError(f"Binary '{name}': exec.download must be a mapping")

    return BinarySpec(
        name=name,
        download_commands=_parse_commands(name, download.get("binary")),
        checksum_commands=_parse_commands(name, download.get("checksum")),
        shell=bool(data.get("shell", False)),
        script=bool(data.get("script", script_default)),
    )


def _parse_commands(name: str, commands: Any) -> List[Command]:
    """Parse a command list; each command is a string or a list of strings."""
    if commands is None:
        return []
    if not isinstance(commands, list):
        raise ConfigError(f"Binary '{name}': commands must be a list")

    parsed: List[Command] = []
    for command in commands:
        if isinstance(command, str):
            parsed.append(command)
        elif isinstance(command, list) and all(isinstance(t, str) for t in command):
            parsed.append(list(command))
        else:
            raise ConfigError(
                f"Binary '{name}': command must be a string or list of strings, "
                f"got {command!r}"
            )
    return parsed
