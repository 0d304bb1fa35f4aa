"""Configuration module for binkit.

This module provides catalog parsing for the binary catalog, which carries
both the binary definitions and the install/link directory settings.
"""

from binkit.config.parser import (
    BinarySpec,
    BinKitConfig,
    CATALOG_ENV_VAR,
    default_catalog_path,
    parse_catalog,
    parse_catalog_data,
)
from binkit.core.exceptions import ConfigError, CatalogMissingConfigError

__all__ = [
    "BinarySpec",
    "BinKitConfig",
    "CATALOG_ENV_VAR",
    "ConfigError",
    "CatalogMissingConfigError",
    "default_catalog_path",
    "parse_catalog",
    "parse_catalog_data",
]
