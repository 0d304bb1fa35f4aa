"""
Core functionality for binkit.

This package contains the foundational modules that other components depend on.
"""

from .paths import BinaryPaths

from .state import (
    Installation,
    artifact_exists,
    is_linked,
    inspect,
)

from .locking import (
    LockManager,
    LockTimeout,
    get_lock_dir,
)

from .exceptions import (
    BinKitError,
    ValidationError,
    InvalidNameError,
    InvalidVersionError,
    ConfigError,
    CatalogMissingConfigError,
    FetchError,
    DownloadCommandError,
)

__all__ = [
    "BinaryPaths",
    "Installation",
    "artifact_exists",
    "is_linked",
    "inspect",
    "LockManager",
    "LockTimeout",
    "get_lock_dir",
    "BinKitError",
    "ValidationError",
    "InvalidNameError",
    "InvalidVersionError",
    "ConfigError",
    "CatalogMissingConfigError",
    "FetchError",
    "DownloadCommandError",
]
