"""Argument validation for lifecycle operations.

Every lifecycle operation passes through ``validate`` before it inspects or
touches the filesystem.
"""

import re
from typing import Optional

from ..config.parser import BinKitConfig
from ..core.exceptions import InvalidNameError, InvalidVersionError

HELP_TOKEN = "help"

VERSION_PATTERN = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+$")


def is_help_token(name: Optional[str]) -> bool:
    """
    Check if a positional argument requests command help.

    The token shadows any catalog binary that is itself named "help".
    """
    return name == HELP_TOKEN


def is_valid_name(config: BinKitConfig, name: Optional[str]) -> bool:
    """Exact, case-sensitive catalog membership."""
    return name is not None and name in config.binaries


def is_valid_version(version: Optional[str]) -> bool:
    """
    Check strict MAJOR.MINOR.PATCH syntax.

    Example:
        >>> is_valid_version("1.2.3")
        True
        >>> is_valid_version("v1.2.3")
        False
    """
    # fullmatch so a trailing newline is not accepted
    return version is not None and VERSION_PATTERN.fullmatch(version) is not None


def validate_name(
    config: BinKitConfig, name: Optional[str], command: Optional[str] = None
) -> None:
    """
    Raises:
        InvalidNameError: If name is not in the catalog
    """
    if not is_valid_name(config, name):
        raise InvalidNameError(name or "", command)


def validate_version(version: Optional[str], command: Optional[str] = None) -> None:
    """
    Raises:
        InvalidVersionError: If version is not strict MAJOR.MINOR.PATCH
    """
    if not is_valid_version(version):
        raise InvalidVersionError(version or "", command)


def validate(
    config: BinKitConfig,
    name: Optional[str],
    version: Optional[str],
    command: Optional[str] = None,
) -> None:
    """
    Validate a (name, version) pair, name first.

    Args:
        config: Loaded configuration
        name: Binary name
        version: Binary version
        command: Command name used in diagnostics

    Raises:
        InvalidNameError: If name is not in the catalog
        InvalidVersionError: If version syntax is invalid
    """
    validate_name(config, name, command)
    validate_version(version, command)
