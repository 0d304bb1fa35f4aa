"""
Shared utilities for CLI commands.

Provides catalog loading, usage text and the common runner used by every
lifecycle subcommand.
"""

import logging
from pathlib import Path
from typing import Optional

from ..binaries.lifecycle import BinaryLifecycle
from ..binaries.validation import is_help_token
from ..config.parser import BinKitConfig, default_catalog_path, parse_catalog
from ..core.exceptions import ConfigError, ValidationError

logger = logging.getLogger(__name__)

PROG = "binkit"

COMMAND_DESCRIPTIONS = {
    "download": "Download a binary.",
    "install": "Install a binary.",
    "link": "Link a binary.",
    "remove": "Remove a binary.",
    "uninstall": "Uninstall a binary.",
    "unlink": "Unlink a binary.",
}

SEMVER_NOTICE = """\
The version must be SemVer compliant (X.Y.Z), for example:
  1.0.0     compliant.
  v1.0.0    not compliant.
See 'https://semver.org/' for more information."""


# ============================================================================
# Configuration Management
# ============================================================================


def load_catalog(catalog: Optional[Path] = None) -> BinKitConfig:
    """
    Load the binary catalog.

    Args:
        catalog: Explicit catalog path (default: $BINKIT_CATALOG or
            ~/.binkit/catalog.yaml)

    Returns:
        Parsed configuration

    Raises:
        ConfigError: If the catalog is missing or invalid
    """
    path = Path(catalog).expanduser() if catalog else default_catalog_path()
    return parse_catalog(path)


# ============================================================================
# Usage Text
# ============================================================================


def main_usage() -> str:
    """Top-level usage text."""
    lines = [
        f"Usage: {PROG} <COMMAND> <ARGS>",
        "Manage binaries.",
        "",
        "Commands:",
    ]
    for command in COMMAND_DESCRIPTIONS:
        lines.append(f"  {command:<12} see '{PROG} {command} help'.")
    return "\n".join(lines)


def args_section(config: BinKitConfig) -> str:
    """List catalog binaries followed by the version syntax notice."""
    lines = ["Binaries:"]
    lines.extend(f"  {name}" for name in config.binary_names)
    lines.append("")
    lines.append(SEMVER_NOTICE)
    return "\n".join(lines)


def command_usage(command: str, config: BinKitConfig) -> str:
    """Usage text for one lifecycle command."""
    return "\n".join(
        [
            f"Usage: {PROG} {command} <BINARY> <VERSION>",
            COMMAND_DESCRIPTIONS[command],
            "",
            args_section(config),
        ]
    )


# ============================================================================
# Command Runner
# ============================================================================


def run_lifecycle_command(args, command: str) -> int:
    """
    Run one lifecycle command from parsed arguments.

    Order of events: load the catalog, answer the "help" token, validate,
    then perform the operation.

    Args:
        args: Parsed arguments with catalog, name and version
        command: Lifecycle operation name

    Returns:
        Exit code (0 for success or no-op, 1 for invalid input)

    Raises:
        DownloadCommandError: If a download command fails
        OSError: If a filesystem operation fails
    """
    try:
        config = load_catalog(getattr(args, "catalog", None))
    except ConfigError as e:
        logger.error(f"{PROG}: {e}. Aborting.")
        return 1

    if is_help_token(args.name):
        print(command_usage(command, config))
        return 0

    lifecycle = BinaryLifecycle(config, prog=PROG)
    operation = getattr(lifecycle, command)

    try:
        operation(args.name, args.version)
    except ValidationError as e:
        logger.error(e.diagnostic(PROG))
        return 1

    return 0
