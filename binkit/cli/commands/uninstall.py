"""
Uninstall command implementation.

Removes a binary version if present, then unlinks it if it is the linked one.
"""

import logging

from ..utils import run_lifecycle_command

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the uninstall command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")
    return run_lifecycle_command(args, "uninstall")
