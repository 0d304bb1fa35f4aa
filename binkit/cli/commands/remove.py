"""
Remove command implementation.

Deletes a binary version's directory. The link slot is left alone.
"""

import logging

from ..utils import run_lifecycle_command

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the remove command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")
    return run_lifecycle_command(args, "remove")
