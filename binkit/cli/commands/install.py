"""
Install command implementation.

Downloads a binary version if needed, then links it if it is not already linked.
"""

import logging

from ..utils import run_lifecycle_command

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")
    return run_lifecycle_command(args, "install")
