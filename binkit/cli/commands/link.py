"""
Link command implementation.

Points the binary's link slot at one version, replacing any previous target.
"""

import logging

from ..utils import run_lifecycle_command

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the link command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")
    return run_lifecycle_command(args, "link")
