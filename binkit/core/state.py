"""
Installation state inspection.

State is derived from the filesystem on every call. Nothing here caches
results or records installed versions anywhere else.
"""

import logging
import os
from dataclasses import dataclass

from .paths import BinaryPaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Installation:
    """
    Snapshot of one (name, version) pair.

    ``exists`` and ``linked`` are independent: a link slot may point at a
    version that is not on disk, and a version on disk need not be linked.
    """

    name: str
    version: str
    exists: bool
    linked: bool


def artifact_exists(paths: BinaryPaths, name: str, version: str) -> bool:
    """
    Check if the artifact for a version is present.

    Any entry type counts. A dangling symlink at the artifact path does not.

    Args:
        paths: Path resolver
        name: Binary name
        version: Binary version

    Returns:
        True if the artifact file exists
    """
    return paths.artifact_file(name, version).exists()


def read_link(paths: BinaryPaths, name: str) -> str:
    """
    Read the raw target of a binary's link slot.

    Returns:
        Target string, or an empty string if the slot is absent or not a link
    """
    try:
        return os.readlink(paths.link_path(name))
    except OSError as e:
        logger.debug(f"No link for {name}: {e}")
        return ""


def is_linked(paths: BinaryPaths, name: str, version: str) -> bool:
    """
    Check if a binary's link slot points at exactly this version's artifact.

    The comparison is on the raw link target string. A dangling link still
    counts as linked.
    """
    return read_link(paths, name) == str(paths.artifact_file(name, version))


def inspect(paths: BinaryPaths, name: str, version: str) -> Installation:
    """Evaluate both state predicates for a (name, version) pair."""
    return Installation(
        name=name,
        version=version,
        exists=artifact_exists(paths, name, version),
        linked=is_linked(paths, name, version),
    )
