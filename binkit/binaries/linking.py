"""
binkit/binaries/linking.py

Link slot management for installed binaries.

Each binary name owns one symbolic link in the link directory. Pointing it at
a version replaces whatever it pointed at before; the target does not need
to exist (dangling links are a normal state).
"""

import logging
import os
import uuid
from pathlib import Path
from typing import Optional

from ..core.paths import BinaryPaths

logger = logging.getLogger(__name__)


class BinaryLinkManager:
    """Manages the per-name symlinks that expose binaries on PATH."""

    def __init__(self, paths: BinaryPaths):
        """
        Initialize link manager.

        Args:
            paths: Path resolver
        """
        self.paths = paths

    def create_link(self, name: str, version: str) -> Path:
        """
        Point a binary's link slot at one version's artifact.

        The new link is created under a temporary name in the link directory
        and renamed over the slot, so the slot is never observed missing.

        Args:
            name: Binary name
            version: Binary version

        Returns:
            Path to the link slot

        Raises:
            OSError: If link creation fails (e.g. the slot is a directory)
        """
        link_path = self.paths.link_path(name)
        target_path = self.paths.artifact_file(name, version)

        logger.info("# linking ...")
        logger.info(f"BIN_NAME    : {name}")
        logger.info(f"BIN_VERSION : {version}")
        logger.info(f"BIN_TARGET  : {target_path}")
        logger.info(f"BIN_LINK    : {link_path}")

        link_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = link_path.with_name(f".{name}.{uuid.uuid4().hex}.tmp")

        try:
            os.symlink(str(target_path), tmp_path)
            os.replace(tmp_path, link_path)
        except OSError:
            if tmp_path.is_symlink():
                tmp_path.unlink()
            raise

        logger.debug(f"Created symlink: {link_path} -> {target_path}")
        return link_path

    def remove_link(self, name: str, version: str) -> bool:
        """
        Remove a binary's link slot. The artifact is left untouched.

        Args:
            name: Binary name
            version: Binary version (reported only)

        Returns:
            True if a link was removed, False if the slot was already empty
        """
        link_path = self.paths.link_path(name)

        logger.info("# unlinking ...")
        logger.info(f"BIN_NAME    : {name}")
        logger.info(f"BIN_VERSION : {version}")
        logger.info(f"BIN_TARGET  : {self.paths.artifact_file(name, version)}")
        logger.info(f"BIN_LINK    : {link_path}")

        if not (link_path.exists() or link_path.is_symlink()):
            return False

        link_path.unlink()
        logger.debug(f"Removed link: {link_path}")
        return True

    def resolve_link(self, name: str) -> Optional[Path]:
        """
        Resolve a link slot to its raw target.

        Args:
            name: Binary name

        Returns:
            Target path, or None if the slot is absent or not a link
        """
        link_path = self.paths.link_path(name)
        if not link_path.is_symlink():
            return None

        try:
            return Path(os.readlink(link_path))
        except OSError as e:
            logger.debug(f"Failed to resolve link {link_path}: {e}")
            return None

