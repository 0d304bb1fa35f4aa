"""
Concurrent access control for binkit.

Separate binkit invocations share the artifact and link directories with no
other coordination. This module provides an advisory, per-binary file lock
so that two processes working on the same binary name take turns.

Usage:
    from binkit.core.locking import LockManager

    lock_manager = LockManager(parent_dir / ".locks")
    with lock_manager.binary_lock("kubectl", timeout=300):
        # Safely download/link/remove kubectl
        pass
"""

import logging
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout as LockTimeout

logger = logging.getLogger(__name__)

LOCK_DIR_NAME = ".locks"
DEFAULT_TIMEOUT = 300


def get_lock_dir(parent_dir: Path) -> Path:
    """
    Get the lock directory for a binary parent directory.

    Args:
        parent_dir: Configured binary parent directory

    Returns:
        Path to lock directory inside parent_dir
    """
    return Path(parent_dir) / LOCK_DIR_NAME


class LockManager:
    """
    Manages advisory locks for binkit binaries.

    Uses file-based locking with the `filelock` library so locks are
    released automatically when a process dies.

    Attributes:
        lock_dir: Directory where lock files are stored
    """

    def __init__(self, lock_dir: Path):
        """
        Initialize lock manager.

        The lock directory is created lazily on first acquisition so that
        read-only operations never touch the filesystem.

        Args:
            lock_dir: Directory for lock files
        """
        self.lock_dir = Path(lock_dir)

    def lock_path(self, name: str) -> Path:
        """Return the lock file used for a binary name."""
        safe_name = name.replace("/", "-").replace("\\", "-").replace(":", "-")
        return self.lock_dir / f"binary-{safe_name}.lock"

    @contextmanager
    def binary_lock(self, name: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Acquire lock for a specific binary name.

        Covers every version of the binary, since all versions share one link
        slot.

        Args:
            name: Binary name
            timeout: Maximum wait time in seconds (default: 300 for long downloads)

        Yields:
            None

        Raises:
            LockTimeout: If lock can't be acquired within timeout

        Example:
            >>> lock_manager = LockManager(Path('/opt/bin/.locks'))
            >>> with lock_manager.binary_lock('kubectl', timeout=300):
            ...     fetch_artifact(...)
        """
        self.lock_dir.mkdir(parents=True, exist_ok=True)
        lock_path = self.lock_path(name)
        lock = FileLock(lock_path, timeout=timeout)

        try:
            with lock:
                logger.debug(f"Acquired binary lock: {lock_path}")
                yield
                logger.debug(f"Released binary lock: {lock_path}")
        except LockTimeout as e:
            message = (
                f"Could not acquire lock for binary '{name}' after {timeout}s. "
                "Another binkit process may be working on it."
            )
            logger.error(message)
            raise LockTimeout(message) from e


__all__ = [
    "LockManager",
    "LockTimeout",
    "get_lock_dir",
    "DEFAULT_TIMEOUT",
]
