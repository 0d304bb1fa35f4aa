"""
File system utilities for binkit.

Small, explicit helpers for the artifact directory lifecycle:
- Directory creation and clearing
- Permission changes
- Safe recursive deletion

Errors from the operating system are left to propagate unchanged.
"""

import logging
import os
import shutil
import stat
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def is_relative_to(path: Path, parent: Path) -> bool:
    """
    Check if path is relative to (under) parent directory.

    Args:
        path: Path to check
        parent: Parent directory

    Returns:
        True if path is under parent directory
    """
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists (idempotent).

    Args:
        path: Directory path

    Returns:
        Path object

    Example:
        >>> ensure_directory('/tmp/binkit/tool/v1.0.0')
        PosixPath('/tmp/binkit/tool/v1.0.0')
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def remove_entry(path: Path) -> None:
    """Remove a file, symlink or directory tree."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def clear_directory(path: Union[str, Path], keep: Optional[str] = None) -> List[Path]:
    """
    Remove every entry inside a directory, optionally sparing one name.

    Args:
        path: Directory to clear
        keep: Entry name to leave in place

    Returns:
        List of removed entries

    Example:
        >>> clear_directory('/tmp/binkit/tool/v1.0.0', keep='tool')
        [PosixPath('/tmp/binkit/tool/v1.0.0/tool.tar.gz')]
    """
    path = Path(path)
    removed = []

    for entry in sorted(path.iterdir()):
        if keep is not None and entry.name == keep:
            continue
        remove_entry(entry)
        removed.append(entry)
        logger.debug(f"Removed {entry}")

    return removed


def make_executable(path: Union[str, Path]) -> None:
    """
    Add execute permission for user, group and others.

    Raises:
        FileNotFoundError: If path does not exist
    """
    path = Path(path)
    mode = path.stat().st_mode
    os.chmod(path, mode | EXECUTABLE_BITS)
    logger.debug(f"Marked executable: {path}")


def safe_rmtree(
    path: Union[str, Path], require_prefix: Optional[Union[str, Path]] = None
) -> bool:
    """
    Remove a directory tree with safeguards.

    Args:
        path: Directory to remove
        require_prefix: If specified, path must be under this directory

    Returns:
        True if something was removed, False if path did not exist

    Raises:
        ValueError: If path is not under require_prefix
        NotADirectoryError: If path is not a directory

    Example:
        >>> safe_rmtree('/opt/bin/tool/v1.0.0', require_prefix='/opt/bin')
        True
        >>> safe_rmtree('/usr/bin', require_prefix='/opt/bin')  # ValueError
    """
    path = Path(path).absolute()

    if require_prefix is not None:
        require_prefix = Path(require_prefix).absolute()
        if path == require_prefix or not is_relative_to(path, require_prefix):
            raise ValueError(
                f"Refusing to delete '{path}': not under required prefix '{require_prefix}'"
            )

    if not path.exists():
        return False

    if not path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {path}")

    shutil.rmtree(path)
    return True
