"""
Test helper utilities for binkit testing.

Catalog builders and filesystem snapshots shared by the test modules.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


def python_command(code: str) -> List[str]:
    """Catalog command running a Python snippet with the test interpreter."""
    return [sys.executable, "-c", code]


# Writes the executable plus a leftover file that fetching must prune
TOOL_DOWNLOAD = python_command(
    "import pathlib; "
    "pathlib.Path('{name}').write_text('#!/bin/sh\\necho {version}\\n'); "
    "pathlib.Path('{name}-{version}.tar.gz').write_text('archive')"
)

FAILING_DOWNLOAD = python_command("import sys; sys.exit(3)")

KILLED_DOWNLOAD = python_command("import os, signal; os.kill(os.getpid(), signal.SIGKILL)")


def write_catalog(
    path: Path,
    parent_dir: Path,
    link_dir: Path,
    binaries: Optional[List[Dict[str, Any]]] = None,
    **extra,
) -> Path:
    """Write a catalog YAML file."""
    data = {
        "parent_dir": str(parent_dir),
        "link_dir": str(link_dir),
        "binaries": binaries if binaries is not None else [],
    }
    data.update(extra)
    path.write_text(yaml.safe_dump(data))
    return path


def binary_entry(name: str, commands: List[Any], **extra) -> Dict[str, Any]:
    """Build one catalog binary entry."""
    entry = {
        "name": name,
        "exec": {"download": {"binary": commands, "checksum": []}},
    }
    entry.update(extra)
    return entry


def snapshot(root: Path) -> Dict[str, str]:
    """Map every entry under root to its type and content or link target."""
    state = {}
    for entry in sorted(root.rglob("*")):
        rel = str(entry.relative_to(root))
        if entry.is_symlink():
            state[rel] = "link:" + os.readlink(entry)
        elif entry.is_dir():
            state[rel] = "dir"
        else:
            state[rel] = "file:" + entry.read_text()
    return state
