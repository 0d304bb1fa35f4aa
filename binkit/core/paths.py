"""
Canonical install and link locations for binaries.

Layout:
    <parent_dir>/<name>/v<version>/<name>   installed executable
    <link_dir>/<name>                       active link slot for <name>
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BinaryPaths:
    """Pure mapping from (name, version) to filesystem paths."""

    parent_dir: Path
    link_dir: Path

    def artifact_dir(self, name: str, version: str) -> Path:
        """Directory holding exactly one version of a binary."""
        return self.parent_dir / name / f"v{version}"

    def artifact_file(self, name: str, version: str) -> Path:
        """Executable file for one version of a binary."""
        return self.artifact_dir(name, version) / name

    def link_path(self, name: str) -> Path:
        """Link slot shared by all versions of a binary."""
        return self.link_dir / name
