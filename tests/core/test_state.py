"""
Unit tests for installation state inspection.

Tests cover:
- Artifact existence
- Link detection, including dangling and foreign links
- Independence of the two predicates
"""

import os

import pytest

from binkit.core.paths import BinaryPaths
from binkit.core.state import artifact_exists, inspect, is_linked, read_link


@pytest.fixture
def paths(tmp_path):
    link_dir = tmp_path / "link"
    link_dir.mkdir()
    return BinaryPaths(tmp_path / "binaries", link_dir)


def install_artifact(paths, name, version):
    artifact = paths.artifact_file(name, version)
    artifact.parent.mkdir(parents=True)
    artifact.write_text("#!/bin/sh\n")
    return artifact


@pytest.mark.unit
class TestArtifactExists:
    """Tests for artifact_exists."""

    def test_missing(self, paths):
        assert artifact_exists(paths, "tool", "1.0.0") is False

    def test_present(self, paths):
        install_artifact(paths, "tool", "1.0.0")
        assert artifact_exists(paths, "tool", "1.0.0") is True

    def test_other_version_does_not_count(self, paths):
        install_artifact(paths, "tool", "1.0.0")
        assert artifact_exists(paths, "tool", "2.0.0") is False

    def test_directory_at_artifact_path_counts(self, paths):
        """Any entry type counts as existing."""
        paths.artifact_file("tool", "1.0.0").mkdir(parents=True)
        assert artifact_exists(paths, "tool", "1.0.0") is True

    def test_empty_version_dir_does_not_count(self, paths):
        paths.artifact_dir("tool", "1.0.0").mkdir(parents=True)
        assert artifact_exists(paths, "tool", "1.0.0") is False


@pytest.mark.unit
class TestIsLinked:
    """Tests for is_linked."""

    def test_no_link(self, paths):
        assert is_linked(paths, "tool", "1.0.0") is False

    def test_linked(self, paths):
        install_artifact(paths, "tool", "1.0.0")
        os.symlink(str(paths.artifact_file("tool", "1.0.0")), paths.link_path("tool"))
        assert is_linked(paths, "tool", "1.0.0") is True

    def test_dangling_link_counts(self, paths):
        os.symlink(str(paths.artifact_file("tool", "1.0.0")), paths.link_path("tool"))
        assert is_linked(paths, "tool", "1.0.0") is True

    def test_linked_to_other_version(self, paths):
        os.symlink(str(paths.artifact_file("tool", "1.0.0")), paths.link_path("tool"))
        assert is_linked(paths, "tool", "2.0.0") is False

    def test_regular_file_in_slot(self, paths):
        paths.link_path("tool").write_text("not a link")
        assert is_linked(paths, "tool", "1.0.0") is False

    def test_string_comparison_is_exact(self, paths, tmp_path):
        """A relative link to the same file is not the canonical target."""
        install_artifact(paths, "tool", "1.0.0")
        relative = os.path.relpath(paths.artifact_file("tool", "1.0.0"), paths.link_dir)
        os.symlink(relative, paths.link_path("tool"))
        assert is_linked(paths, "tool", "1.0.0") is False

    def test_read_link_missing(self, paths):
        assert read_link(paths, "tool") == ""


@pytest.mark.unit
class TestInspect:
    """Tests for inspect."""

    def test_exists_not_linked(self, paths):
        install_artifact(paths, "tool", "1.0.0")
        state = inspect(paths, "tool", "1.0.0")
        assert (state.exists, state.linked) == (True, False)

    def test_linked_not_exists(self, paths):
        os.symlink(str(paths.artifact_file("tool", "1.0.0")), paths.link_path("tool"))
        state = inspect(paths, "tool", "1.0.0")
        assert (state.exists, state.linked) == (False, True)

    def test_neither(self, paths):
        state = inspect(paths, "tool", "1.0.0")
        assert state.name == "tool"
        assert state.version == "1.0.0"
        assert (state.exists, state.linked) == (False, False)
