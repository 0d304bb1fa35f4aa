"""
Pytest configuration and shared fixtures for binkit tests.
"""

import logging
from pathlib import Path

import pytest

from binkit.binaries.lifecycle import BinaryLifecycle
from binkit.config.parser import BinKitConfig, parse_catalog

from helpers import FAILING_DOWNLOAD, TOOL_DOWNLOAD, binary_entry, write_catalog


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def parent_dir(tmp_path) -> Path:
    """Binary parent directory (not created up front)."""
    return tmp_path / "binaries"


@pytest.fixture
def link_dir(tmp_path) -> Path:
    """Link directory standing in for a PATH entry."""
    path = tmp_path / "link"
    path.mkdir()
    return path


@pytest.fixture
def catalog_file(tmp_path, parent_dir, link_dir) -> Path:
    """Catalog with a working 'tool' and a failing 'broken' binary."""
    return write_catalog(
        tmp_path / "catalog.yaml",
        parent_dir,
        link_dir,
        binaries=[
            binary_entry("tool", [TOOL_DOWNLOAD]),
            binary_entry("broken", [FAILING_DOWNLOAD]),
        ],
    )


@pytest.fixture
def config(catalog_file) -> BinKitConfig:
    """Parsed configuration for catalog_file."""
    return parse_catalog(catalog_file)


@pytest.fixture
def lifecycle(config) -> BinaryLifecycle:
    """Lifecycle manager using the real subprocess runner."""
    return BinaryLifecycle(config)


@pytest.fixture
def isolated_home(tmp_path, monkeypatch) -> Path:
    """Create isolated home directory for tests."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()

    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.delenv("BINKIT_CATALOG", raising=False)

    return fake_home


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo the CLI's logging.basicConfig(force=True) after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
