"""Shared test fixtures."""

from __future__ import annotations

import os
import stat
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

StatFactory = Callable[..., os.stat_result]


def _stat_result(mode: int, size: int = 0, mtime: float = 0.0, ctime: float = 0.0) -> os.stat_result:
    # (mode, ino, dev, nlink, uid, gid, size, atime, mtime, ctime)
    return os.stat_result((mode, 0, 0, 1, 0, 0, size, mtime, mtime, ctime))


@pytest.fixture
def make_file_stat() -> StatFactory:
    """Factory for stat results describing a regular file."""

    def factory(size: int = 0, mtime: float = 0.0, ctime: float = 0.0) -> os.stat_result:
        return _stat_result(stat.S_IFREG | 0o644, size, mtime, ctime)

    return factory


@pytest.fixture
def make_dir_stat() -> StatFactory:
    """Factory for stat results describing a directory."""

    def factory(size: int = 4096, mtime: float = 0.0, ctime: float = 0.0) -> os.stat_result:
        return _stat_result(stat.S_IFDIR | 0o755, size, mtime, ctime)

    return factory


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    By default nothing exists.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.stat.side_effect = FileNotFoundError(2, "No such file or directory")
    fs.listdir.return_value = []
    fs.read_text.return_value = ""
    return fs


@pytest.fixture
def existing_dir_filesystem(mock_filesystem: MagicMock, make_dir_stat: StatFactory) -> MagicMock:
    """Mock FileSystem where every path exists and is a directory."""
    mock_filesystem.exists.return_value = True
    mock_filesystem.stat.side_effect = None
    mock_filesystem.stat.return_value = make_dir_stat()
    return mock_filesystem


# ============================================================================
# Sample Tree Fixtures
# ============================================================================


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree.

    Layout:
        tree/a.txt
        tree/b.js
        tree/sub/c.txt
        tree/sub/nested/
        tree/empty/
    """
    root = tmp_path / "tree"
    (root / "sub" / "nested").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "b.js").write_text("beta")
    (root / "sub" / "c.txt").write_text("gamma")
    return root
