"""Tests for recursive search."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from filets.errors import FindDirectoriesError, FindFilesError
from filets.search import find_directories, find_files


class TestFindFiles:
    """Tests for find_files."""

    def test_pattern(self, sample_tree: Path) -> None:
        """Test only files containing the pattern are returned."""
        found = find_files(sample_tree, ".txt")

        assert set(found) == {
            str(sample_tree / "a.txt"),
            str(sample_tree / "sub" / "c.txt"),
        }

    def test_no_pattern_returns_all_files(self, sample_tree: Path) -> None:
        """Test every file is returned and no directory is."""
        found = find_files(sample_tree)

        assert set(found) == {
            str(sample_tree / "a.txt"),
            str(sample_tree / "b.js"),
            str(sample_tree / "sub" / "c.txt"),
        }

    def test_directories_never_match(self, sample_tree: Path) -> None:
        """Test a pattern matching a directory name does not return it."""
        assert find_files(sample_tree, "sub") == []

    def test_substring_not_glob(self, sample_tree: Path) -> None:
        """Test glob characters are matched literally."""
        assert find_files(sample_tree, "*.txt") == []

    def test_pre_order(
        self, mock_filesystem: MagicMock, make_file_stat, make_dir_stat
    ) -> None:
        """Test a subdirectory is walked before the next sibling entry."""
        listings = {"/r": ["d", "z.txt"], "/r/d": ["inner.txt"]}
        mock_filesystem.listdir.side_effect = lambda path: listings[path]
        mock_filesystem.stat.side_effect = (
            lambda path: make_dir_stat() if path == "/r/d" else make_file_stat()
        )

        assert find_files("/r", ".txt", fs=mock_filesystem) == ["/r/d/inner.txt", "/r/z.txt"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Test a missing root raises FindFilesError."""
        with pytest.raises(FindFilesError, match="^Failed to find files: "):
            find_files(tmp_path / "missing")

    def test_stat_failure(self, mock_filesystem: MagicMock) -> None:
        """Test an entry that cannot be stat'ed fails the search."""
        mock_filesystem.listdir.return_value = ["broken-link"]

        with pytest.raises(FindFilesError) as exc_info:
            find_files("/root", fs=mock_filesystem)

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_symlink_cycle_fails(self, tmp_path: Path) -> None:
        """Test a symlink loop ends in FindFilesError rather than hanging."""
        loop = tmp_path / "loop"
        loop.mkdir()
        try:
            (loop / "again").symlink_to(loop, target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")

        with pytest.raises(FindFilesError):
            find_files(tmp_path)


class TestFindDirectories:
    """Tests for find_directories."""

    def test_all_directories(self, sample_tree: Path) -> None:
        """Test every directory is returned without a pattern."""
        found = find_directories(sample_tree)

        assert set(found) == {
            str(sample_tree / "sub"),
            str(sample_tree / "sub" / "nested"),
            str(sample_tree / "empty"),
        }

    def test_pattern(self, sample_tree: Path) -> None:
        """Test only matching directories are returned."""
        assert find_directories(sample_tree, "nest") == [str(sample_tree / "sub" / "nested")]

    def test_recurses_through_non_matching(self, tmp_path: Path) -> None:
        """Test a match below a non-matching directory is found."""
        (tmp_path / "outer" / "target-dir").mkdir(parents=True)

        assert find_directories(tmp_path, "target") == [str(tmp_path / "outer" / "target-dir")]

    def test_files_never_match(self, sample_tree: Path) -> None:
        """Test files are not returned."""
        assert find_directories(sample_tree, ".txt") == []

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Test a missing root raises FindDirectoriesError."""
        with pytest.raises(FindDirectoriesError, match="^Failed to find directories: "):
            find_directories(tmp_path / "missing")
