"""Tests for filename sanitizing."""

from __future__ import annotations

import re

import pytest

from filets.validation import MAX_FILENAME_LENGTH, sanitize_filename


class TestSanitizeFilename:
    """Tests for sanitize_filename."""

    def test_removes_invalid_characters(self) -> None:
        """Test reserved characters, quotes and punctuation are handled."""
        assert sanitize_filename("Invalid/File:Name? *'\"`´!@#.txt") == "Invalid-File-Name-txt"

    def test_replaces_spaces(self) -> None:
        """Test whitespace runs become single hyphens."""
        assert sanitize_filename("file name  with\tspaces") == "file-name-with-spaces"

    def test_strips_edge_hyphens(self) -> None:
        """Test leading and trailing hyphens are removed."""
        assert sanitize_filename("  --draft--  ") == "draft"

    def test_removes_curly_quotes(self) -> None:
        """Test typographic quotes are dropped."""
        assert sanitize_filename("“Don’t panic”") == "Dont-panic"

    def test_limits_length(self) -> None:
        """Test output is cut to 255 characters."""
        assert len(sanitize_filename("a" * 300)) == MAX_FILENAME_LENGTH

    def test_no_trailing_hyphen_after_cut(self) -> None:
        """Test a hyphen exposed by the length cut is stripped."""
        result = sanitize_filename("a" * 254 + " b")

        assert result == "a" * 254

    def test_empty(self) -> None:
        """Test an empty name stays empty."""
        assert sanitize_filename("") == ""

    @pytest.mark.parametrize(
        "raw",
        [
            'C:\\Users\\me\\<report>|"final"?.docx',
            "   ",
            "***???",
            "tabs\tand\nnewlines  and   spaces",
            "-" * 10 + "x" * 300 + "-" * 10,
            "über café 日本語.md",
        ],
    )
    def test_invariants(self, raw: str) -> None:
        """Test length, character set and edge invariants."""
        result = sanitize_filename(raw)

        assert len(result) <= MAX_FILENAME_LENGTH
        assert not re.search(r'[<>:"/\\|?*]', result)
        assert not re.search(r"\s", result)
        assert "--" not in result
        assert not result.startswith("-")
        assert not result.endswith("-")
