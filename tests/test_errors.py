"""Tests for the error taxonomy."""

from __future__ import annotations

import pytest

from filets import errors
from filets.errors import DirectoryNotFoundError, FiletsError, FileWriteError


class TestFiletsError:
    """Tests for error message formatting."""

    def test_message_has_prefix_and_detail(self) -> None:
        """Test str() is '<prefix>: <detail>'."""
        error = FileWriteError(OSError("Disk full"))

        assert str(error) == "Failed to write text file: Disk full"
        assert error.detail == "Disk full"

    def test_empty_cause_uses_type_name(self) -> None:
        """Test a cause without a message still yields a detail."""
        error = FileWriteError(OSError())

        assert str(error) == "Failed to write text file: OSError"

    def test_not_found_message(self) -> None:
        """Test the not-found error names the path."""
        assert str(DirectoryNotFoundError("/missing")) == "Directory does not exist: /missing"

    @pytest.mark.parametrize("name", errors.__all__)
    def test_all_errors_share_base(self, name: str) -> None:
        """Test every exported error derives from FiletsError."""
        assert issubclass(getattr(errors, name), FiletsError)

    def test_prefixes_are_unique(self) -> None:
        """Test each error kind can be told apart by its prefix."""
        prefixes = [getattr(errors, name).prefix for name in errors.__all__]

        assert len(prefixes) == len(set(prefixes))
