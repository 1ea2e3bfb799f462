"""Tests for filesystem wiring."""

from __future__ import annotations

from unittest.mock import MagicMock

from filets.context import default_filesystem, resolve_filesystem
from filets.filesystem import RealFileSystem


class TestResolveFilesystem:
    """Tests for resolve_filesystem."""

    def test_default_is_real(self) -> None:
        """Test omitting fs gives the real filesystem."""
        assert isinstance(resolve_filesystem(), RealFileSystem)

    def test_default_is_shared(self) -> None:
        """Test the default filesystem is created once."""
        assert resolve_filesystem() is default_filesystem()
        assert default_filesystem() is default_filesystem()

    def test_injected_wins(self) -> None:
        """Test an injected filesystem is returned unchanged."""
        fake = MagicMock()

        assert resolve_filesystem(fake) is fake
