"""Filesystem wiring for the filets operations.

Operations accept an optional ``fs`` argument typed with the FileSystem
protocol rather than a concrete class. Production callers omit it and get
the shared RealFileSystem; tests pass a double instead.
"""

from __future__ import annotations

from functools import lru_cache

from filets.protocols import FileSystem


@lru_cache(maxsize=None)
def default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from filets.filesystem import RealFileSystem

    return RealFileSystem()


def resolve_filesystem(fs: FileSystem | None = None) -> FileSystem:
    """Return the injected filesystem, or the default one.

    Args:
        fs: Filesystem supplied by the caller, if any.

    Returns:
        The filesystem to delegate to.
    """
    return fs if fs is not None else default_filesystem()
