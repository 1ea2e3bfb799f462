"""Directory lifecycle operations."""

from __future__ import annotations

import logging
import os
import stat

from filets.context import resolve_filesystem
from filets.errors import (
    DirectoryCopyError,
    DirectoryCreateError,
    DirectoryMoveError,
    DirectoryReadError,
    DirectoryRemoveError,
)
from filets.paths import get_directory_name
from filets.predicates import directory_exists
from filets.protocols import FileSystem
from filets.types import StrPath

logger = logging.getLogger(__name__)

# rwxr-xr-x
DEFAULT_DIRECTORY_MODE = 0o755


def make_directories(fs: FileSystem, path: StrPath) -> None:
    """Create a directory and its missing ancestors unless something exists there.

    Raises the underlying OSError unchanged so each public operation can
    wrap it in its own error type.
    """
    if not fs.exists(path):
        logger.debug("Creating directory %s", path)
        fs.mkdir(path, mode=DEFAULT_DIRECTORY_MODE, parents=True, exist_ok=True)


def ensure_directory_exists(path: StrPath, *, fs: FileSystem | None = None) -> None:
    """Ensure a directory exists, creating it if necessary.

    Idempotent: an existing directory is not an error.

    Args:
        path: Directory to create.
        fs: Filesystem to use (defaults to the real one).

    Raises:
        DirectoryCreateError: If the directory cannot be created.
    """
    try:
        make_directories(resolve_filesystem(fs), path)
    except (OSError, ValueError) as e:
        raise DirectoryCreateError(e) from e


def create_directory(path: StrPath, *, fs: FileSystem | None = None) -> None:
    """Create a directory that must not exist yet.

    Args:
        path: Directory to create.
        fs: Filesystem to use (defaults to the real one).

    Raises:
        DirectoryCreateError: If the directory already exists or cannot
            be created.
    """
    fs = resolve_filesystem(fs)
    if directory_exists(path, fs=fs):
        raise DirectoryCreateError("Directory already exists")
    try:
        logger.debug("Creating directory %s", path)
        fs.mkdir(path, mode=DEFAULT_DIRECTORY_MODE, parents=True, exist_ok=False)
    except (OSError, ValueError) as e:
        raise DirectoryCreateError(e) from e


def remove_directory(path: StrPath, *, fs: FileSystem | None = None) -> None:
    """Remove a directory and its contents.

    No-op when the directory does not exist. A symbolic link to a
    directory is removed without touching its target.

    Raises:
        DirectoryRemoveError: If the tree cannot be deleted.
    """
    fs = resolve_filesystem(fs)
    if not directory_exists(path, fs=fs):
        return
    try:
        logger.debug("Removing directory tree %s", path)
        fs.rmtree(path)
    except (OSError, ValueError) as e:
        raise DirectoryRemoveError(e) from e


def _copy_tree(fs: FileSystem, source: str, dest: str) -> None:
    # Depth-first, pre-order. Symlinked directories are followed and
    # nothing guards against cycles.
    make_directories(fs, dest)
    for name in fs.listdir(source):
        src_entry = os.path.join(source, name)
        dest_entry = os.path.join(dest, name)
        if stat.S_ISDIR(fs.stat(src_entry).st_mode):
            _copy_tree(fs, src_entry, dest_entry)
        else:
            fs.copy_file(src_entry, dest_entry)


def copy_directory(source: StrPath, dest: StrPath, *, fs: FileSystem | None = None) -> None:
    """Copy a directory tree.

    Creates ``dest`` if needed and copies every entry of ``source`` into
    it. A failure part way through leaves whatever was already copied.

    Args:
        source: Directory to copy.
        dest: Destination directory.
        fs: Filesystem to use (defaults to the real one).

    Raises:
        DirectoryCopyError: If source is missing or any step fails.
    """
    fs = resolve_filesystem(fs)
    if not directory_exists(source, fs=fs):
        raise DirectoryCopyError("Source directory does not exist")
    logger.debug("Copying directory %s to %s", source, dest)
    try:
        _copy_tree(fs, os.fspath(source), os.fspath(dest))
    except (OSError, ValueError, RecursionError) as e:
        raise DirectoryCopyError(e) from e


def move_directory(source: StrPath, dest: StrPath, *, fs: FileSystem | None = None) -> None:
    """Move a directory tree with a single rename.

    The parent of ``dest`` is created first. Moving across volumes is
    not supported and fails with the OS error.

    Raises:
        DirectoryMoveError: If source is missing or the rename fails.
    """
    fs = resolve_filesystem(fs)
    if not directory_exists(source, fs=fs):
        raise DirectoryMoveError("Source directory does not exist")
    try:
        make_directories(fs, get_directory_name(dest))
        logger.debug("Moving directory %s to %s", source, dest)
        fs.rename(source, dest)
    except (OSError, ValueError) as e:
        raise DirectoryMoveError(e) from e


def get_directory_contents(dir_path: StrPath, *, fs: FileSystem | None = None) -> list[str]:
    """List entry names of one directory level.

    Args:
        dir_path: Directory to list.
        fs: Filesystem to use (defaults to the real one).

    Returns:
        Entry names in OS order, or an empty list if the directory does
        not exist.

    Raises:
        DirectoryReadError: If an existing directory cannot be listed.
    """
    fs = resolve_filesystem(fs)
    if not directory_exists(dir_path, fs=fs):
        return []
    try:
        return fs.listdir(dir_path)
    except OSError as e:
        raise DirectoryReadError(e) from e
