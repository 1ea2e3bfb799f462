"""Existence and type queries.

The boolean predicates never raise: any failure to query the path,
permission problems included, is reported as False. Callers that need to
tell "absent" apart from "inaccessible" should use get_file_stats.
"""

from __future__ import annotations

import logging
import os
import stat

from filets.context import resolve_filesystem
from filets.errors import (
    DirectoryEmptyCheckError,
    DirectoryNotFoundError,
    FileSizeError,
    FileStatError,
)
from filets.protocols import FileSystem
from filets.types import FileStats, StrPath

logger = logging.getLogger(__name__)

# Marker file created and deleted by is_writable
WRITE_PROBE_NAME = ".write-test"


def file_exists(path: StrPath, *, fs: FileSystem | None = None) -> bool:
    """Check if anything (file or directory) exists at a path."""
    try:
        return resolve_filesystem(fs).exists(path)
    except (OSError, ValueError) as e:
        logger.debug("Existence check failed for %s: %s", path, e)
        return False


def _stat_mode(fs: FileSystem, path: StrPath) -> int | None:
    try:
        return fs.stat(path).st_mode
    except (OSError, ValueError) as e:
        logger.debug("Stat failed for %s: %s", path, e)
        return None


def directory_exists(path: StrPath, *, fs: FileSystem | None = None) -> bool:
    """Check if a path exists and is a directory."""
    fs = resolve_filesystem(fs)
    if not file_exists(path, fs=fs):
        return False
    mode = _stat_mode(fs, path)
    return mode is not None and stat.S_ISDIR(mode)


def is_file(path: StrPath, *, fs: FileSystem | None = None) -> bool:
    """Check if a path is a regular file."""
    mode = _stat_mode(resolve_filesystem(fs), path)
    return mode is not None and stat.S_ISREG(mode)


def is_directory(path: StrPath, *, fs: FileSystem | None = None) -> bool:
    """Check if a path is a directory."""
    mode = _stat_mode(resolve_filesystem(fs), path)
    return mode is not None and stat.S_ISDIR(mode)


def is_empty_directory(path: StrPath, *, fs: FileSystem | None = None) -> bool:
    """Check whether a directory has no entries.

    Args:
        path: Directory to inspect.
        fs: Filesystem to use (defaults to the real one).

    Returns:
        True if the directory listing is empty.

    Raises:
        DirectoryNotFoundError: If path is not an existing directory.
        DirectoryEmptyCheckError: If the directory cannot be listed.
    """
    fs = resolve_filesystem(fs)
    if not directory_exists(path, fs=fs):
        raise DirectoryNotFoundError(path)
    try:
        return len(fs.listdir(path)) == 0
    except OSError as e:
        raise DirectoryEmptyCheckError(e) from e


def get_file_stats(path: StrPath, *, fs: FileSystem | None = None) -> FileStats:
    """Get a metadata snapshot for a path.

    Args:
        path: Path to query.
        fs: Filesystem to use (defaults to the real one).

    Returns:
        FileStats valid at the instant of the call.

    Raises:
        FileStatError: If the path cannot be stat'ed.
    """
    try:
        st = resolve_filesystem(fs).stat(path)
    except (OSError, ValueError) as e:
        raise FileStatError(e) from e
    return FileStats.from_stat_result(st)


def get_file_size(path: StrPath, *, fs: FileSystem | None = None) -> int:
    """Get size in bytes of a path.

    Raises:
        FileSizeError: If the path cannot be stat'ed.
    """
    try:
        return resolve_filesystem(fs).stat(path).st_size
    except (OSError, ValueError) as e:
        raise FileSizeError(e) from e


def is_writable(dir_path: StrPath, *, fs: FileSystem | None = None) -> bool:
    """Probe whether files can be created inside a directory.

    Writes a marker file and removes it right away. A True result is a
    heuristic: a later write can still fail.

    Args:
        dir_path: Directory to probe.
        fs: Filesystem to use (defaults to the real one).

    Returns:
        True if the probe file was written and removed, False otherwise.
    """
    fs = resolve_filesystem(fs)
    probe = os.path.join(dir_path, WRITE_PROBE_NAME)
    try:
        fs.write_text(probe, "test")
        fs.unlink(probe)
    except (OSError, ValueError) as e:
        logger.debug("Write probe failed in %s: %s", dir_path, e)
        return False
    return True
