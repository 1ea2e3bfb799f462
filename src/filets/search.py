"""Recursive file and directory search by substring pattern."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator

from filets.context import resolve_filesystem
from filets.errors import FindDirectoriesError, FindFilesError
from filets.protocols import FileSystem
from filets.types import StrPath

logger = logging.getLogger(__name__)


def _matches(name: str, pattern: str | None) -> bool:
    return pattern is None or pattern in name


def _walk(fs: FileSystem, dir_path: str) -> Iterator[tuple[str, str, int]]:
    """Yield (full_path, name, st_mode) for every entry, depth-first pre-order.

    Symbolic links are followed; a link cycle recurses until the OS or
    the interpreter gives up.
    """
    for name in fs.listdir(dir_path):
        full_path = os.path.join(dir_path, name)
        mode = fs.stat(full_path).st_mode
        yield full_path, name, mode
        if stat.S_ISDIR(mode):
            yield from _walk(fs, full_path)


def find_files(
    dir_path: StrPath,
    pattern: str | None = None,
    *,
    fs: FileSystem | None = None,
) -> list[str]:
    """Find files below a directory whose name contains a pattern.

    Directories are always descended into and never matched themselves.

    Args:
        dir_path: Directory to search.
        pattern: Substring the file name must contain. None matches all.
        fs: Filesystem to use (defaults to the real one).

    Returns:
        Full paths of matching files in walk order.

    Raises:
        FindFilesError: If any directory in the walk cannot be read.
    """
    fs = resolve_filesystem(fs)
    try:
        found = [
            full_path
            for full_path, name, mode in _walk(fs, os.fspath(dir_path))
            if stat.S_ISREG(mode) and _matches(name, pattern)
        ]
    except (OSError, RecursionError) as e:
        raise FindFilesError(e) from e
    logger.debug("Found %d files in %s matching %r", len(found), dir_path, pattern)
    return found


def find_directories(
    dir_path: StrPath,
    pattern: str | None = None,
    *,
    fs: FileSystem | None = None,
) -> list[str]:
    """Find directories below a directory whose name contains a pattern.

    Every directory is descended into whether or not it matches.

    Args:
        dir_path: Directory to search.
        pattern: Substring the directory name must contain. None matches all.
        fs: Filesystem to use (defaults to the real one).

    Returns:
        Full paths of matching directories in walk order.

    Raises:
        FindDirectoriesError: If any directory in the walk cannot be read.
    """
    fs = resolve_filesystem(fs)
    try:
        found = [
            full_path
            for full_path, name, mode in _walk(fs, os.fspath(dir_path))
            if stat.S_ISDIR(mode) and _matches(name, pattern)
        ]
    except (OSError, RecursionError) as e:
        raise FindDirectoriesError(e) from e
    logger.debug("Found %d directories in %s matching %r", len(found), dir_path, pattern)
    return found
