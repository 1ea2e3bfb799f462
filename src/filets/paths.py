"""Path algebra helpers.

Pure string transformations over ``os.path``. None of these touch the
disk and none of them raise for well-formed string input.
"""

from __future__ import annotations

import os

from filets.types import StrPath


def get_absolute_path(path: StrPath) -> str:
    """Get absolute path, resolving relative paths against the cwd."""
    return os.path.abspath(path)


def get_relative_path(path: StrPath, base_dir: StrPath) -> str:
    """Get the path of ``path`` relative to ``base_dir``.

    Args:
        path: Target path.
        base_dir: Directory the result is relative to.

    Returns:
        Relative path, "." when both are the same location.

    Example:
        >>> get_relative_path("/a/b/c", "/a")
        'b/c'
    """
    return os.path.relpath(path, base_dir)


def join_paths(*segments: StrPath) -> str:
    """Join path segments and normalize the result."""
    if not segments:
        return "."
    return os.path.normpath(os.path.join(*segments))


def normalize_path(path: StrPath) -> str:
    """Collapse redundant separators and up-level references."""
    return os.path.normpath(path)


def get_directory_name(path: StrPath) -> str:
    """Get the directory part of a path ("." when there is none)."""
    return os.path.dirname(path) or "."


def get_file_name(path: StrPath) -> str:
    """Get the last component of a path, extension included."""
    return os.path.basename(path)


def get_file_extension(path: StrPath) -> str:
    """Get the extension of a path, with its leading dot ("" if none)."""
    return os.path.splitext(os.fspath(path))[1]


def get_file_name_without_extension(path: StrPath) -> str:
    """Get the last component of a path without its extension."""
    return os.path.splitext(os.path.basename(path))[0]


def change_file_extension(path: StrPath, new_ext: str) -> str:
    """Replace the extension of a path.

    Args:
        path: Path whose extension is replaced (or added).
        new_ext: New extension, with or without the leading dot.
            An empty string removes the extension.

    Returns:
        The path with its extension substituted.

    Example:
        >>> change_file_extension("/a/b.txt", "json")
        '/a/b.json'
    """
    if new_ext and not new_ext.startswith("."):
        new_ext = f".{new_ext}"
    root, _ = os.path.splitext(os.fspath(path))
    return root + new_ext
