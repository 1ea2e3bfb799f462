"""Text and JSON file lifecycle operations.

Writers create missing parent directories first. Each public function
wraps the underlying failure exactly once, chaining the original error.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel

from filets.context import resolve_filesystem
from filets.directories import make_directories
from filets.errors import (
    FileAppendError,
    FileCopyError,
    FileMoveError,
    FileReadError,
    FileRemoveError,
    FileRenameError,
    FileWriteError,
    JsonReadError,
    JsonWriteError,
)
from filets.paths import get_directory_name
from filets.predicates import file_exists
from filets.protocols import FileSystem
from filets.types import StrPath

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"
JSON_INDENT = 2


def _write_text(fs: FileSystem, path: StrPath, content: str) -> None:
    make_directories(fs, get_directory_name(path))
    logger.debug("Writing %d characters to %s", len(content), path)
    fs.write_text(path, content, encoding=TEXT_ENCODING)


def write_text_file(path: StrPath, content: str, *, fs: FileSystem | None = None) -> None:
    """Write text to a file, replacing any previous content.

    Args:
        path: File to write.
        content: Text to write (encoded as UTF-8).
        fs: Filesystem to use (defaults to the real one).

    Raises:
        FileWriteError: If the parent directory or file cannot be written.
    """
    try:
        _write_text(resolve_filesystem(fs), path, content)
    except (OSError, ValueError) as e:
        raise FileWriteError(e) from e


def read_text_file(path: StrPath, *, fs: FileSystem | None = None) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileReadError: If the file is missing, unreadable or not UTF-8.
    """
    try:
        return resolve_filesystem(fs).read_text(path, encoding=TEXT_ENCODING)
    except (OSError, ValueError) as e:
        raise FileReadError(e) from e


def append_text_file(path: StrPath, content: str, *, fs: FileSystem | None = None) -> None:
    """Append text to a file, creating it (and its parents) if absent.

    Raises:
        FileAppendError: If the parent directory or file cannot be written.
    """
    fs = resolve_filesystem(fs)
    try:
        make_directories(fs, get_directory_name(path))
        logger.debug("Appending %d characters to %s", len(content), path)
        fs.append_text(path, content, encoding=TEXT_ENCODING)
    except (OSError, ValueError) as e:
        raise FileAppendError(e) from e


def write_json_file(path: StrPath, data: Any, *, fs: FileSystem | None = None) -> None:
    """Write data as pretty-printed JSON.

    Pydantic models are dumped in JSON mode using their field aliases.

    Args:
        path: File to write.
        data: JSON-serializable value or pydantic model.
        fs: Filesystem to use (defaults to the real one).

    Raises:
        JsonWriteError: If data is not serializable (NaN and infinity
            included) or the write fails.
    """
    try:
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json", by_alias=True)
        text = json.dumps(data, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False)
        _write_text(resolve_filesystem(fs), path, text)
    except (OSError, TypeError, ValueError) as e:
        raise JsonWriteError(e) from e


def read_json_file(path: StrPath, *, fs: FileSystem | None = None) -> Any:
    """Read and parse a JSON file.

    Raises:
        JsonReadError: If the file cannot be read or is not valid JSON.
    """
    try:
        text = resolve_filesystem(fs).read_text(path, encoding=TEXT_ENCODING)
        return json.loads(text)
    except (OSError, ValueError) as e:
        raise JsonReadError(e) from e


def remove_file(path: StrPath, *, fs: FileSystem | None = None) -> None:
    """Remove a file. No-op when nothing exists at the path.

    Raises:
        FileRemoveError: If the file exists but cannot be deleted.
    """
    fs = resolve_filesystem(fs)
    if not file_exists(path, fs=fs):
        return
    try:
        logger.debug("Removing file %s", path)
        fs.unlink(path)
    except (OSError, ValueError) as e:
        raise FileRemoveError(e) from e


def copy_file(source: StrPath, dest: StrPath, *, fs: FileSystem | None = None) -> None:
    """Copy a file, overwriting the destination.

    Args:
        source: File to copy.
        dest: Destination file; its parent directory is created if needed.
        fs: Filesystem to use (defaults to the real one).

    Raises:
        FileCopyError: If the copy fails.
    """
    fs = resolve_filesystem(fs)
    try:
        make_directories(fs, get_directory_name(dest))
        logger.debug("Copying file %s to %s", source, dest)
        fs.copy_file(source, dest)
    except (OSError, ValueError) as e:
        raise FileCopyError(e) from e


def rename_file(old_path: StrPath, new_path: StrPath, *, fs: FileSystem | None = None) -> None:
    """Rename a file in place. Does not create directories.

    Raises:
        FileRenameError: If the rename fails.
    """
    try:
        logger.debug("Renaming %s to %s", old_path, new_path)
        resolve_filesystem(fs).rename(old_path, new_path)
    except (OSError, ValueError) as e:
        raise FileRenameError(e) from e


def move_file(source: StrPath, dest: StrPath, *, fs: FileSystem | None = None) -> None:
    """Move a file, creating the destination's parent directory first.

    Raises:
        FileMoveError: If the parent cannot be created or the rename fails.
    """
    fs = resolve_filesystem(fs)
    try:
        make_directories(fs, get_directory_name(dest))
        logger.debug("Moving file %s to %s", source, dest)
        fs.rename(source, dest)
    except (OSError, ValueError) as e:
        raise FileMoveError(e) from e
