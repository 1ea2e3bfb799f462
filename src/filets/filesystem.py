"""Filesystem implementation backed by the standard library.

RealFileSystem wraps ``os``, ``shutil`` and ``pathlib`` so the
operations in filets never call them directly. Tests substitute a
double satisfying the FileSystem protocol instead.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from filets.types import StrPath


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path, os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: StrPath) -> bool:
        """Check if a path exists."""
        return os.path.exists(path)

    def stat(self, path: StrPath) -> os.stat_result:
        """Stat a path, following symbolic links."""
        return os.stat(path)

    def listdir(self, path: StrPath) -> list[str]:
        """List one directory level."""
        return os.listdir(path)

    def mkdir(
        self,
        path: StrPath,
        mode: int = 0o777,
        parents: bool = False,
        exist_ok: bool = False,
    ) -> None:
        """Create a directory."""
        Path(path).mkdir(mode=mode, parents=parents, exist_ok=exist_ok)

    def unlink(self, path: StrPath) -> None:
        """Remove a file."""
        os.unlink(path)

    def rmtree(self, path: StrPath) -> None:
        """Remove a directory tree, or just the link if path is a symlink."""
        if os.path.islink(path):
            os.unlink(path)
            return
        shutil.rmtree(path)

    def copy_file(self, src: StrPath, dst: StrPath) -> None:
        """Copy file content and permission bits."""
        shutil.copy(src, dst)

    def rename(self, src: StrPath, dst: StrPath) -> None:
        """Rename a path, replacing an existing destination file."""
        os.replace(src, dst)

    def read_text(self, path: StrPath, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        with open(path, encoding=encoding, newline="") as f:
            return f.read()

    def write_text(self, path: StrPath, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        # newline="" keeps content byte-exact on every platform
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)

    def append_text(self, path: StrPath, content: str, encoding: str = "utf-8") -> None:
        """Append text content to a file."""
        with open(path, "a", encoding=encoding, newline="") as f:
            f.write(content)
