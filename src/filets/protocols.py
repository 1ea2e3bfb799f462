"""Protocol definition for the filesystem collaborator.

Every operation in filets delegates its disk access to an object that
satisfies FileSystem. Designing to this interface enables:
- Substituting test doubles for the real disk
- Plugging in alternative backends without touching the operations

Implementations satisfy the protocol structurally (duck typing) and
signal failures by raising OSError.
"""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

from filets.types import StrPath


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem primitives.

    Each method maps to a single OS call (or one stdlib helper).
    """

    def exists(self, path: StrPath) -> bool:
        """Check if an entry of any type exists at a path.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def stat(self, path: StrPath) -> os.stat_result:
        """Get metadata for a path, following symbolic links.

        Args:
            path: Path to query.

        Returns:
            The raw stat result.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        ...

    def listdir(self, path: StrPath) -> list[str]:
        """List entry names of one directory level.

        Args:
            path: Directory to list.

        Returns:
            Entry names in the order the OS returns them.
        """
        ...

    def mkdir(
        self,
        path: StrPath,
        mode: int = 0o777,
        parents: bool = False,
        exist_ok: bool = False,
    ) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            mode: Permission bits for created directories.
            parents: Create missing ancestors.
            exist_ok: Don't raise if the directory exists.
        """
        ...

    def unlink(self, path: StrPath) -> None:
        """Remove a file.

        Args:
            path: Path to remove.
        """
        ...

    def rmtree(self, path: StrPath) -> None:
        """Remove a directory tree.

        A symbolic link to a directory is unlinked; its target is left
        intact.

        Args:
            path: Path to remove.
        """
        ...

    def copy_file(self, src: StrPath, dst: StrPath) -> None:
        """Copy one file's bytes, overwriting the destination.

        Args:
            src: Source file.
            dst: Destination file.
        """
        ...

    def rename(self, src: StrPath, dst: StrPath) -> None:
        """Rename a file or directory in a single call.

        Args:
            src: Existing path.
            dst: New path.
        """
        ...

    def read_text(self, path: StrPath, encoding: str = "utf-8") -> str:
        """Read text content from a file.

        Args:
            path: Path to the file.
            encoding: Text encoding.

        Returns:
            File content as string.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def write_text(self, path: StrPath, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file, replacing it.

        Args:
            path: Path to the file.
            content: Content to write.
            encoding: Text encoding.
        """
        ...

    def append_text(self, path: StrPath, content: str, encoding: str = "utf-8") -> None:
        """Append text content to a file, creating it if absent.

        Args:
            path: Path to the file.
            content: Content to append.
            encoding: Text encoding.
        """
        ...
