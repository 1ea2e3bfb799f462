"""Error taxonomy for filesystem operations.

Every failing operation raises a subclass of FiletsError whose message
starts with a fixed prefix naming the failed operation, followed by the
underlying cause. The original OS error is chained as ``__cause__``.
"""

from __future__ import annotations

__all__ = [
    "DirectoryCopyError",
    "DirectoryCreateError",
    "DirectoryEmptyCheckError",
    "DirectoryMoveError",
    "DirectoryNotFoundError",
    "DirectoryReadError",
    "DirectoryRemoveError",
    "FileAppendError",
    "FileCopyError",
    "FileMoveError",
    "FileReadError",
    "FileRemoveError",
    "FileRenameError",
    "FileSizeError",
    "FileStatError",
    "FileWriteError",
    "FiletsError",
    "FindDirectoriesError",
    "FindFilesError",
    "JsonReadError",
    "JsonWriteError",
]


class FiletsError(Exception):
    """Base class for filesystem operation errors.

    Attributes:
        prefix: Human-readable name of the failed operation.
        detail: Message of the underlying cause.
    """

    prefix = "Filesystem operation failed"

    def __init__(self, detail: object) -> None:
        """Initialize the error.

        Args:
            detail: The underlying cause, usually the caught exception.
        """
        self.detail = str(detail) or type(detail).__name__
        super().__init__(f"{self.prefix}: {self.detail}")


class DirectoryCreateError(FiletsError):
    prefix = "Failed to create directory"


class DirectoryRemoveError(FiletsError):
    prefix = "Failed to remove directory"


class DirectoryCopyError(FiletsError):
    prefix = "Failed to copy directory"


class DirectoryMoveError(FiletsError):
    prefix = "Failed to move directory"


class DirectoryReadError(FiletsError):
    prefix = "Failed to read directory"


class DirectoryEmptyCheckError(FiletsError):
    prefix = "Failed to check directory"


class DirectoryNotFoundError(DirectoryEmptyCheckError):
    """Raised when an operation requires an existing directory."""

    prefix = "Directory does not exist"


class FileWriteError(FiletsError):
    prefix = "Failed to write text file"


class FileReadError(FiletsError):
    prefix = "Failed to read text file"


class FileAppendError(FiletsError):
    prefix = "Failed to append to text file"


class FileRemoveError(FiletsError):
    prefix = "Failed to remove file"


class FileCopyError(FiletsError):
    prefix = "Failed to copy file"


class FileRenameError(FiletsError):
    prefix = "Failed to rename file"


class FileMoveError(FiletsError):
    prefix = "Failed to move file"


class FileStatError(FiletsError):
    prefix = "Failed to get file stats"


class FileSizeError(FileStatError):
    prefix = "Failed to get file size"


class FindFilesError(FiletsError):
    prefix = "Failed to find files"


class FindDirectoriesError(FiletsError):
    prefix = "Failed to find directories"


class JsonWriteError(FiletsError):
    prefix = "Failed to write JSON file"


class JsonReadError(FiletsError):
    prefix = "Failed to read JSON file"
