"""File and path convenience helpers over the host filesystem."""

__version__ = "0.1.0"

from filets.directories import (
    copy_directory,
    create_directory,
    ensure_directory_exists,
    get_directory_contents,
    move_directory,
    remove_directory,
)
from filets.errors import (
    DirectoryCopyError,
    DirectoryCreateError,
    DirectoryEmptyCheckError,
    DirectoryMoveError,
    DirectoryNotFoundError,
    DirectoryReadError,
    DirectoryRemoveError,
    FileAppendError,
    FileCopyError,
    FileMoveError,
    FileReadError,
    FileRemoveError,
    FileRenameError,
    FileSizeError,
    FileStatError,
    FileWriteError,
    FiletsError,
    FindDirectoriesError,
    FindFilesError,
    JsonReadError,
    JsonWriteError,
)
from filets.files import (
    append_text_file,
    copy_file,
    move_file,
    read_json_file,
    read_text_file,
    remove_file,
    rename_file,
    write_json_file,
    write_text_file,
)
from filets.filesystem import RealFileSystem
from filets.paths import (
    change_file_extension,
    get_absolute_path,
    get_directory_name,
    get_file_extension,
    get_file_name,
    get_file_name_without_extension,
    get_relative_path,
    join_paths,
    normalize_path,
)
from filets.predicates import (
    directory_exists,
    file_exists,
    get_file_size,
    get_file_stats,
    is_directory,
    is_empty_directory,
    is_file,
    is_writable,
)
from filets.protocols import FileSystem
from filets.search import find_directories, find_files
from filets.types import FileStats
from filets.validation import sanitize_filename

__all__ = [
    "__version__",
    # Protocol and types
    "FileStats",
    "FileSystem",
    "RealFileSystem",
    # Predicates
    "directory_exists",
    "file_exists",
    "get_file_size",
    "get_file_stats",
    "is_directory",
    "is_empty_directory",
    "is_file",
    "is_writable",
    # Directories
    "copy_directory",
    "create_directory",
    "ensure_directory_exists",
    "get_directory_contents",
    "move_directory",
    "remove_directory",
    # Files
    "append_text_file",
    "copy_file",
    "move_file",
    "read_json_file",
    "read_text_file",
    "remove_file",
    "rename_file",
    "write_json_file",
    "write_text_file",
    # Paths
    "change_file_extension",
    "get_absolute_path",
    "get_directory_name",
    "get_file_extension",
    "get_file_name",
    "get_file_name_without_extension",
    "get_relative_path",
    "join_paths",
    "normalize_path",
    # Search
    "find_directories",
    "find_files",
    # Validation
    "sanitize_filename",
    # Errors
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
