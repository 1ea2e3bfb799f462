"""Shared data types for filets."""

from __future__ import annotations

import os
import stat
from datetime import datetime, timezone
from typing import Union

from pydantic import BaseModel, ConfigDict

__all__ = ["FileStats", "StrPath"]

StrPath = Union[str, os.PathLike[str]]


class FileStats(BaseModel):
    """Point-in-time snapshot of filesystem metadata for one path.

    Attributes:
        size: Size in bytes as reported by stat.
        modified: Last content modification time (UTC).
        changed: Last metadata change time (UTC).
        is_file: True if the path is a regular file.
        is_directory: True if the path is a directory.
    """

    model_config = ConfigDict(frozen=True)

    size: int
    modified: datetime
    changed: datetime
    is_file: bool
    is_directory: bool

    @classmethod
    def from_stat_result(cls, st: os.stat_result) -> FileStats:
        """Build a snapshot from an ``os.stat_result``.

        Args:
            st: Result of a stat call.

        Returns:
            Immutable FileStats.
        """
        return cls(
            size=st.st_size,
            modified=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
            changed=datetime.fromtimestamp(st.st_ctime, tz=timezone.utc),
            is_file=stat.S_ISREG(st.st_mode),
            is_directory=stat.S_ISDIR(st.st_mode),
        )
