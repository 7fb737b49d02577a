"""Filesystem entry kind enum."""

import os
import stat
from enum import Enum
from pathlib import Path


class EntryKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> "EntryKind":
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER

    @classmethod
    def classify(cls, path: Path, follow_symlinks: bool = False) -> "EntryKind":
        """Classify a path by its metadata.

        Raises:
            OSError: If the metadata query fails
        """
        return cls.from_mode(os.stat(path, follow_symlinks=follow_symlinks).st_mode)
