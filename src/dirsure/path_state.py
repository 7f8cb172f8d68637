"""Snapshot of what currently sits at a path."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum

from dirsure.mode import permission_bits


class PathKind(str, Enum):
    ABSENT = "absent"
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class PathState:
    kind: PathKind
    mode: int | None = None  # permission bits, None when absent

    @classmethod
    def absent(cls) -> "PathState":
        return cls(PathKind.ABSENT)

    @classmethod
    def from_stat_result(cls, result: os.stat_result) -> "PathState":
        # Anything that is not a directory (symlinks, sockets, fifos) is removed like a file.
        kind = PathKind.DIRECTORY if stat.S_ISDIR(result.st_mode) else PathKind.FILE
        return cls(kind, permission_bits(result.st_mode))

    @property
    def is_absent(self) -> bool:
        return self.kind is PathKind.ABSENT

    @property
    def is_file(self) -> bool:
        return self.kind is PathKind.FILE

    @property
    def is_directory(self) -> bool:
        return self.kind is PathKind.DIRECTORY
