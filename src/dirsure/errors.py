"""Error types raised by directory reconciliation."""

from __future__ import annotations


class DirsureError(Exception):
    pass


class InvalidModeError(DirsureError, ValueError):
    def __init__(self, spec: object) -> None:
        super().__init__(f"Invalid permission mode {spec!r}; expected octal digits such as '755' or an int like 0o755.")
        self.spec = spec


class FilesystemError(DirsureError, OSError):
    """Wraps an OSError raised by a filesystem primitive."""

    @classmethod
    def wrap(cls, error: OSError) -> "FilesystemError":
        if error.errno is None:
            return cls(*error.args)
        return cls(error.errno, error.strerror, error.filename)


class LayoutError(DirsureError):
    pass
