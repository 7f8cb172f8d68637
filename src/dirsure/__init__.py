"""Public package exports."""

from dirsure.context import CwdContext
from dirsure.errors import DirsureError
from dirsure.errors import FilesystemError
from dirsure.errors import InvalidModeError
from dirsure.errors import LayoutError
from dirsure.layout import apply_layout
from dirsure.layout import apply_layout_async
from dirsure.layout import load_layout
from dirsure.models import DirOptions

# Root context; follows the process working directory.
_root = CwdContext()

cwd = _root.cwd
path = _root.path
dir = _root.dir
dir_async = _root.dir_async

__all__ = [
    "CwdContext",
    "DirOptions",
    "DirsureError",
    "FilesystemError",
    "InvalidModeError",
    "LayoutError",
    "apply_layout",
    "apply_layout_async",
    "cwd",
    "dir",
    "dir_async",
    "load_layout",
    "path",
]
