"""Model types for directory options and layouts."""

from dirsure.models.dir_options import DirOptions
from dirsure.models.layout_spec import LayoutEntry
from dirsure.models.layout_spec import LayoutSpec

__all__ = [
    "DirOptions",
    "LayoutEntry",
    "LayoutSpec",
]
