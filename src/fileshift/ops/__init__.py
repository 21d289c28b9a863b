"""Copy and move files, symlinks, and directory trees.

``copy_file`` and ``copy_mode`` handle a single entry; ``copy`` combines
them with ``cp``-style destination handling.  ``copy_tree`` replicates a
directory into a new location and ``move`` renames with a copy-and-remove
fallback.
"""

from ._io import copy, copy_file, copy_mode
from ._move import move
from ._tree import copy_tree
from ._types import CopyFunction, CopyTreeOptions, IgnoreFunction, MoveOptions

__all__ = [
    # Public types
    "CopyFunction", "CopyTreeOptions", "IgnoreFunction", "MoveOptions",
    # Public functions
    "copy", "copy_file", "copy_mode", "copy_tree", "move",
]
