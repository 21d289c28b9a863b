from ._classify import dest_in_src, is_directory, is_special_file, is_symlink, same_file
from ._ignore import IgnorePatterns, ignore_names, ignore_patterns
from .ops import (
    CopyFunction,
    CopyTreeOptions,
    IgnoreFunction,
    MoveOptions,
    copy,
    copy_file,
    copy_mode,
    copy_tree,
    move,
)
from .exceptions import (
    AlreadyExistsError,
    ErrorKind,
    MoveOntoSelfError,
    NotADirectoryError,
    SameFileError,
    ShutilError,
    SizeMismatchError,
    SpecialFileError,
    error_kind,
)
from .result import OpResult, attempt

__all__ = [
    "copy", "copy_file", "copy_mode", "copy_tree", "move",
    "CopyFunction", "CopyTreeOptions", "IgnoreFunction", "MoveOptions",
    "IgnorePatterns", "ignore_names", "ignore_patterns",
    "same_file", "is_special_file", "is_symlink", "is_directory", "dest_in_src",
    "ShutilError", "SameFileError", "SpecialFileError", "NotADirectoryError",
    "AlreadyExistsError", "MoveOntoSelfError", "SizeMismatchError",
    "ErrorKind", "error_kind",
    "OpResult", "attempt",
]
