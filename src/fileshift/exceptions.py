"""Exceptions for fileshift.

Every error raised by the library itself is a :class:`ShutilError`, which
is an :class:`OSError`, so callers can catch library and OS failures with
one ``except OSError``.  Each error carries a :class:`ErrorKind` in its
``kind`` attribute for callers that prefer to branch on a value.
"""

from __future__ import annotations

import builtins
from enum import Enum


class ErrorKind(str, Enum):
    """Kind of failure reported by a fileshift operation.

    ``IO`` covers any underlying :class:`OSError` raised by the OS layer.
    """
    SAME_FILE = "same_file"
    SPECIAL_FILE = "special_file"
    NOT_A_DIRECTORY = "not_a_directory"
    ALREADY_EXISTS = "already_exists"
    MOVE_ONTO_SELF = "move_onto_self"
    SIZE_MISMATCH = "size_mismatch"
    IO = "io"

    def __str__(self) -> str:          # noqa: D105
        return self.value


class ShutilError(OSError):
    """Base class for errors raised by fileshift."""

    kind: ErrorKind = ErrorKind.IO


class SameFileError(ShutilError):
    """Raised when source and destination resolve to the same file."""

    kind = ErrorKind.SAME_FILE

    def __init__(self, src: str, dst: str) -> None:
        super().__init__(f"{src!r} and {dst!r} are the same file")
        self.src = src
        self.dst = dst


class SpecialFileError(ShutilError):
    """Raised when a copy source or destination is a named pipe."""

    kind = ErrorKind.SPECIAL_FILE

    def __init__(self, path: str) -> None:
        super().__init__(f"{path!r} is a named pipe")
        self.path = path


class NotADirectoryError(ShutilError, builtins.NotADirectoryError):
    """Raised when a tree copy source is not a directory."""

    kind = ErrorKind.NOT_A_DIRECTORY

    def __init__(self, src: str) -> None:
        super().__init__(f"{src!r} is not a directory")
        self.src = src


class AlreadyExistsError(ShutilError, FileExistsError):
    """Raised when a tree copy or move destination is already occupied."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, dst: str) -> None:
        super().__init__(f"{dst!r} already exists")
        self.dst = dst


class MoveOntoSelfError(ShutilError):
    """Raised when moving a directory into its own subtree."""

    kind = ErrorKind.MOVE_ONTO_SELF

    def __init__(self, src: str, dst: str) -> None:
        super().__init__(f"Cannot move a directory {src!r} into itself {dst!r}")
        self.src = src
        self.dst = dst


class SizeMismatchError(ShutilError):
    """Raised when the bytes written differ from the source's size.

    Usually means the source was truncated or grew during the copy.
    """

    kind = ErrorKind.SIZE_MISMATCH

    def __init__(self, path: str, copied: int, expected: int) -> None:
        super().__init__(f"{path!r}: {copied}/{expected} bytes copied")
        self.path = path
        self.copied = copied
        self.expected = expected


def error_kind(exc: BaseException) -> ErrorKind | None:
    """Return the :class:`ErrorKind` for *exc*, or ``None`` if not an OSError."""
    if isinstance(exc, ShutilError):
        return exc.kind
    if isinstance(exc, OSError):
        return ErrorKind.IO
    return None
