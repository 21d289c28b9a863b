"""Callable protocols and option structures for copy/move operations."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Collection, Protocol, Sequence

from ._io import copy


class CopyFunction(Protocol):
    """Copies one entry and returns the final destination path.

    Called as ``func(src, dst, follow_symlinks)``.  :func:`~fileshift.copy`
    is the default; any callable with the same signature (for example one
    that hashes or counts bytes) can be used instead.  Implementations
    must not assume *src* or *dst* were validated by the caller.
    """

    def __call__(self, src: str, dst: str, follow_symlinks: bool) -> str: ...


class IgnoreFunction(Protocol):
    """Returns the entry names of *dir_path* that a tree copy should skip.

    Called once for every directory visited, with the directory path and
    the entries of that directory as returned by :func:`os.scandir`.
    Names are basenames and are matched exactly.
    """

    def __call__(self, dir_path: str, entries: Sequence[os.DirEntry]) -> Collection[str]: ...


@dataclass
class CopyTreeOptions:
    """Options for :func:`~fileshift.copy_tree`.

    Attributes:
        symlinks: Recreate symlinks in the destination instead of copying
            the content they point to.
        ignore_dangling_symlinks: When *symlinks* is False, silently skip
            links whose target does not exist instead of failing.
        copy_function: Used to copy every non-directory entry.
        ignore: Optional predicate choosing entries to skip per directory.
    """
    symlinks: bool = False
    ignore_dangling_symlinks: bool = False
    copy_function: CopyFunction = field(default=copy)
    ignore: IgnoreFunction | None = None


@dataclass
class MoveOptions:
    """Options for :func:`~fileshift.move`.

    Attributes:
        copy_function: Used when a rename fails and the source has to be
            copied and then removed.
    """
    copy_function: CopyFunction = field(default=copy)
