"""Move a file, symlink, or directory (``mv src dst``)."""

from __future__ import annotations

import os
import shutil

from .._classify import basename, dest_in_src, is_directory, is_symlink, same_file
from ..exceptions import AlreadyExistsError, MoveOntoSelfError
from ._tree import copy_tree
from ._types import CopyTreeOptions, MoveOptions


def move(src: str | os.PathLike[str], dst: str | os.PathLike[str],
         options: MoveOptions | None = None) -> str:
    """Recursively move a file or directory. Returns the final destination.

    If *dst* is a directory (or a symlink to one), *src* is moved inside
    it as ``dst/basename(src)``, which must not already exist.  Otherwise
    *dst* is the target itself and may be replaced according to
    :func:`os.rename` semantics.

    A rename is tried first.  When it fails (typically across
    filesystems):

    - a symlink is recreated at the destination and the original removed;
    - a directory is copied with :func:`copy_tree` (symlinks preserved)
      and the source tree removed, unless the destination lies inside the
      source, which raises :class:`MoveOntoSelfError`;
    - anything else is copied with ``options.copy_function`` and removed.

    Nothing is rolled back if a fallback step fails.
    """
    if options is None:
        options = MoveOptions()
    src = os.fspath(src)
    dst = os.fspath(dst)
    real_dst = dst

    if is_directory(dst):
        if same_file(src, dst):
            # Case-only rename on a case-insensitive filesystem
            os.rename(src, dst)
            return dst
        real_dst = os.path.join(dst, basename(src))
        if os.path.lexists(real_dst):
            raise AlreadyExistsError(real_dst)

    try:
        os.rename(src, real_dst)
    except OSError:
        pass
    else:
        return real_dst

    src_st = os.lstat(src)
    if is_symlink(src_st):
        os.symlink(os.readlink(src), real_dst)
        os.unlink(src)
    elif is_directory(src):
        if dest_in_src(src, dst):
            raise MoveOntoSelfError(src, dst)
        copy_tree(src, real_dst, CopyTreeOptions(
            symlinks=True,
            ignore_dangling_symlinks=False,
            copy_function=options.copy_function,
        ))
        shutil.rmtree(src)
    else:
        options.copy_function(src, real_dst, True)
        os.unlink(src)
    return real_dst
