"""Recursive directory tree copy."""

from __future__ import annotations

import errno
import os
import stat

from ..exceptions import AlreadyExistsError, NotADirectoryError
from ._types import CopyTreeOptions


def _inode(st: os.stat_result) -> tuple[int, int]:
    return st.st_dev, st.st_ino


def _open_tree_dir(src_dir: str, dst_dir: str,
                   chain: tuple[tuple[int, int], ...]) -> tuple[tuple[int, int], list[os.DirEntry]]:
    """Check preconditions, list *src_dir*, and create *dst_dir*.

    *src_dir* must be a directory and *dst_dir* must not exist (a
    dangling symlink counts as existing).  *src_dir* must not be one of
    the directories in *chain*, which would mean the copy loops back
    into a directory it is already inside of.  The new directory gets
    the permission bits of *src_dir*.  Returns the identity of *src_dir*
    and its entries.
    """
    src_st = os.stat(src_dir)
    if not stat.S_ISDIR(src_st.st_mode):
        raise NotADirectoryError(src_dir)
    if _inode(src_st) in chain:
        raise OSError(errno.ELOOP, "Copy would descend into itself", src_dir)
    if os.path.lexists(dst_dir):
        raise AlreadyExistsError(dst_dir)
    with os.scandir(src_dir) as it:
        entries = list(it)
    os.makedirs(dst_dir, stat.S_IMODE(src_st.st_mode))
    return _inode(src_st), entries


def copy_tree(src: str | os.PathLike[str], dst: str | os.PathLike[str],
              options: CopyTreeOptions | None = None) -> str:
    """Recursively copy the directory tree at *src* to *dst*. Returns *dst*.

    *dst* must not already exist; trees are never merged.  Missing parent
    directories of *dst* are created.

    With ``options.symlinks`` true, symlinks in the source tree are
    recreated with the same target string.  Otherwise the content they
    point to is copied (a link to a directory is copied as a directory),
    and a dangling link is an error unless
    ``options.ignore_dangling_symlinks`` is set, in which case it is
    skipped.  Reaching a directory that is already being copied, or the
    destination itself, raises ``OSError`` with ``errno.ELOOP``.

    ``options.ignore`` is called once per visited directory as
    ``ignore(dir_path, entries)`` and returns the names in that
    directory to leave out; ignored directories are not descended into.

    Every other entry is copied with ``options.copy_function(src, dst,
    False)``.

    The first error aborts the copy.  Whatever was created up to that
    point is left in place.
    """
    if options is None:
        options = CopyTreeOptions()
    src = os.fspath(src)
    dst = os.fspath(dst)

    # Each pending directory carries the identities of the directories
    # above it, plus the destination root.
    pending = [(src, dst, ())]
    while pending:
        src_dir, dst_dir, chain = pending.pop()
        key, entries = _open_tree_dir(src_dir, dst_dir, chain)
        if not chain:
            chain = (_inode(os.stat(dst)),)
        chain += (key,)

        ignored: set[str] = set()
        if options.ignore is not None:
            ignored = set(options.ignore(src_dir, entries))

        for entry in entries:
            if entry.name in ignored:
                continue
            src_path = os.path.join(src_dir, entry.name)
            dst_path = os.path.join(dst_dir, entry.name)

            if entry.is_symlink():
                if options.symlinks:
                    os.symlink(os.readlink(src_path), dst_path)
                    continue
                if not os.path.exists(src_path):
                    if options.ignore_dangling_symlinks:
                        continue
                    raise FileNotFoundError(
                        errno.ENOENT, "Dangling symbolic link", src_path,
                    )
                if os.path.isdir(src_path):
                    pending.append((src_path, dst_path, chain))
                else:
                    options.copy_function(os.path.realpath(src_path), dst_path, False)
            elif entry.is_dir(follow_symlinks=False):
                pending.append((src_path, dst_path, chain))
            else:
                options.copy_function(src_path, dst_path, False)

    return dst
