"""stat/lstat based path classification shared by copy and move."""

from __future__ import annotations

import os
import stat


def same_file(a: str | os.PathLike[str], b: str | os.PathLike[str]) -> bool:
    """Return True if *a* and *b* stat (following symlinks) to the same file.

    A failed stat on either side means "not the same file", never an error.
    """
    try:
        st_a = os.stat(a)
        st_b = os.stat(b)
    except (OSError, ValueError):
        return False
    return os.path.samestat(st_a, st_b)


def is_special_file(st: os.stat_result) -> bool:
    """Return True if *st* describes a named pipe.

    Sockets and device files are not treated as special.
    """
    return stat.S_ISFIFO(st.st_mode)


def is_symlink(st: os.stat_result) -> bool:
    """Return True if *st* (an ``lstat`` result) is a symbolic link."""
    return stat.S_ISLNK(st.st_mode)


def is_directory(path: str | os.PathLike[str]) -> bool:
    """Return True if *path* is a directory, following symlinks.

    Missing paths and stat failures count as "not a directory".
    """
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISDIR(st.st_mode)


def dest_in_src(src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> bool:
    """Return True if *dst* is *src* or lies inside it.

    Both paths are made absolute and given a trailing separator before
    the prefix test, so ``/a/bc`` is not inside ``/a/b``.
    """
    src = os.path.abspath(src)
    dst = os.path.abspath(dst)
    if not src.endswith(os.sep):
        src += os.sep
    if not dst.endswith(os.sep):
        dst += os.sep
    return dst.startswith(src)


def basename(path: str | os.PathLike[str]) -> str:
    """Return the last component of *path*, ignoring trailing separators."""
    path = os.fspath(path)
    sep = os.path.sep + (os.path.altsep or "")
    return os.path.basename(path.rstrip(sep))
