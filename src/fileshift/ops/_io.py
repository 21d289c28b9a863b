"""Single-entry copy helpers: file content, mode bits, and ``cp src dst``."""

from __future__ import annotations

import os
import stat

from .._classify import basename, is_special_file, is_symlink, same_file
from ..exceptions import SameFileError, SizeMismatchError, SpecialFileError


_COPY_CHUNK_SIZE = 65536


def copy_file(src: str | os.PathLike[str], dst: str | os.PathLike[str],
              follow_symlinks: bool = True) -> str:
    """Copy the data of *src* to *dst*. Returns *dst*.

    If *follow_symlinks* is false and *src* is a symbolic link, a new
    symlink pointing at the *src* path is created instead of copying the
    file it points to.

    Raises :class:`SameFileError` if both paths are the same file and
    :class:`SpecialFileError` if either is a named pipe.  *dst* is
    created or truncated; it is not cleaned up if the copy fails.
    """
    src = os.fspath(src)
    dst = os.fspath(dst)
    if same_file(src, dst):
        raise SameFileError(src, dst)

    src_st = os.lstat(src)
    if is_special_file(src_st):
        raise SpecialFileError(src)
    try:
        dst_st = os.stat(dst)
    except FileNotFoundError:
        pass
    else:
        if is_special_file(dst_st):
            raise SpecialFileError(dst)

    if is_symlink(src_st):
        if not follow_symlinks:
            os.symlink(src, dst)
            return dst
        # One level only; a relative target is relative to the link's directory
        src = os.path.join(os.path.dirname(src), os.readlink(src))
        src_st = os.stat(src)
        if is_special_file(src_st):
            raise SpecialFileError(src)

    copied = 0
    with open(src, "rb") as fsrc, open(dst, "wb") as fdst:
        while True:
            chunk = fsrc.read(_COPY_CHUNK_SIZE)
            if not chunk:
                break
            fdst.write(chunk)
            copied += len(chunk)
    if copied != src_st.st_size:
        raise SizeMismatchError(src, copied, src_st.st_size)
    return dst


def copy_mode(src: str | os.PathLike[str], dst: str | os.PathLike[str],
              follow_symlinks: bool = True) -> None:
    """Copy the permission bits of *src* onto *dst*.

    When *follow_symlinks* is false and both paths are symlinks this does
    nothing, since a link's own mode cannot be set portably.  Otherwise
    the mode of the file *src* refers to is applied to the file *dst*
    refers to.
    """
    src_st = os.lstat(src)
    dst_st = os.lstat(dst)
    if not follow_symlinks and is_symlink(src_st) and is_symlink(dst_st):
        return
    os.chmod(dst, stat.S_IMODE(os.stat(src).st_mode))


def copy(src: str | os.PathLike[str], dst: str | os.PathLike[str],
         follow_symlinks: bool = True) -> str:
    """Copy data and mode bits (``cp src dst``). Returns the final destination.

    *dst* may be a directory, in which case the file is copied to
    ``dst/basename(src)``.  With *follow_symlinks* false, symlinks are
    not followed (like ``cp -P``).
    """
    src = os.fspath(src)
    dst = os.fspath(dst)
    try:
        dst_st = os.stat(dst)
    except FileNotFoundError:
        pass
    else:
        if stat.S_ISDIR(dst_st.st_mode):
            dst = os.path.join(dst, basename(src))
    copy_file(src, dst, follow_symlinks)
    copy_mode(src, dst, follow_symlinks)
    return dst
