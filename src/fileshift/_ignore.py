"""Ignore predicates for :func:`~fileshift.copy_tree`.

:class:`IgnorePatterns` combines explicit patterns, a patterns file, and
per-directory ``.gitignore`` loading into a single ``ignore(dir_path,
entries)`` callable.

Pattern syntax follows gitignore rules (implemented by
``dulwich.ignore.IgnoreFilter``).  Paths are matched relative to the
root of the tree being copied, so ``/build`` only hides the top-level
``build`` and ``docs/*.tmp`` only hides files directly under ``docs``.
"""

from __future__ import annotations

import os
from typing import Sequence

from dulwich.ignore import IgnoreFilter, read_ignore_patterns


def _is_within(path: str, root: str) -> bool:
    return path == root or path.startswith(root.rstrip(os.sep) + os.sep)


def _load_patterns(
    patterns: Sequence[str] | None,
    exclude_from: str | os.PathLike[str] | None,
) -> list[bytes]:
    lines = [p.encode("utf-8") for p in patterns or ()]
    if exclude_from is not None:
        with open(exclude_from, "rb") as f:
            lines.extend(read_ignore_patterns(f))
    return lines


class IgnorePatterns:
    """Combines explicit patterns, an exclude file, and .gitignore files.

    The walk root is the first directory the predicate is called with.
    Calling it again with that directory, or with one outside it, starts
    a new walk and forgets any ``.gitignore`` files read so far, so one
    instance can be reused across copies.  Pass *root* to pin the root
    instead; directories outside a pinned root raise ``ValueError``.

    Directories are checked with a trailing ``/`` so that ``build/``
    only hides directories.
    """

    def __init__(
        self,
        *,
        patterns: Sequence[str] | None = None,
        exclude_from: str | os.PathLike[str] | None = None,
        gitignore: bool = False,
        root: str | os.PathLike[str] | None = None,
    ) -> None:
        lines = _load_patterns(patterns, exclude_from)
        self._base = IgnoreFilter(lines) if lines else None
        self._gitignore = gitignore
        self._pinned = root is not None
        self._root = os.path.abspath(root) if root is not None else None
        # {dir relative to root: IgnoreFilter | None}, one walk's worth
        self._dir_filters: dict[str, IgnoreFilter | None] = {}

    @property
    def active(self) -> bool:
        """True if any filtering is configured."""
        return self._base is not None or self._gitignore

    def __call__(self, dir_path: str, entries: Sequence[os.DirEntry]) -> set[str]:
        rel_dir = self._relative_dir(os.path.abspath(dir_path))
        ignored: set[str] = set()
        for entry in entries:
            rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
            if self._is_excluded(rel_path, is_dir=entry.is_dir(follow_symlinks=False)):
                ignored.add(entry.name)
        return ignored

    def _relative_dir(self, abs_dir: str) -> str:
        if not self._pinned and (self._root is None or not _is_within(abs_dir, self._root)):
            self._root = abs_dir
        if not _is_within(abs_dir, self._root):
            raise ValueError(f"{abs_dir!r} is outside the ignore root {self._root!r}")
        if abs_dir == self._root:
            self._dir_filters.clear()
            return ""
        return os.path.relpath(abs_dir, self._root).replace(os.sep, "/")

    def _gitignore_filter(self, rel_dir: str) -> IgnoreFilter | None:
        if rel_dir not in self._dir_filters:
            gi = os.path.join(self._root, *rel_dir.split("/"), ".gitignore")
            self._dir_filters[rel_dir] = (
                IgnoreFilter.from_path(gi) if os.path.isfile(gi) else None
            )
        return self._dir_filters[rel_dir]

    def _is_excluded(self, rel_path: str, *, is_dir: bool = False) -> bool:
        check = rel_path + "/" if is_dir else rel_path
        if self._base is not None and self._base.is_ignored(check) is True:
            return True

        if not self._gitignore:
            return False

        # Root .gitignore first, then each deeper ancestor; every filter
        # sees the path relative to its own directory.
        parts = rel_path.split("/")
        for depth in range(len(parts)):
            filt = self._gitignore_filter("/".join(parts[:depth]))
            if filt is None:
                continue
            sub = "/".join(parts[depth:])
            result = filt.is_ignored(sub + "/" if is_dir else sub)
            if result is True:
                return True
            if result is False:
                # Explicit negation stops checking deeper filters
                return False
        return False


def ignore_patterns(*patterns: str) -> IgnorePatterns:
    """Return an ignore function that skips paths matching any of *patterns*."""
    return IgnorePatterns(patterns=patterns)


def ignore_names(*names: str):
    """Return an ignore function that skips entries named exactly *names*."""
    wanted = frozenset(names)

    def _ignore(dir_path: str, entries: Sequence[os.DirEntry]) -> set[str]:
        return {e.name for e in entries if e.name in wanted}

    return _ignore
