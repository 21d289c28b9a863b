"""The cp and mv commands."""

from __future__ import annotations

import os

import click

from .._classify import basename, is_directory
from ..ops import CopyTreeOptions, copy, copy_tree, move
from ._helpers import _build_ignore, _exclude_options, _fail, _split_sources, _status, main


def _require_directory_dest(sources: list[str], dest: str) -> None:
    if len(sources) > 1 and not is_directory(dest):
        raise click.ClickException(f"Target is not a directory: {dest}")


def _into(src: str, dest: str) -> str:
    """Where *src* lands: under its own name when *dest* is a directory."""
    if is_directory(dest):
        return os.path.join(dest, basename(src))
    return dest


def _copy_link(src: str, dest: str) -> str:
    """Recreate the symlink *src* with its own target string, like cp -P."""
    target = _into(src, dest)
    os.symlink(os.readlink(src), target)
    return target


# ---------------------------------------------------------------------------
# cp
# ---------------------------------------------------------------------------

@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("-r", "-R", "--recursive", is_flag=True, help="Copy directories recursively.")
@click.option("-P", "--no-dereference", "symlink_mode", flag_value="preserve",
              help="Copy symlinks as symlinks.")
@click.option("-L", "--dereference", "symlink_mode", flag_value="follow",
              help="Copy the content symlinks point to (default).")
@click.option("--ignore-dangling", is_flag=True, default=False,
              help="Skip dangling symlinks inside copied trees instead of failing.")
@_exclude_options
@click.pass_context
def cp(ctx, paths, recursive, symlink_mode, ignore_dangling, excludes, exclude_from, gitignore):
    """Copy files and directory trees.

    \b
    Copy one file:          fileshift cp a.txt b.txt
    Copy into a directory:  fileshift cp a.txt b.txt dir/
    Copy a tree:            fileshift cp -r src/ dst

    A directory destination receives sources under their own names.
    Tree copies never merge into an existing directory.
    """
    sources, dest = _split_sources(paths)
    _require_directory_dest(sources, dest)
    preserve = symlink_mode == "preserve"
    options = CopyTreeOptions(
        symlinks=preserve,
        ignore_dangling_symlinks=ignore_dangling,
        ignore=_build_ignore(excludes, exclude_from, gitignore),
    )

    for src in sources:
        try:
            if preserve and os.path.islink(src):
                result = _copy_link(src, dest)
            elif is_directory(src):
                if not recursive:
                    raise click.ClickException(f"{src} is a directory (use -r to copy it)")
                result = copy_tree(src, _into(src, dest), options)
            else:
                result = copy(src, dest)
        except OSError as exc:
            raise _fail(exc)
        _status(ctx, f"{src} -> {result}")


# ---------------------------------------------------------------------------
# mv
# ---------------------------------------------------------------------------

@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.pass_context
def mv(ctx, paths):
    """Move or rename files and directories.

    \b
    Rename:                 fileshift mv old.txt new.txt
    Move into a directory:  fileshift mv a.txt b/ dir/

    Falls back to copy-and-remove when a rename is not possible, for
    example across filesystems.
    """
    sources, dest = _split_sources(paths)
    _require_directory_dest(sources, dest)

    for src in sources:
        try:
            result = move(src, dest)
        except OSError as exc:
            raise _fail(exc)
        _status(ctx, f"{src} -> {result}")
