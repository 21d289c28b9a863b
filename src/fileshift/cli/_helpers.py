"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import click

from .._ignore import IgnorePatterns
from ..exceptions import ShutilError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _fail(exc: OSError) -> click.ClickException:
    """Turn a library or OS error into a ClickException with a readable message."""
    if isinstance(exc, ShutilError):
        return click.ClickException(str(exc))
    if exc.filename is not None:
        return click.ClickException(f"{exc.strerror or exc}: {exc.filename}")
    return click.ClickException(str(exc))


def _split_sources(paths: tuple[str, ...]) -> tuple[list[str], str]:
    """Split ``SRC... DST`` arguments into sources and destination."""
    if len(paths) < 2:
        raise click.UsageError("Need at least one source and a destination.")
    return list(paths[:-1]), paths[-1]


def _exclude_options(f):
    """Shared --exclude / --exclude-from / --gitignore options."""
    f = click.option("--gitignore", is_flag=True, default=False,
                     help="Honor .gitignore files found in copied directories.")(f)
    f = click.option("--exclude-from", "exclude_from", type=click.Path(exists=True, dir_okay=False),
                     envvar="FILESHIFT_EXCLUDE_FROM", default=None,
                     help="Read exclude patterns from a file (or set FILESHIFT_EXCLUDE_FROM).")(f)
    f = click.option("--exclude", "excludes", multiple=True,
                     help="Exclude entries matching a gitignore-style pattern (repeatable).")(f)
    return f


def _build_ignore(excludes, exclude_from, gitignore) -> IgnorePatterns | None:
    """Build an ignore predicate from CLI options, or None if nothing is set."""
    ignore = IgnorePatterns(
        patterns=list(excludes) or None,
        exclude_from=exclude_from,
        gitignore=gitignore,
    )
    return ignore if ignore.active else None


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.pass_context
def main(ctx, verbose):
    """fileshift: copy and move files, symlinks, and directory trees.

    \b
    Quick start:
      fileshift cp notes.txt backup/
      fileshift cp -r --exclude '*.pyc' project/ project-copy
      fileshift mv build/ /mnt/other/build
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
