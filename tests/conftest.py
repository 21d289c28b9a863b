"""Shared fixtures for fileshift tests."""

import os

import pytest
from click.testing import CliRunner


posix_only = pytest.mark.skipif(os.name != "posix", reason="needs POSIX symlinks and modes")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def src_tree(tmp_path):
    """A source tree with nested dirs, files, and symlinks.

    Tree:
        file1, file2, build/out.bin,
        sub/deep.txt, sub/build/keep.txt,
        link_file -> file1, link_dir -> sub
    """
    root = tmp_path / "src"
    root.mkdir()
    (root / "file1").write_text("one")
    (root / "file2").write_bytes(b"\x00\x01\x02" * 1000)

    build = root / "build"
    build.mkdir()
    (build / "out.bin").write_bytes(b"binary")

    sub = root / "sub"
    sub.mkdir()
    (sub / "deep.txt").write_text("deep")
    (sub / "build").mkdir()
    (sub / "build" / "keep.txt").write_text("keep")

    if os.name == "posix":
        os.symlink("file1", root / "link_file")
        os.symlink("sub", root / "link_dir")
    return root


def snapshot(root):
    """Return ``{relpath: ("link", target) | ("file", bytes) | ("dir", None)}``."""
    result = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            full = os.path.join(dirpath, name)
            rel = os.path.relpath(full, root)
            if os.path.islink(full):
                result[rel] = ("link", os.readlink(full))
            elif os.path.isdir(full):
                result[rel] = ("dir", None)
            else:
                with open(full, "rb") as f:
                    result[rel] = ("file", f.read())
    return result
