"""Tests for move(): rename fast path and the copy-and-remove fallbacks."""

import errno
import os

import pytest

from fileshift import (
    AlreadyExistsError,
    MoveOntoSelfError,
    MoveOptions,
    copy,
    move,
)
from conftest import posix_only, snapshot


@pytest.fixture
def cross_device(monkeypatch):
    """Make every os.rename fail as if crossing filesystems."""
    def no_rename(src, dst, *args, **kwargs):
        raise OSError(errno.EXDEV, "Invalid cross-device link", src, None, dst)

    monkeypatch.setattr(os, "rename", no_rename)


class TestMoveRename:
    def test_rename_file(self, tmp_path):
        src = tmp_path / "hello.txt"
        src.write_text("hello world")
        dst = tmp_path / "renamed.txt"
        assert move(src, dst) == str(dst)
        assert dst.read_text() == "hello world"
        assert not src.exists()

    def test_move_into_directory(self, tmp_path):
        src = tmp_path / "hello.txt"
        src.write_text("hello world")
        d = tmp_path / "dir"
        d.mkdir()
        result = move(src, d)
        assert result == os.path.join(str(d), "hello.txt")
        assert (d / "hello.txt").read_text() == "hello world"
        assert not src.exists()

    def test_rename_directory(self, src_tree, tmp_path):
        before = snapshot(src_tree)
        dst = tmp_path / "testdir2"
        assert move(src_tree, dst) == str(dst)
        assert not src_tree.exists()
        assert snapshot(dst) == before

    def test_directory_with_trailing_separator_into_directory(self, src_tree, tmp_path):
        d = tmp_path / "dest"
        d.mkdir()
        result = move(str(src_tree) + os.sep, d)
        assert result == os.path.join(str(d), "src")
        assert (d / "src" / "file1").read_text() == "one"

    def test_replaces_existing_file(self, tmp_path):
        src = tmp_path / "a.txt"
        src.write_text("new")
        dst = tmp_path / "b.txt"
        dst.write_text("old")
        move(src, dst)
        assert dst.read_text() == "new"
        assert not src.exists()

    def test_same_directory_is_noop_rename(self, tmp_path):
        d = tmp_path / "d"
        d.mkdir()
        (d / "f").write_text("x")
        assert move(d, d) == str(d)
        assert (d / "f").read_text() == "x"


class TestMoveErrors:
    def test_destination_entry_exists(self, src_tree, tmp_path):
        d = tmp_path / "dest"
        d.mkdir()
        (d / "src").mkdir()
        with pytest.raises(AlreadyExistsError) as exc_info:
            move(src_tree, d)
        assert exc_info.value.dst == os.path.join(str(d), "src")
        assert (src_tree / "file1").exists()

    def test_move_into_parent_it_already_lives_in(self, src_tree, tmp_path):
        # src_tree is tmp_path/src, so tmp_path/src already exists
        with pytest.raises(AlreadyExistsError):
            move(src_tree, tmp_path)
        assert src_tree.is_dir()

    def test_missing_source(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            move(tmp_path / "missing.txt", tmp_path / "dest.txt")

    def test_move_into_own_subdirectory(self, src_tree):
        before = snapshot(src_tree)
        with pytest.raises(MoveOntoSelfError) as exc_info:
            move(src_tree, src_tree / "sub")
        assert exc_info.value.src == str(src_tree)
        assert snapshot(src_tree) == before

    def test_move_onto_missing_path_inside_itself(self, src_tree):
        before = snapshot(src_tree)
        with pytest.raises(MoveOntoSelfError):
            move(src_tree, src_tree / "newsub")
        assert snapshot(src_tree) == before
        assert not (src_tree / "newsub").exists()


class TestMoveFallback:
    def test_file_copied_then_removed(self, tmp_path, cross_device):
        src = tmp_path / "a.txt"
        src.write_bytes(b"payload" * 100)
        dst = tmp_path / "b.txt"
        assert move(src, dst) == str(dst)
        assert dst.read_bytes() == b"payload" * 100
        assert not src.exists()

    def test_file_into_directory(self, tmp_path, cross_device):
        src = tmp_path / "a.txt"
        src.write_text("a")
        d = tmp_path / "d"
        d.mkdir()
        assert move(src, d) == os.path.join(str(d), "a.txt")
        assert (d / "a.txt").read_text() == "a"
        assert not src.exists()

    def test_custom_copy_function_follows_symlinks(self, tmp_path, cross_device):
        calls = []

        def recording_copy(src, dst, follow_symlinks):
            calls.append(follow_symlinks)
            return copy(src, dst, follow_symlinks)

        src = tmp_path / "a.txt"
        src.write_text("a")
        move(src, tmp_path / "b.txt", MoveOptions(copy_function=recording_copy))
        assert calls == [True]
        assert not src.exists()

    @posix_only
    def test_symlink_recreated(self, tmp_path, cross_device):
        target = tmp_path / "target.txt"
        target.write_text("t")
        link = tmp_path / "link"
        os.symlink("target.txt", link)
        dst = tmp_path / "moved_link"
        assert move(link, dst) == str(dst)
        assert os.readlink(dst) == "target.txt"
        assert not os.path.lexists(link)
        assert target.read_text() == "t"

    @posix_only
    def test_dangling_symlink_recreated(self, tmp_path, cross_device):
        link = tmp_path / "link"
        os.symlink("nowhere", link)
        dst = tmp_path / "moved_link"
        move(link, dst)
        assert os.readlink(dst) == "nowhere"
        assert not os.path.lexists(link)

    def test_directory_copied_then_removed(self, src_tree, tmp_path, cross_device):
        before = snapshot(src_tree)
        dst = tmp_path / "moved"
        assert move(src_tree, dst) == str(dst)
        assert not src_tree.exists()
        assert snapshot(dst) == before

    @posix_only
    def test_directory_preserves_symlinks(self, src_tree, tmp_path, cross_device):
        os.symlink("nowhere", src_tree / "dangling")
        dst = tmp_path / "moved"
        move(src_tree, dst)
        assert os.readlink(dst / "link_dir") == "sub"
        assert os.readlink(dst / "dangling") == "nowhere"

    def test_directory_uses_configured_copy_function(self, src_tree, tmp_path, cross_device):
        calls = []

        def recording_copy(src, dst, follow_symlinks):
            calls.append(os.path.basename(src))
            return copy(src, dst, follow_symlinks)

        move(src_tree, tmp_path / "moved", MoveOptions(copy_function=recording_copy))
        assert "file1" in calls
        assert "deep.txt" in calls

    def test_directory_into_own_subtree(self, src_tree, cross_device):
        before = snapshot(src_tree)
        with pytest.raises(MoveOntoSelfError):
            move(src_tree, src_tree / "sub")
        assert snapshot(src_tree) == before

    def test_copy_failure_keeps_source(self, tmp_path, cross_device):
        def failing_copy(src, dst, follow_symlinks):
            raise PermissionError(errno.EACCES, "denied", dst)

        src = tmp_path / "a.txt"
        src.write_text("a")
        with pytest.raises(PermissionError):
            move(src, tmp_path / "b.txt", MoveOptions(copy_function=failing_copy))
        assert src.read_text() == "a"

    @posix_only
    def test_symlink_unlink_failure_leaves_both_links(self, tmp_path, cross_device, monkeypatch):
        link = tmp_path / "link"
        os.symlink("target", link)

        def no_unlink(path, *args, **kwargs):
            raise PermissionError(errno.EPERM, "not permitted", path)

        monkeypatch.setattr(os, "unlink", no_unlink)
        dst = tmp_path / "moved_link"
        with pytest.raises(PermissionError):
            move(link, dst)
        assert os.readlink(link) == "target"
        assert os.readlink(dst) == "target"
