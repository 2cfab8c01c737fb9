from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates the OS-backed directory lister and path classifier, path
normalization and listing persistence against real temporary directories.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from dirlevels.domain.tree_models import EntryKind
from dirlevels.infra.fs import (
    classify_path,
    is_hidden,
    join_child_path,
    list_directory,
    normalize_path,
    save_lines,
)

# -----------------------------------------------------------------------------
# COLLABORATOR TESTS
# -----------------------------------------------------------------------------

def test_list_directory_returns_names(disk_tree: Path) -> None:
    """TC-01: Hidden names are reported by the lister; filtering is the walker's job."""
    names = list_directory(str(disk_tree))
    assert sorted(names) == [".hidden", "a.txt", "empty", "sub"]
    assert "." not in names and ".." not in names


def test_list_directory_failures_raise_oserror(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list_directory(str(tmp_path / "missing"))

    f = tmp_path / "file.txt"
    f.write_text("x", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        list_directory(str(f))


def test_classify_path_kinds(disk_tree: Path) -> None:
    assert classify_path(str(disk_tree / "sub")) is EntryKind.DIRECTORY
    assert classify_path(str(disk_tree / "a.txt")) is EntryKind.REGULAR_FILE


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires POSIX fifos")
def test_classify_path_other(tmp_path: Path) -> None:
    fifo = tmp_path / "pipe"
    os.mkfifo(fifo)
    assert classify_path(str(fifo)) is EntryKind.OTHER


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="requires symlinks")
def test_classify_path_follows_symlinks(disk_tree: Path, tmp_path: Path) -> None:
    link = tmp_path / "link_to_sub"
    link.symlink_to(disk_tree / "sub", target_is_directory=True)
    assert classify_path(str(link)) is EntryKind.DIRECTORY

    dangling = tmp_path / "dangling"
    dangling.symlink_to(tmp_path / "nowhere")
    with pytest.raises(FileNotFoundError):
        classify_path(str(dangling))


def test_is_hidden() -> None:
    assert is_hidden(".")
    assert is_hidden("..")
    assert is_hidden(".bashrc")
    assert not is_hidden("a.txt")
    assert not is_hidden("dir.with.dots")


def test_join_child_path() -> None:
    assert join_child_path("/tmp/root", "a.txt") == "/tmp/root/a.txt"
    assert join_child_path("/", "etc") == "/etc"

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_normalize_path_expansion() -> None:
    """TC-02: Verify expansion of environment variables and user shortcuts."""
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.endswith(os.path.join("my_folder", "sub"))
        assert os.path.isabs(path)

        with patch("os.path.expanduser", side_effect=lambda p: p.replace("~", "/home/user")):
            path = normalize_path("~/code", fallback=".")
            assert path == "/home/user/code"


def test_normalize_path_empty_uses_fallback(tmp_path: Path) -> None:
    assert normalize_path("  ", fallback=str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, fallback=str(tmp_path)) == str(tmp_path)

# -----------------------------------------------------------------------------
# PERSISTENCE TESTS
# -----------------------------------------------------------------------------

def test_save_lines_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "listing.txt"
    ok, err = save_lines(str(target), ["1:1:/x", "2:1:/x/y"])

    assert ok and err is None
    assert target.read_text(encoding="utf-8") == "1:1:/x\n2:1:/x/y\n"


def test_save_lines_reports_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")

    ok, err = save_lines(str(blocker / "listing.txt"), ["1:1:/x"])

    assert not ok
    assert err


def test_save_lines_writes_undecodable_names_back_as_bytes(tmp_path: Path) -> None:
    target = tmp_path / "listing.txt"
    ok, err = save_lines(str(target), ["2:1:/x/bad\udcff.txt"])

    assert ok and err is None
    assert target.read_bytes() == b"2:1:/x/bad\xff.txt\n"
