from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: an in-memory filesystem double for the walker's
   collaborators and a small on-disk project tree.
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Set

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirlevels.domain.tree_models import EntryKind  # noqa: E402


# -----------------------------------------------------------------------------
# Filesystem Double
# -----------------------------------------------------------------------------
class FakeFileSystem:
    """
    In-memory stand-in for the directory lister and path classifier.

    Directories map to their entry names in listing order. Paths listed in
    'unreadable' fail on listing, paths in 'unclassifiable' fail on stat.
    """

    def __init__(self, dirs: Dict[str, List[str]]) -> None:
        self.dirs = dirs
        self.unreadable: Set[str] = set()
        self.unclassifiable: Set[str] = set()
        self.listed: List[str] = []
        self.classified: List[str] = []

    def list(self, path: str) -> List[str]:
        self.listed.append(path)
        if path in self.unreadable:
            raise PermissionError(13, "Permission denied", path)
        if path not in self.dirs:
            raise NotADirectoryError(20, "Not a directory", path)
        return list(self.dirs[path])

    def classify(self, path: str) -> EntryKind:
        self.classified.append(path)
        if path in self.unclassifiable:
            raise FileNotFoundError(2, "No such file or directory", path)
        if path in self.dirs:
            return EntryKind.DIRECTORY
        return EntryKind.REGULAR_FILE


@pytest.fixture
def sample_fs() -> FakeFileSystem:
    """
    Virtual tree used by the listing scenarios.

    /tmp/root
      a.txt
      sub/
        b.txt
      .secret
    """
    return FakeFileSystem({
        "/tmp/root": ["a.txt", "sub", ".secret"],
        "/tmp/root/sub": ["b.txt"],
    })


@pytest.fixture
def disk_tree(tmp_path: Path) -> Path:
    """
    Create a small on-disk tree.

    /root
      a.txt
      .hidden
      sub/
        b.txt
        .git/
          config
        deeper/
          c.txt
      empty/
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / ".hidden").write_text("h", encoding="utf-8")

    sub = root / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("b", encoding="utf-8")
    git = sub / ".git"
    git.mkdir()
    (git / "config").write_text("[core]", encoding="utf-8")
    deeper = sub / "deeper"
    deeper.mkdir()
    (deeper / "c.txt").write_text("c", encoding="utf-8")

    (root / "empty").mkdir()
    return root
