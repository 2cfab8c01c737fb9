from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the two operating-system collaborators of the tree walker (the
directory lister and the path classifier) together with path normalization
and listing persistence helpers. Acts as the only place where the walker
touches the 'os' and 'stat' modules.
"""

import os
import stat
from typing import Iterable, List, Optional, Tuple

from dirlevels.domain.tree_models import EntryKind

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

PATH_SEPARATOR = "/"
HIDDEN_PREFIX = "."

# -----------------------------------------------------------------------------
# WALKER COLLABORATORS
# -----------------------------------------------------------------------------

def list_directory(path: str) -> List[str]:
    """
    Return the entry names of a directory in the order the OS reports them.

    The order is not sorted; callers preserve it verbatim. Failures
    (missing path, permission denied, name too long) propagate as OSError.

    Args:
        path: Absolute directory path.

    Returns:
        List[str]: Simple entry names without path separators.
    """
    return os.listdir(path)


def classify_path(path: str) -> EntryKind:
    """
    Report whether a path is a directory, a regular file or something else.

    Symbolic links are followed, so a link to a directory classifies as a
    directory. Failures (dangling link, permission denied) propagate as
    OSError.

    Args:
        path: Absolute path of the entry.

    Returns:
        EntryKind: Classification of the target entry.
    """
    mode = os.stat(path).st_mode
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.REGULAR_FILE
    return EntryKind.OTHER


def is_hidden(name: str) -> bool:
    """Hidden entries, including '.' and '..', start with a dot."""
    return name.startswith(HIDDEN_PREFIX)


def join_child_path(parent: str, name: str) -> str:
    """
    Build the absolute path of a child entry as parent + '/' + name.

    A parent that already ends with the separator (the filesystem root)
    is not given a second one.
    """
    if parent.endswith(PATH_SEPARATOR):
        return parent + name
    return parent + PATH_SEPARATOR + name

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# PERSISTENCE API
# -----------------------------------------------------------------------------

def save_lines(save_path: str, lines: Iterable[str]) -> Tuple[bool, Optional[str]]:
    """
    Persist listing lines to disk, one newline-terminated line each.

    Creates the parent directory hierarchy when missing. Names the OS
    reported as undecodable bytes are written back byte for byte.

    Args:
        save_path: Target file path.
        lines: Lines to write, without trailing newlines.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        out_dir = os.path.dirname(os.path.abspath(save_path))
        os.makedirs(out_dir, exist_ok=True)
        with open(save_path, "w", encoding="utf-8", errors="surrogateescape") as f:
            for line in lines:
                f.write(line + "\n")
        return True, None
    except OSError as e:
        return False, str(e)
