from __future__ import annotations

"""
Directory Tree Builder.

Walks a filesystem subtree depth-first and materializes it as an ownership
tree of TreeNode objects. Children keep the order in which the directory
lister reports them, and hidden entries are never added.

Unreadable directories and unclassifiable entries do not abort the walk:
the failure is logged, recorded, and the affected node simply has no
children. The filesystem is assumed not to change while it is walked.
"""

import logging
from typing import Callable, Iterable, List, Optional

from dirlevels.domain.listing_models import WalkError
from dirlevels.domain.tree_models import EntryKind, TreeNode
from dirlevels.infra.fs import classify_path, is_hidden, join_child_path, list_directory

logger = logging.getLogger(__name__)

DirectoryLister = Callable[[str], Iterable[str]]
PathClassifier = Callable[[str], EntryKind]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        path: str,
        depth: int = 1,
        *,
        lister: Optional[DirectoryLister] = None,
        classifier: Optional[PathClassifier] = None,
        errors: Optional[List[WalkError]] = None,
) -> TreeNode:
    """
    Build the tree rooted at *path*.

    Args:
        path: Absolute path of the subtree root.
        depth: Depth assigned to the root node (1 for a fresh walk).
        lister: Directory lister collaborator. Defaults to the OS lister.
        classifier: Path classifier collaborator. Defaults to os.stat.
        errors: Optional accumulator receiving recoverable failures.

    Returns:
        TreeNode: The root node, owning the entire walked subtree.
    """
    list_entries = lister or list_directory
    classify = classifier or classify_path

    logger.debug(f"Building directory tree for: {path}")
    root = TreeNode(path=path, depth=depth)
    _populate(root, list_entries, classify, errors)
    return root

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (SCANNING)
# -----------------------------------------------------------------------------

def _populate(
        parent: TreeNode,
        list_entries: DirectoryLister,
        classify: PathClassifier,
        errors: Optional[List[WalkError]],
) -> None:
    """Attach the children of *parent*, recursing into directories first."""
    try:
        names = list(list_entries(parent.path))
    except OSError as e:
        logger.warning(f"Cannot read directory '{parent.path}': {e}")
        _record(errors, parent.path, "list", e)
        return

    for name in names:
        if is_hidden(name):
            continue

        child_path = join_child_path(parent.path, name)
        kind = _classify_entry(child_path, classify, errors)
        child = parent.append_child(child_path)

        if kind is EntryKind.DIRECTORY:
            _populate(child, list_entries, classify, errors)


def _classify_entry(
        path: str,
        classify: PathClassifier,
        errors: Optional[List[WalkError]],
) -> EntryKind:
    """Classify an entry, treating classification failures as plain leaves."""
    try:
        return classify(path)
    except OSError as e:
        logger.warning(f"Cannot classify '{path}', treating it as a leaf: {e}")
        _record(errors, path, "classify", e)
        return EntryKind.OTHER


def _record(errors: Optional[List[WalkError]], path: str, operation: str, exc: OSError) -> None:
    if errors is not None:
        errors.append(WalkError(path=path, operation=operation, error=str(exc)))
