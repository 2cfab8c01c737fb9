from __future__ import annotations

"""
Tree Lifecycle Management.

Releases a walked tree once its listing has been produced. Every node is
released exactly once: the children first, then the node's own children
container. Releasing an already released tree is not supported.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from dirlevels.core.analysis.tree_builder import (
    DirectoryLister,
    PathClassifier,
    build_tree,
)
from dirlevels.domain.listing_models import WalkError
from dirlevels.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def release_tree(root: TreeNode) -> int:
    """
    Release *root* and its entire subtree.

    Args:
        root: Root of the tree to release. Must not have been released before.

    Returns:
        int: Number of nodes released.
    """
    released = 0
    for child in root.children:
        released += release_tree(child)

    root.children.clear()
    root.released = True
    return released + 1


@contextmanager
def owned_tree(
        path: str,
        *,
        lister: Optional[DirectoryLister] = None,
        classifier: Optional[PathClassifier] = None,
        errors: Optional[List[WalkError]] = None,
) -> Iterator[TreeNode]:
    """
    Build the tree rooted at *path* and release it when the block exits.

    Consumers must finish reading the tree, including any linearization
    iterator created from it, inside the block.
    """
    root = build_tree(path, lister=lister, classifier=classifier, errors=errors)
    try:
        yield root
    finally:
        count = release_tree(root)
        logger.debug(f"Released {count} tree nodes for: {path}")
