from __future__ import annotations

"""
Level Linearizer.

Converts a built directory tree into its level-ordered listing. A single
breadth-first traversal fills a visit queue; draining that queue numbers
every entry by depth and by position among the entries of the same depth.
"""

from collections import deque
from typing import Deque, Iterator, Optional

from dirlevels.domain.tree_models import LevelEntry, TreeNode

# -----------------------------------------------------------------------------
# FIFO PRIMITIVE
# -----------------------------------------------------------------------------

class NodeQueue:
    """
    First-in-first-out queue of non-owning TreeNode references.

    dequeue() returns None once the queue is empty; it never fabricates a
    placeholder node.
    """

    def __init__(self) -> None:
        self._cells: Deque[TreeNode] = deque()

    def enqueue(self, node: TreeNode) -> None:
        self._cells.append(node)

    def dequeue(self) -> Optional[TreeNode]:
        if not self._cells:
            return None
        return self._cells.popleft()

    def is_empty(self) -> bool:
        return not self._cells

    def __len__(self) -> int:
        return len(self._cells)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_visit_queue(root: TreeNode) -> NodeQueue:
    """
    Traverse the tree breadth-first and return the nodes in visiting order.

    The current node is moved to the visit queue, its children are staged
    in an auxiliary to-visit queue in their stored order, and the next
    current node is taken from the to-visit queue until it runs dry.

    Args:
        root: Root of a fully built tree.

    Returns:
        NodeQueue: Every node of the tree exactly once, in level order.
    """
    visit_queue = NodeQueue()
    to_visit = NodeQueue()

    current: Optional[TreeNode] = root
    while current is not None:
        visit_queue.enqueue(current)
        for child in current.children:
            to_visit.enqueue(child)
        current = to_visit.dequeue()

    return visit_queue


def linearize(root: TreeNode) -> Iterator[LevelEntry]:
    """
    Yield the level-ordered listing of the tree rooted at *root*.

    Positions restart at 1 whenever the depth changes between two
    consecutive entries. The iterator drains its queue as it goes, so it
    can only be consumed once, and the tree must not be released before
    it is exhausted.

    Args:
        root: Root of a fully built tree.

    Yields:
        LevelEntry: (depth, position, path) for each node.
    """
    visit_queue = build_visit_queue(root)
    position = 0
    previous_depth = 0

    node = visit_queue.dequeue()
    while node is not None:
        if node.depth != previous_depth:
            position = 0
        position += 1
        previous_depth = node.depth
        yield LevelEntry(depth=node.depth, position=position, path=node.path)
        node = visit_queue.dequeue()
