from __future__ import annotations

"""
Directory Tree Data Models.

Provides the ownership tree built by the walker, the classification
vocabulary reported by the path classifier, and the level-ordered entry
emitted by the linearizer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

class EntryKind(Enum):
    """Filesystem entry type as reported by the path classifier."""
    DIRECTORY = "directory"
    REGULAR_FILE = "regular_file"
    OTHER = "other"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class TreeNode:
    """
    One filesystem entry inside the walked subtree.

    A node exclusively owns the nodes stored in its children list. Sibling
    order is the list order, which is the discovery order of the lister.

    Attributes:
        path: Absolute filesystem path of the entry.
        depth: Distance from the root, the root being 1.
        children: Owned child nodes in discovery order.
        released: Set once the lifecycle manager has released the node.
    """
    path: str
    depth: int
    children: List["TreeNode"] = field(default_factory=list)
    released: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"Invalid depth {self.depth} for '{self.path}': must be >= 1.")

    def append_child(self, path: str) -> "TreeNode":
        """Create a child one level deeper and attach it after the last sibling."""
        child = TreeNode(path=path, depth=self.depth + 1)
        self.children.append(child)
        return child

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def count_nodes(self) -> int:
        """Total number of nodes in this subtree, including itself."""
        return 1 + sum(child.count_nodes() for child in self.children)


@dataclass(frozen=True)
class LevelEntry:
    """
    A single line of the level-ordered listing.

    Attributes:
        depth: Depth of the entry (root = 1).
        position: 1-based position among the entries sharing this depth.
        path: Absolute path of the entry.
    """
    depth: int
    position: int
    path: str

    def format(self) -> str:
        return f"{self.depth}:{self.position}:{self.path}"
