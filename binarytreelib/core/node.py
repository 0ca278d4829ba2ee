"""Node abstraction for BinaryTreeLib.

The Node is intentionally kept simple - it's a data container holding an
integer value and up to two children. Algorithms only ever read nodes;
building the tree is the caller's job.
"""

from typing import Iterator, Optional


class Node:
    """A single vertex of a binary tree.

    Each node exclusively owns its children: a node is never reachable from
    two different parents and there are no back-references, so every
    traversal is strictly top-down.

    Equality is identity. Two nodes holding the same value are still
    distinct vertices of the tree.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self,
                 value: int,
                 left: Optional["Node"] = None,
                 right: Optional["Node"] = None):
        """Create a node.

        Args:
            value: Integer payload
            left: Left child (None = no child)
            right: Right child (None = no child)
        """
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator["Node"]:
        """Iterate over present children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        left = self.left.value if self.left is not None else None
        right = self.right.value if self.right is not None else None
        return f"{self.__class__.__name__}(value={self.value!r}, left={left!r}, right={right!r})"
