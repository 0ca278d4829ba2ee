"""Tree traversal strategies for BinaryTreeLib.

Traversers implement different orders for walking through a binary tree.
They yield every node together with its depth, leaving it to the caller
to decide what to do with each one.
"""

from abc import ABC, abstractmethod
from typing import Deque, Iterator, List, Optional, Tuple, Union
from collections import deque

from .node import Node
from ..config import TraversalStrategy


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers implement the algorithms for walking through trees in
    different orders (recursive pre-order, breadth-first, iterative
    depth-first). An absent root is an empty tree and yields nothing.
    """

    @abstractmethod
    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None = empty tree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class RecursivePreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal using the call stack.

    Visits a node, then its left subtree, then its right subtree.
    Depth is bounded by the interpreter recursion limit.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:

        def _traverse_recursive(node: Optional[Node], depth: int) -> Iterator[Tuple[Node, int]]:
            if node is None:
                return

            # Yield parent first (pre-order)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                yield from _traverse_recursive(node.left, depth + 1)
                yield from _traverse_recursive(node.right, depth + 1)

        yield from _traverse_recursive(root, 0)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1,
    left to right within a level.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse tree breadth-first using a FIFO queue."""
        if root is None:
            return

        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.children():
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal with an explicit stack.

    Produces the same order as RecursivePreOrderTraverser, but is not
    limited by recursion depth. Right children are pushed before left
    ones so the left subtree is popped first.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse tree depth-first using a LIFO stack."""
        if root is None:
            return

        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                if node.right is not None:
                    stack.append((node.right, depth + 1))
                if node.left is not None:
                    stack.append((node.left, depth + 1))


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or its name (recursive, queue, stack)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    traversers = {
        TraversalStrategy.RECURSIVE: RecursivePreOrderTraverser,
        TraversalStrategy.QUEUE: BreadthFirstTraverser,
        TraversalStrategy.STACK: DepthFirstPreOrderTraverser,
    }

    return traversers[TraversalStrategy.parse(strategy)]()
