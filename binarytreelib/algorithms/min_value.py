"""Minimum value discovery.

The variants deliberately disagree about empty trees:

- The recursive variant folds an absent subtree into the reduction as
  NO_VALUE, a sentinel that never wins a minimum comparison. Called on an
  empty tree it therefore returns NO_VALUE itself.
- The queue and stack variants have no such identity to fall back on and
  reject an empty tree with EmptyTreeError.

On any non-empty tree all variants return the same minimum.
"""

import math
from collections import deque
from typing import Deque, List, Optional, Union

from ..core.node import Node


# Identity of the min reduction. Python ints are unbounded, so the only
# value guaranteed to lose against every node is infinity.
NO_VALUE = math.inf


class EmptyTreeError(ValueError):
    """Raised when an algorithm that needs at least one node gets an empty tree."""
    pass


def min_value_with_recursion(root: Optional[Node]) -> Union[int, float]:
    """Recursively find the smallest value in the tree.

    Args:
        root: Root of the tree (None = empty tree)

    Returns:
        The minimum node value, or NO_VALUE for an empty tree
    """
    if root is None:
        return NO_VALUE

    left_min = min_value_with_recursion(root.left)
    right_min = min_value_with_recursion(root.right)

    return min(root.value, left_min, right_min)


def min_value_with_queue(root: Optional[Node]) -> int:
    """Find the smallest value breadth-first with an explicit queue.

    Args:
        root: Root of the tree, must not be None

    Returns:
        The minimum node value

    Raises:
        EmptyTreeError: If root is None
    """
    if root is None:
        raise EmptyTreeError("The root node cannot be None.")

    minimum = root.value
    queue: Deque[Node] = deque([root])

    while queue:
        current = queue.popleft()
        minimum = min(minimum, current.value)

        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)

    return minimum


def min_value_with_stack(root: Optional[Node]) -> int:
    """Find the smallest value depth-first with an explicit stack.

    Args:
        root: Root of the tree, must not be None

    Returns:
        The minimum node value

    Raises:
        EmptyTreeError: If root is None
    """
    if root is None:
        raise EmptyTreeError("The root node cannot be None.")

    minimum = root.value
    stack: List[Node] = [root]

    while stack:
        current = stack.pop()
        minimum = min(minimum, current.value)

        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)

    return minimum
