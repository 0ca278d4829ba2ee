"""Maximum root-to-leaf path sum.

A root-to-leaf path starts at the root and follows child links down to a
node with no children. Only leaves end a path, so internal nodes are never
compared against the best sum themselves.

An empty tree has no paths; its result is defined as 0. Trees whose values
are all negative return the true (negative) maximum.
"""

import math
from collections import deque
from typing import Deque, List, Optional, Tuple

from ..core.node import Node


def max_path_sum_with_recursion(root: Optional[Node]) -> int:
    """Recursively find the best root-to-leaf path sum.

    A single running sum is shared by the whole descent: each node adds its
    value on the way down and subtracts it again once both subtrees are
    done, so sibling subtrees start from the same prefix. The running sum
    and the best sum live in this call only.

    Args:
        root: Root of the tree (None = empty tree)

    Returns:
        Maximum path sum, 0 for an empty tree
    """
    if root is None:
        return 0

    running = 0
    best = -math.inf

    def _descend(node: Optional[Node]) -> None:
        nonlocal running, best
        if node is None:
            return

        running += node.value

        if node.is_leaf():
            best = max(best, running)

        _descend(node.left)
        _descend(node.right)

        # Backtrack so the sibling subtree sees the parent's prefix
        running -= node.value

    _descend(root)
    return best


def max_path_sum_with_stack(root: Optional[Node]) -> int:
    """Find the best root-to-leaf path sum with an explicit stack.

    Each stack entry carries the sum of the path down to its parent, so no
    backtracking is needed.

    Args:
        root: Root of the tree (None = empty tree)

    Returns:
        Maximum path sum, 0 for an empty tree
    """
    if root is None:
        return 0

    best = -math.inf
    stack: List[Tuple[Node, int]] = [(root, 0)]

    while stack:
        node, sum_to_parent = stack.pop()
        path_sum = sum_to_parent + node.value

        if node.is_leaf():
            best = max(best, path_sum)
            continue

        if node.right is not None:
            stack.append((node.right, path_sum))
        if node.left is not None:
            stack.append((node.left, path_sum))

    return best


def max_path_sum_with_queue(root: Optional[Node]) -> int:
    """Find the best root-to-leaf path sum breadth-first.

    Same bookkeeping as the stack variant, visiting shallow leaves first.
    """
    if root is None:
        return 0

    best = -math.inf
    queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

    while queue:
        node, sum_to_parent = queue.popleft()
        path_sum = sum_to_parent + node.value

        if node.is_leaf():
            best = max(best, path_sum)
            continue

        for child in node.children():
            queue.append((child, path_sum))

    return best
