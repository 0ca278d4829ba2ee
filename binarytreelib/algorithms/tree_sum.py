"""Sum of all node values.

Addition is commutative, so the traversal order never changes the result.
Every call starts from zero; no total survives between calls.
"""

from collections import deque
from typing import Deque, List, Optional

from ..core.node import Node


def sum_with_recursion(root: Optional[Node]) -> int:
    """Recursively sum all values in the tree.

    The running total is threaded through return values, so calls on
    different trees never see each other's state.

    Args:
        root: Root of the tree (None = empty tree)

    Returns:
        Sum of all node values, 0 for an empty tree
    """
    if root is None:
        return 0

    return root.value + sum_with_recursion(root.left) + sum_with_recursion(root.right)


def sum_with_queue(root: Optional[Node]) -> int:
    """Sum all values breadth-first with an explicit queue."""
    if root is None:
        return 0

    total = 0
    queue: Deque[Node] = deque([root])

    while queue:
        current = queue.popleft()
        total += current.value

        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)

    return total


def sum_with_stack(root: Optional[Node]) -> int:
    """Sum all values depth-first with an explicit stack."""
    if root is None:
        return 0

    total = 0
    stack: List[Node] = [root]

    while stack:
        current = stack.pop()
        total += current.value

        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)

    return total
