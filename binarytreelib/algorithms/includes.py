"""Membership search: does any node in the tree hold a given value?

Three variants are provided so the traversal strategies can be compared
side by side:

- Recursion: depth-first pre-order on the call stack. Concise, but bounded
  by the interpreter recursion limit on very deep trees.
- Queue: breadth-first. Finds values near the root first, which suits
  wide, shallow trees.
- Stack: depth-first pre-order without recursion. Visits nodes in the same
  order as the recursive variant and handles arbitrarily deep trees.

All three return the same answer for any tree and value.
"""

from collections import deque
from typing import Deque, List, Optional

from ..core.node import Node


def includes_with_recursion(root: Optional[Node], value: int) -> bool:
    """Recursively search for a value, depth-first.

    Checks the current node, then the left subtree, then the right subtree,
    stopping at the first match.

    Args:
        root: Root of the tree to search (None = empty tree)
        value: Value to look for

    Returns:
        True if some node holds value, False otherwise

    Time: O(n). Space: O(h) call stack, h = tree height.
    """
    if root is None:
        return False

    if root.value == value:
        return True

    return includes_with_recursion(root.left, value) or includes_with_recursion(root.right, value)


def includes_with_queue(root: Optional[Node], value: int) -> bool:
    """Search for a value breadth-first with an explicit queue.

    Args:
        root: Root of the tree to search (None = empty tree)
        value: Value to look for

    Returns:
        True if some node holds value, False otherwise

    Time: O(n). Space: O(w), w = widest level of the tree.
    """
    if root is None:
        return False

    queue: Deque[Node] = deque([root])

    while queue:
        current = queue.popleft()

        if current.value == value:
            return True

        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)

    return False


def includes_with_stack(root: Optional[Node], value: int) -> bool:
    """Search for a value depth-first with an explicit stack.

    Right children are pushed before left ones so the left subtree is
    examined first, matching the recursive pre-order.

    Args:
        root: Root of the tree to search (None = empty tree)
        value: Value to look for

    Returns:
        True if some node holds value, False otherwise

    Time: O(n). Space: O(h), h = tree height.
    """
    if root is None:
        return False

    stack: List[Node] = [root]

    while stack:
        current = stack.pop()

        if current.value == value:
            return True

        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)

    return False
