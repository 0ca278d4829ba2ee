"""Tree builders for BinaryTreeLib tests and consumers.

Building trees is not part of the library's algorithms, but every test
suite needs the same handful of shapes, so they live here.
"""

import random
from collections import deque
from typing import Deque, Optional, Sequence

from ..core.node import Node


def build_tree(values: Sequence[Optional[int]]) -> Optional[Node]:
    """Build a tree from a level-order list of values.

    None marks a missing child. Children of missing nodes are not listed,
    so [1, 2, 3, 4, 5, None, 6] is:

            1
           / \\
          2   3
         / \\   \\
        4   5   6

    Args:
        values: Level-order values, None for absent nodes

    Returns:
        Root node, or None for an empty list or a None root

    Raises:
        ValueError: If there are more values than open child slots
    """
    if not values or values[0] is None:
        return None

    root = Node(values[0])
    parents: Deque[Node] = deque([root])
    index = 1

    while index < len(values):
        if not parents:
            raise ValueError(f"Value at position {index} has no parent")
        parent = parents.popleft()

        for side in ("left", "right"):
            if index >= len(values):
                break
            value = values[index]
            index += 1
            if value is not None:
                child = Node(value)
                setattr(parent, side, child)
                parents.append(child)

    return root


def sample_tree() -> Node:
    """The six-node tree used throughout the docs and examples.

    Sum 21, minimum 1, best root-to-leaf path 1 -> 3 -> 6 = 10.
    """
    return build_tree([1, 2, 3, 4, 5, None, 6])


def chain_tree(length: int, side: str = "left", start: int = 1) -> Optional[Node]:
    """Build a degenerate tree where every node has a single child.

    Values count up from start along the chain. Useful for exercising
    depth beyond the recursion limit.

    Args:
        length: Number of nodes
        side: Which child links the chain ("left" or "right")
        start: Value of the root

    Returns:
        Root node, or None if length is 0
    """
    if side not in ("left", "right"):
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")

    root = None
    # Build bottom-up so no recursion or parent tracking is needed
    for value in range(start + length - 1, start - 1, -1):
        node = Node(value)
        setattr(node, side, root)
        root = node
    return root


def random_tree(rng: random.Random,
                size: int,
                low: int = -50,
                high: int = 50) -> Optional[Node]:
    """Build a random tree of exactly size nodes.

    Each new node is attached to a random free child slot of the nodes
    placed so far, which produces a mix of bushy and stringy shapes.

    Args:
        rng: Random source (seed it for reproducible tests)
        size: Number of nodes
        low: Smallest possible value
        high: Largest possible value

    Returns:
        Root node, or None if size is 0
    """
    if size <= 0:
        return None

    root = Node(rng.randint(low, high))
    open_slots = [(root, "left"), (root, "right")]

    for _ in range(size - 1):
        parent, side = open_slots.pop(rng.randrange(len(open_slots)))
        child = Node(rng.randint(low, high))
        setattr(parent, side, child)
        open_slots.append((child, "left"))
        open_slots.append((child, "right"))

    return root
