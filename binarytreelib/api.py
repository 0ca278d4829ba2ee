"""High-level API for BinaryTreeLib.

This module provides simple, functional interfaces for the algorithms and
for common traversal operations. These functions wrap the ExecutionPlan
for ease of use in simple cases; the variant functions in
binarytreelib.algorithms can also be called directly.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from .config import DepthConfig, TraversalConfig, TraversalStrategy
from .core.node import Node
from .planning import ExecutionPlan

StrategyLike = Union[TraversalStrategy, str]


def includes(root: Optional[Node],
             value: int,
             strategy: StrategyLike = TraversalStrategy.RECURSIVE) -> bool:
    """Check whether any node in the tree holds value.

    Args:
        root: Root of the tree (None = empty tree)
        value: Value to look for
        strategy: Variant to run (recursive, queue, stack)

    Returns:
        True if found. Always False for an empty tree.

    Example:
        >>> includes(sample_tree(), 5, strategy="queue")
        True
    """
    return _plan('includes', strategy).execute(root, value)


def tree_sum(root: Optional[Node],
             strategy: StrategyLike = TraversalStrategy.RECURSIVE) -> int:
    """Sum all node values; 0 for an empty tree.

    Example:
        >>> tree_sum(sample_tree())
        21
    """
    return _plan('sum', strategy).execute(root)


def min_value(root: Optional[Node],
              strategy: StrategyLike = TraversalStrategy.RECURSIVE):
    """Find the smallest node value.

    Args:
        root: Root of the tree
        strategy: Variant to run (recursive, queue, stack)

    Returns:
        The minimum value. The recursive variant returns NO_VALUE for an
        empty tree.

    Raises:
        EmptyTreeError: If root is None and strategy is queue or stack
    """
    return _plan('min_value', strategy).execute(root)


def max_root_to_leaf_path_sum(root: Optional[Node],
                              strategy: StrategyLike = TraversalStrategy.RECURSIVE) -> int:
    """Find the largest sum along any root-to-leaf path; 0 for an empty tree.

    Example:
        >>> max_root_to_leaf_path_sum(sample_tree(), strategy="stack")
        10
    """
    return _plan('max_path_sum', strategy).execute(root)


def traverse_tree(
    root: Optional[Node],
    strategy: StrategyLike = TraversalStrategy.QUEUE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal (None = empty tree)
        strategy: recursive/stack (pre-order) or queue (level order)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes

    Yields:
        Nodes in traversal order

    Example:
        >>> [n.value for n in traverse_tree(sample_tree(), max_depth=1)]
        [1, 2, 3]
    """
    config = TraversalConfig(
        strategy=TraversalStrategy.parse(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
    )
    plan = ExecutionPlan(config)

    for node, _ in plan.traverse(root):
        yield node


def count_nodes(root: Optional[Node], **kwargs) -> int:
    """Count nodes in a tree that fall within the traversal options.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes visited
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(
    root: Optional[Node],
    predicate: Callable[[Node], bool],
    **kwargs
) -> Iterator[Node]:
    """Find nodes that match a predicate.

    Example:
        >>> [n.value for n in find_nodes(sample_tree(), lambda n: n.value % 2 == 0)]
        [2, 4, 6]
    """
    for node in traverse_tree(root, **kwargs):
        if predicate(node):
            yield node


def get_leaf_nodes(root: Optional[Node], **kwargs) -> Iterator[Node]:
    """Get all leaf nodes in a tree.

    Yields:
        Leaf nodes (nodes with no children)
    """
    for node in traverse_tree(root, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_paths(root: Optional[Node]) -> Iterator[List[int]]:
    """Get the values along every root-to-leaf path, left to right.

    Example:
        >>> list(get_tree_paths(sample_tree()))
        [[1, 2, 4], [1, 2, 5], [1, 3, 6]]
    """
    if root is None:
        return

    # Each entry carries its own path so no backtracking is needed
    stack = [(root, [root.value])]

    while stack:
        node, path = stack.pop()

        if node.is_leaf():
            yield path
            continue

        if node.right is not None:
            stack.append((node.right, path + [node.right.value]))
        if node.left is not None:
            stack.append((node.left, path + [node.left.value]))


def get_tree_stats(root: Optional[Node]) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes,
        max_depth and a depths histogram ({depth: node count})

    Example:
        >>> stats = get_tree_stats(sample_tree())
        >>> stats['total_nodes'], stats['leaf_nodes']
        (6, 3)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    plan = ExecutionPlan(TraversalConfig.breadth_first())

    for node, depth in plan.traverse(root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    return stats


# Helper functions

def _plan(algorithm: str, strategy: StrategyLike) -> ExecutionPlan:
    """Build a plan for one algorithm run."""
    config = TraversalConfig(strategy=TraversalStrategy.parse(strategy))
    return ExecutionPlan(config, algorithm)
