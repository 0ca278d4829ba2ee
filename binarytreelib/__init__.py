"""BinaryTreeLib - recursive vs. iterative binary-tree algorithms.

Every algorithm comes in one variant per traversal strategy so the
approaches can be compared side by side:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Direct:
    from binarytreelib.algorithms import includes_with_stack

Strategy-driven:
    from binarytreelib import includes
    includes(root, 5, strategy="queue")
━━━━━━━━━━━━━━━━━━━━━━━━━━

Algorithms: includes, tree_sum, min_value, max_root_to_leaf_path_sum.
"""

import logging

__version__ = "0.1.0"

from .core.node import Node
from .core.traverser import (
    TreeTraverser,
    RecursivePreOrderTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    create_traverser,
)
from .config import TraversalConfig, TraversalStrategy, DepthConfig
from .algorithms import ALGORITHMS, NO_VALUE, EmptyTreeError
from .planning import ExecutionPlan, ConfigurationError
from .api import (
    includes,
    tree_sum,
    min_value,
    max_root_to_leaf_path_sum,
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "Node",
    "TreeTraverser",
    "RecursivePreOrderTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "create_traverser",
    # Config and planning
    "TraversalConfig",
    "TraversalStrategy",
    "DepthConfig",
    "ExecutionPlan",
    "ConfigurationError",
    # Algorithms
    "ALGORITHMS",
    "NO_VALUE",
    "EmptyTreeError",
    # API
    "includes",
    "tree_sum",
    "min_value",
    "max_root_to_leaf_path_sum",
    "traverse_tree",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_paths",
    "get_tree_stats",
]
