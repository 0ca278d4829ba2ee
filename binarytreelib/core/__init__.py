"""Core abstractions for BinaryTreeLib.

This module contains the tree node and the generic traversers that walk it.
"""

from .node import Node
from .traverser import (
    TreeTraverser,
    RecursivePreOrderTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    create_traverser,
)

__all__ = [
    "Node",
    "TreeTraverser",
    "RecursivePreOrderTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "create_traverser",
]
