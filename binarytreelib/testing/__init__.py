"""Testing utilities for BinaryTreeLib consumers."""

from .fixtures import build_tree, chain_tree, random_tree, sample_tree

__all__ = ['build_tree', 'chain_tree', 'random_tree', 'sample_tree']
