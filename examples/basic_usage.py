#!/usr/bin/env python3
"""
Recursive vs. iterative algorithms on the sample tree.

This example demonstrates:
- Building a small tree by hand
- Calling each variant directly
- Picking a variant through the strategy-driven API

Tree:

        1
       / \\
      2   3
     / \\   \\
    4   5   6
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from binarytreelib import Node, TraversalStrategy, includes, max_root_to_leaf_path_sum
from binarytreelib.algorithms import ALGORITHMS


def build_sample() -> Node:
    one, two, three = Node(1), Node(2), Node(3)
    four, five, six = Node(4), Node(5), Node(6)

    one.left = two
    one.right = three
    two.left = four
    two.right = five
    three.right = six

    return one


def main():
    root = build_sample()

    print("=" * 50)
    print("Each variant, called directly")
    print("=" * 50)
    for algorithm, variants in ALGORITHMS.items():
        args = (5,) if algorithm == 'includes' else ()
        for variant in variants.values():
            print(f"  {variant.__name__:<30} {variant(root, *args)}")

    print("\n" + "=" * 50)
    print("Strategy-driven API")
    print("=" * 50)
    for strategy in TraversalStrategy:
        print(f"  includes(7)        [{strategy.value:<9}] {includes(root, 7, strategy=strategy)}")
    print(f"  max path sum       [{'stack':<9}] {max_root_to_leaf_path_sum(root, strategy='stack')}")


if __name__ == "__main__":
    main()
