"""Tests for the tree builders in binarytreelib.testing."""

import random

import pytest

from binarytreelib import count_nodes, traverse_tree
from binarytreelib.testing import build_tree, chain_tree, random_tree, sample_tree


def test_sample_tree_shape():
    root = sample_tree()
    assert root.value == 1
    assert (root.left.value, root.right.value) == (2, 3)
    assert (root.left.left.value, root.left.right.value) == (4, 5)
    assert root.right.left is None
    assert root.right.right.value == 6
    assert root.right.right.is_leaf()


def test_sample_tree_is_fresh_each_call():
    assert sample_tree() is not sample_tree()


def test_build_tree_empty():
    assert build_tree([]) is None
    assert build_tree([None]) is None


def test_build_tree_level_order():
    root = build_tree([1, 2, 3, None, 4, 5])
    assert [n.value for n in traverse_tree(root)] == [1, 2, 3, 4, 5]
    assert root.left.left is None
    assert root.left.right.value == 4
    assert root.right.left.value == 5


def test_build_tree_rejects_orphans():
    with pytest.raises(ValueError, match="no parent"):
        build_tree([1, None, None, 2])


@pytest.mark.parametrize("side", ["left", "right"])
def test_chain_tree(side):
    root = chain_tree(4, side=side, start=10)
    values = []
    node = root
    while node is not None:
        values.append(node.value)
        other = node.right if side == "left" else node.left
        assert other is None
        node = getattr(node, side)
    assert values == [10, 11, 12, 13]


def test_chain_tree_bad_side():
    with pytest.raises(ValueError):
        chain_tree(3, side="up")


def test_chain_tree_empty():
    assert chain_tree(0) is None


@pytest.mark.parametrize("size", [0, 1, 2, 17, 200])
def test_random_tree_size(size):
    root = random_tree(random.Random(size), size)
    assert count_nodes(root, strategy="stack") == size


def test_random_tree_is_reproducible():
    first = random_tree(random.Random(7), 30, low=0, high=9)
    second = random_tree(random.Random(7), 30, low=0, high=9)
    first_values = [n.value for n in traverse_tree(first)]
    assert first_values == [n.value for n in traverse_tree(second)]
    assert all(0 <= value <= 9 for value in first_values)
