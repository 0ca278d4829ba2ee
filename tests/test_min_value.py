"""Tests for minimum-value discovery.

The recursive variant tolerates an empty tree (returning the NO_VALUE
sentinel) while the iterative variants reject it. Both behaviors are
pinned down here.
"""

import math

import pytest

from binarytreelib import Node, NO_VALUE, EmptyTreeError
from binarytreelib.algorithms import (
    min_value_with_recursion,
    min_value_with_queue,
    min_value_with_stack,
)
from binarytreelib.testing import build_tree, chain_tree, sample_tree


ALL_VARIANTS = [min_value_with_recursion, min_value_with_queue, min_value_with_stack]
ITERATIVE_VARIANTS = [min_value_with_queue, min_value_with_stack]


@pytest.mark.parametrize("min_value", ALL_VARIANTS)
def test_sample_tree(min_value):
    assert min_value(sample_tree()) == 1


@pytest.mark.parametrize("min_value", ALL_VARIANTS)
def test_minimum_deep_in_tree(min_value):
    root = build_tree([5, 8, 9, None, 7, 6, None, -2])
    assert min_value(root) == -2


@pytest.mark.parametrize("min_value", ALL_VARIANTS)
def test_single_node(min_value):
    assert min_value(Node(42)) == 42


@pytest.mark.parametrize("min_value", ALL_VARIANTS)
def test_values_beyond_machine_word(min_value):
    """Python ints are unbounded; the sentinel must still lose."""
    huge = 2 ** 80
    root = Node(huge, Node(huge + 1), Node(huge + 2))
    assert min_value(root) == huge


@pytest.mark.parametrize("min_value", ALL_VARIANTS)
def test_result_is_int(min_value):
    assert isinstance(min_value(sample_tree()), int)


def test_recursive_variant_returns_sentinel_for_empty_tree():
    assert min_value_with_recursion(None) is NO_VALUE
    assert min_value_with_recursion(None) == math.inf


@pytest.mark.parametrize("min_value", ITERATIVE_VARIANTS)
def test_iterative_variants_reject_empty_tree(min_value):
    with pytest.raises(EmptyTreeError):
        min_value(None)


def test_empty_tree_error_is_value_error():
    with pytest.raises(ValueError, match="cannot be None"):
        min_value_with_stack(None)


@pytest.mark.parametrize("min_value", ITERATIVE_VARIANTS)
def test_iterative_variants_handle_deep_trees(min_value):
    assert min_value(chain_tree(5000, start=-10)) == -10
