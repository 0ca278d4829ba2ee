"""Binary-tree algorithms, one variant per traversal strategy.

ALGORITHMS maps an algorithm name to its variants keyed by
TraversalStrategy. The ExecutionPlan uses it to pick the function to run.
"""

from typing import Callable, Dict

from ..config import TraversalStrategy
from .includes import (
    includes_with_recursion,
    includes_with_queue,
    includes_with_stack,
)
from .tree_sum import (
    sum_with_recursion,
    sum_with_queue,
    sum_with_stack,
)
from .min_value import (
    NO_VALUE,
    EmptyTreeError,
    min_value_with_recursion,
    min_value_with_queue,
    min_value_with_stack,
)
from .max_path_sum import (
    max_path_sum_with_recursion,
    max_path_sum_with_queue,
    max_path_sum_with_stack,
)


ALGORITHMS: Dict[str, Dict[TraversalStrategy, Callable]] = {
    'includes': {
        TraversalStrategy.RECURSIVE: includes_with_recursion,
        TraversalStrategy.QUEUE: includes_with_queue,
        TraversalStrategy.STACK: includes_with_stack,
    },
    'sum': {
        TraversalStrategy.RECURSIVE: sum_with_recursion,
        TraversalStrategy.QUEUE: sum_with_queue,
        TraversalStrategy.STACK: sum_with_stack,
    },
    'min_value': {
        TraversalStrategy.RECURSIVE: min_value_with_recursion,
        TraversalStrategy.QUEUE: min_value_with_queue,
        TraversalStrategy.STACK: min_value_with_stack,
    },
    'max_path_sum': {
        TraversalStrategy.RECURSIVE: max_path_sum_with_recursion,
        TraversalStrategy.QUEUE: max_path_sum_with_queue,
        TraversalStrategy.STACK: max_path_sum_with_stack,
    },
}


__all__ = [
    'ALGORITHMS',
    'NO_VALUE',
    'EmptyTreeError',
    'includes_with_recursion',
    'includes_with_queue',
    'includes_with_stack',
    'sum_with_recursion',
    'sum_with_queue',
    'sum_with_stack',
    'min_value_with_recursion',
    'min_value_with_queue',
    'min_value_with_stack',
    'max_path_sum_with_recursion',
    'max_path_sum_with_queue',
    'max_path_sum_with_stack',
]
