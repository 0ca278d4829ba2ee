"""Execution planning for BinaryTreeLib.

The ExecutionPlan validates a TraversalConfig, selects the algorithm
variant (or traverser) that matches its strategy, and runs it.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .algorithms import ALGORITHMS
from .config import TraversalConfig
from .core.node import Node
from .core.traverser import TreeTraverser, create_traverser

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a configuration can't be satisfied by the requested plan."""
    pass


class ExecutionPlan:
    """Validated execution plan for an algorithm or a traversal.

    Validation happens up front, before any node is touched. A plan built
    without an algorithm can only traverse; a plan built for an algorithm
    can also execute it.

    Plans hold no per-run state, so one plan may be executed any number of
    times on any number of trees.
    """

    def __init__(self, config: TraversalConfig, algorithm: Optional[str] = None):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration
            algorithm: Name of an algorithm in ALGORITHMS, or None for a
                plain traversal plan

        Raises:
            ConfigurationError: If the configuration is invalid or the
                algorithm is unknown
        """
        self.config = config
        self.algorithm = algorithm

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        issues = self._validate_algorithm()
        if issues:
            raise ConfigurationError(
                f"Algorithm limitations: {'; '.join(issues)}"
            )

        self.traverser = self._select_traverser()
        self.variant = self._select_variant()

        logger.debug("Planned %s", self.get_summary())

    def _validate_algorithm(self) -> List[str]:
        """Check the algorithm exists and can honor the configuration.

        Returns:
            List of issues (empty if all satisfied)
        """
        issues = []

        if self.algorithm is None:
            return issues

        if self.algorithm not in ALGORITHMS:
            issues.append(
                f"unknown algorithm {self.algorithm!r}, "
                f"choose from: {', '.join(ALGORITHMS.keys())}"
            )
            return issues

        # Algorithms always cover the whole tree
        if self.config.depth.is_limited():
            issues.append(
                f"{self.algorithm} visits the whole tree and does not support depth limits"
            )

        return issues

    def _select_traverser(self) -> TreeTraverser:
        return create_traverser(self.config.strategy)

    def _select_variant(self) -> Optional[Callable]:
        if self.algorithm is None:
            return None
        return ALGORITHMS[self.algorithm][self.config.strategy]

    def execute(self, root: Optional[Node], *args: Any) -> Any:
        """Run the planned algorithm variant.

        Args:
            root: Root of the tree (None = empty tree)
            *args: Extra algorithm arguments (the search value for includes)

        Returns:
            Whatever the algorithm returns

        Raises:
            ConfigurationError: If this is a traversal-only plan
        """
        if self.variant is None:
            raise ConfigurationError("No algorithm planned; use traverse() instead")

        result = self.variant(root, *args)
        logger.debug("%s returned %r", self.variant.__name__, result)
        return result

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        """Walk the tree with the planned traverser.

        Args:
            root: Root of the tree (None = empty tree)

        Yields:
            Tuples of (node, depth) within the configured depth range
        """
        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth
        ):
            if self.config.depth.should_yield(depth):
                yield (node, depth)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.
        """
        return {
            'algorithm': self.algorithm,
            'strategy': self.config.strategy.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'traverser': self.traverser.__class__.__name__,
            'variant': self.variant.__name__ if self.variant is not None else None,
        }
