"""Configuration system for BinaryTreeLib.

This module defines how users pick which variant of an algorithm runs
(recursive, queue-based or stack-based) and, for plain traversals, which
depths to visit.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class TraversalStrategy(Enum):
    """How to walk the tree.

    Every algorithm ships one variant per strategy; results never depend
    on the strategy, only the order nodes are visited in does.
    """
    RECURSIVE = "recursive"     # Call stack, pre-order
    QUEUE = "queue"             # Explicit FIFO, breadth-first
    STACK = "stack"             # Explicit LIFO, depth-first pre-order

    @classmethod
    def parse(cls, strategy: Union["TraversalStrategy", str]) -> "TraversalStrategy":
        """Parse strategy from string or enum.

        Args:
            strategy: Strategy as enum or string

        Returns:
            TraversalStrategy enum value

        Raises:
            ValueError: If the name is not recognized
        """
        if isinstance(strategy, cls):
            return strategy

        # Map string names (and the traversal-order aliases) to enum values
        strategy_map = {
            'recursive': cls.RECURSIVE,
            'recursion': cls.RECURSIVE,
            'queue': cls.QUEUE,
            'bfs': cls.QUEUE,
            'breadth_first': cls.QUEUE,
            'stack': cls.STACK,
            'dfs': cls.STACK,
            'depth_first': cls.STACK,
        }

        strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
        if strategy_lower in strategy_map:
            return strategy_map[strategy_lower]

        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategy_map.keys())}"
        )


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering of traversals."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def is_limited(self) -> bool:
        """Check if this config restricts the traversal at all."""
        return self.min_depth != 0 or self.max_depth is not None

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children at this depth should be explored."""
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for running an algorithm or traversal.

    The ExecutionPlan validates this configuration before anything runs.
    Depth limits only make sense for plain traversals; the whole-tree
    algorithms reject them.
    """

    strategy: TraversalStrategy = TraversalStrategy.RECURSIVE
    depth: DepthConfig = field(default_factory=DepthConfig)

    @classmethod
    def breadth_first(cls) -> 'TraversalConfig':
        """Create config for queue-based, level-by-level processing."""
        return cls(strategy=TraversalStrategy.QUEUE)

    @classmethod
    def depth_first(cls) -> 'TraversalConfig':
        """Create config for stack-based processing (no recursion limit)."""
        return cls(strategy=TraversalStrategy.STACK)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        return errors
