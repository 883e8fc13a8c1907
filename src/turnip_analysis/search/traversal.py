"""
Breadth-first traversal over the pattern phase graphs.

Processes observed prices incrementally. Each call to process_price()
replaces every pattern's frontier with the surviving children of its
nodes and returns the events produced by that step.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional

from ..analysis_config import AnalysisConfig
from ..errors import InvalidInputError
from ..events import FrontierPrunedEvent, PatternEliminatedEvent, TraversalEvent
from ..patterns.table import PATTERN_TABLE
from ..types import Pattern
from .expander import NodeExpander
from .node import SearchNode

logger = logging.getLogger(__name__)


class PatternTraversal:
    """
    Incremental frontier expansion for all four patterns.

    Frontiers are kept per pattern; patterns never share nodes, so each
    one's mass can be read independently.

    Example:
        >>> traversal = PatternTraversal(base_price=95)
        >>> for price in [102, 127]:
        ...     events = traversal.process_price(price)
        >>> traversal.masses()[Pattern.LARGE_SPIKE]
        0.0
    """

    def __init__(
        self,
        base_price: int,
        config: Optional[AnalysisConfig] = None,
        patterns: Optional[Iterable[Pattern]] = None,
    ):
        """
        Seed the root nodes of each pattern.

        Args:
            base_price: The period's reference price.
            config: Analysis configuration (defaults to AnalysisConfig.default()).
            patterns: Patterns to traverse (defaults to all four).
        """
        self.base_price = base_price
        self.config = config or AnalysisConfig.default()
        self.expander = NodeExpander(base_price, self.config)
        self.step = 0
        self.frontiers: Dict[Pattern, List[SearchNode]] = {}
        for pattern in (patterns if patterns is not None else list(Pattern)):
            self.frontiers[pattern] = self.expander.seed(PATTERN_TABLE[pattern])

    def process_price(self, price: Optional[int]) -> List[TraversalEvent]:
        """
        Advance every frontier by one observed step.

        Args:
            price: Observed price, or None for a missed step.

        Returns:
            Events for patterns that lost hypotheses at this step.

        Raises:
            InvalidInputError: If the period has no steps left.
        """
        if self.step >= self.config.period_length:
            raise InvalidInputError(
                f"Period has only {self.config.period_length} steps; "
                f"cannot process another price"
            )
        self.step += 1

        events: List[TraversalEvent] = []
        for pattern, frontier in self.frontiers.items():
            if not frontier:
                continue

            spec = PATTERN_TABLE[pattern]
            children: List[SearchNode] = []
            pruned = 0
            for node in frontier:
                expanded = self.expander.expand(spec, node, price)
                if not expanded:
                    pruned += 1
                children.extend(expanded)
            self.frontiers[pattern] = children

            if pruned:
                events.append(FrontierPrunedEvent(
                    step=self.step,
                    pattern=pattern,
                    pruned_count=pruned,
                    surviving_count=len(children),
                    price=price,
                ))
            if not children:
                logger.info(
                    f"Step {self.step}: {pattern.display_name} ruled out by price {price}"
                )
                events.append(PatternEliminatedEvent(
                    step=self.step,
                    pattern=pattern,
                    price=price,
                ))

        logger.debug(
            f"Step {self.step} (price={price}): "
            + ", ".join(
                f"{p.display_name}={len(nodes)}" for p, nodes in self.frontiers.items()
            )
        )
        return events

    def process_prices(self, prices: Iterable[Optional[int]]) -> List[TraversalEvent]:
        """process_price() in a loop; returns all events in order."""
        events: List[TraversalEvent] = []
        for price in prices:
            events.extend(self.process_price(price))
        return events

    def masses(self) -> Dict[Pattern, float]:
        """Surviving probability mass per pattern (prior not applied)."""
        return {
            pattern: math.fsum(node.mass for node in frontier)
            for pattern, frontier in self.frontiers.items()
        }

    def frontier(self, pattern: Pattern) -> List[SearchNode]:
        return list(self.frontiers.get(pattern, []))

    def node_count(self) -> int:
        return sum(len(frontier) for frontier in self.frontiers.values())

    def live_patterns(self) -> List[Pattern]:
        return [pattern for pattern, frontier in self.frontiers.items() if frontier]

    def dump_frontier(self, level: int = logging.DEBUG) -> None:
        """Log every live node (the CLI's --debug dump)."""
        if not logger.isEnabledFor(level):
            return
        for pattern, frontier in self.frontiers.items():
            spec = PATTERN_TABLE[pattern]
            for node in frontier:
                name = spec.phase(node.phase_index).name if not node.is_complete else ""
                logger.log(level, "\n" + node.describe(name))

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "base_price": self.base_price,
            "step": self.step,
            "frontiers": {
                pattern.value: [node.to_dict() for node in frontier]
                for pattern, frontier in self.frontiers.items()
            },
        }
