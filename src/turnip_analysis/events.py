"""
Traversal Events

Event types emitted by PatternTraversal.process_price(). Each event
captures a change in the set of live hypotheses for one pattern.
"""

from dataclasses import dataclass, field
from typing import Literal, Optional

from .types import Pattern


@dataclass
class TraversalEvent:
    """
    Base event from the traversal.

    Attributes:
        event_type: Discriminator for event type routing/filtering.
        step: Step that produced the event (1-based).
        pattern: Pattern the event refers to.
    """

    event_type: str
    step: int
    pattern: Pattern


@dataclass
class FrontierPrunedEvent(TraversalEvent):
    """
    Emitted when an observation discards some of a pattern's hypotheses.

    Attributes:
        event_type: Always "FRONTIER_PRUNED".
        pruned_count: Nodes whose band excluded the price.
        surviving_count: Child nodes carried into the next step.
        price: The observed price.

    Example:
        >>> event = FrontierPrunedEvent(
        ...     step=1,
        ...     pattern=Pattern.RANDOM,
        ...     pruned_count=1,
        ...     surviving_count=2,
        ...     price=102,
        ... )
        >>> event.event_type
        'FRONTIER_PRUNED'
    """

    event_type: Literal["FRONTIER_PRUNED"] = field(default="FRONTIER_PRUNED", init=False)
    pruned_count: int = 0
    surviving_count: int = 0
    price: Optional[int] = None


@dataclass
class PatternEliminatedEvent(TraversalEvent):
    """
    Emitted when the last hypothesis of a pattern is pruned.

    The pattern keeps zero mass for the rest of the traversal.

    Attributes:
        event_type: Always "PATTERN_ELIMINATED".
        price: The observed price that ruled the pattern out.
    """

    event_type: Literal["PATTERN_ELIMINATED"] = field(default="PATTERN_ELIMINATED", init=False)
    price: Optional[int] = None

    def get_explanation(self) -> str:
        return (
            f"{self.pattern.display_name} ruled out at step {self.step}: "
            f"no phase admits price {self.price}"
        )
