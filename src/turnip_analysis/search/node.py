"""
SearchNode data structure for the traversal layer.

A node is one hypothesis about the step that has not been observed yet:
"pattern P, in phase i, with this admissible price band, carrying this
much probability mass".
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..types import Pattern


@dataclass(frozen=True)
class SearchNode:
    """
    A live traversal hypothesis.

    Attributes:
        pattern: Pattern this hypothesis belongs to.
        phase_index: Index into the pattern's phases, or None once the
            period has been fully accounted for.
        min_len: Minimum remaining steps in the phase, counting this one.
        max_len: Maximum remaining steps in the phase, counting this one.
        min_factor: Lowest admissible price factor for this step.
        max_factor: Highest admissible price factor for this step.
        mass: Share of the pattern's probability space still consistent
            with every observation so far (prior not applied).
        length: Steps spent in the phase, counting this one.
        lengths: Lengths of the completed phases, in phase order.
    """
    pattern: Pattern
    phase_index: Optional[int]
    min_len: int
    max_len: int
    min_factor: float
    max_factor: float
    mass: float
    length: int = 1
    lengths: Tuple[int, ...] = ()

    @property
    def is_complete(self) -> bool:
        """True once every phase of the period has ended."""
        return self.phase_index is None

    @property
    def interval(self) -> Tuple[float, float]:
        return self.min_factor, self.max_factor

    def describe(self, phase_name: str = "") -> str:
        """Multi-line dump for debug logging."""
        return (
            f"{self.pattern.display_name} {self.mass:.4f}\n"
            f"{phase_name or 'Complete'}\n"
            f"Length: {self.length}\n"
            f"Remaining Length: ({self.min_len}, {self.max_len})\n"
            f"Previous Lengths: {list(self.lengths)}\n"
            f"Factors: ({self.min_factor:.4f}, {self.max_factor:.4f})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "pattern": self.pattern.value,
            "phase_index": self.phase_index,
            "min_len": self.min_len,
            "max_len": self.max_len,
            "min_factor": self.min_factor,
            "max_factor": self.max_factor,
            "mass": self.mass,
            "length": self.length,
            "lengths": list(self.lengths),
        }
