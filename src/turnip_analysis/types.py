"""Core data types for turnip pattern analysis."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Pattern(Enum):
    """
    The four weekly price patterns.

    Values are the names accepted on the command line and in the API.
    """
    DECREASING = "decreasing"
    RANDOM = "random"
    SMALL_SPIKE = "smallspike"
    LARGE_SPIKE = "largespike"

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. 'SmallSpike'."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: Union["Pattern", str]) -> "Pattern":
        """
        Parse a pattern from its name.

        Matching is case-insensitive and ignores '_', '-' and spaces, so
        'SmallSpike', 'small_spike' and 'smallspike' are all accepted.

        Raises:
            ValueError: If the name is not one of the four patterns.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Not a pattern name: {value!r}")
        key = value.strip().lower().replace("_", "").replace("-", "").replace(" ", "")
        for pattern in cls:
            if pattern.value == key:
                return pattern
        raise ValueError(
            f"Unknown pattern '{value}'. Expected one of: "
            + ", ".join(p.value for p in cls)
        )


_DISPLAY_NAMES = {
    Pattern.DECREASING: "Decreasing",
    Pattern.RANDOM: "Random",
    Pattern.SMALL_SPIKE: "SmallSpike",
    Pattern.LARGE_SPIKE: "LargeSpike",
}


@dataclass(frozen=True)
class PatternResult:
    """Posterior probability of one pattern."""
    pattern: Pattern
    probability: float

    @property
    def percent(self) -> float:
        return self.probability * 100.0


@dataclass(frozen=True)
class Checkpoint:
    """
    Posterior after a given number of observed steps.

    Attributes:
        step: Number of prices consumed (1-based).
        price: The price observed at this step (None if missed).
        results: Posterior distribution, or None when inconsistent.
        consistent: False once every pattern has been ruled out.
    """
    step: int
    price: Optional[int]
    results: Optional[tuple]
    consistent: bool = True
