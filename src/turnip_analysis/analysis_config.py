"""
Analysis Configuration

Centralized configuration for the pattern analysis engine. Pattern phase
constants and priors are fixed game mechanics and live in
patterns/table.py and priors.py; only the numeric handling around them is
configurable here.
"""

from dataclasses import dataclass, replace

from .constants import (
    FLOAT_TOLERANCE,
    HALF_DAYS_PER_WEEK,
    MAX_BASE_PRICE,
    MIN_BASE_PRICE,
)


@dataclass(frozen=True)
class AnalysisConfig:
    """
    All configurable parameters for pattern analysis.

    Attributes:
        period_length: Number of price steps in a period. Observation
            sequences longer than this are rejected. Default 12.
        float_tolerance: Slack when comparing a price's factor bounds with a
            phase's admissible interval. Default 0.0001.
        min_base_price: Lowest accepted base price. Default 90.
        max_base_price: Highest accepted base price. Default 110.

    Example:
        >>> config = AnalysisConfig.default()
        >>> config.period_length
        12
    """
    period_length: int = HALF_DAYS_PER_WEEK
    float_tolerance: float = FLOAT_TOLERANCE
    min_base_price: int = MIN_BASE_PRICE
    max_base_price: int = MAX_BASE_PRICE

    @classmethod
    def default(cls) -> "AnalysisConfig":
        """Create a config with default values."""
        return cls()

    def with_base_price_range(
        self,
        min_base_price: int = None,
        max_base_price: int = None,
    ) -> "AnalysisConfig":
        """
        Create a new config with a modified accepted base price range.

        Since AnalysisConfig is frozen, this creates a new instance.
        Only provided bounds are modified.
        """
        return replace(
            self,
            min_base_price=(
                min_base_price if min_base_price is not None else self.min_base_price
            ),
            max_base_price=(
                max_base_price if max_base_price is not None else self.max_base_price
            ),
        )

    def with_float_tolerance(self, float_tolerance: float) -> "AnalysisConfig":
        """
        Create a new config with a modified comparison tolerance.

        Since AnalysisConfig is frozen, this creates a new instance.
        """
        return replace(self, float_tolerance=float_tolerance)
