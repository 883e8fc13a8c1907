"""
Pattern analysis entry points.

compute() is the single operation the rest of the system calls: it
validates the inputs, runs the traversal over the observed prices and
returns the posterior distribution. PatternAnalyzer is the incremental
object behind it, for callers that feed prices one at a time.
"""

import logging
import numbers
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .analysis_config import AnalysisConfig
from .errors import InconsistentObservationsError, InvalidInputError
from .events import TraversalEvent
from .posterior import PosteriorAggregator
from .priors import PRIOR_TABLE, PriorTable
from .search.traversal import PatternTraversal
from .types import Checkpoint, Pattern, PatternResult

logger = logging.getLogger(__name__)

PatternLike = Union[Pattern, str, None]


# ============================================================================
# Input validation
# ============================================================================


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_base_price(base_price: Any, config: AnalysisConfig) -> int:
    """
    Check the base price is an integer inside the configured range.

    Raises:
        InvalidInputError: If it is not.
    """
    if not _is_integer(base_price):
        raise InvalidInputError(f"Base price must be an integer, got {base_price!r}")
    if not config.min_base_price <= base_price <= config.max_base_price:
        raise InvalidInputError(
            f"Base price {base_price} is outside the range "
            f"{config.min_base_price}-{config.max_base_price}"
        )
    return int(base_price)


def validate_price(price: Any) -> Optional[int]:
    """None (missed step) or a non-negative integer."""
    if price is None:
        return None
    if not _is_integer(price) or price < 0:
        raise InvalidInputError(
            f"Prices must be non-negative integers or None, got {price!r}"
        )
    return int(price)


def validate_prices(prices: Iterable[Any], config: AnalysisConfig) -> List[Optional[int]]:
    """
    Validate a whole observation sequence.

    Raises:
        InvalidInputError: On a bad price or more prices than the period has.
    """
    if prices is None:
        return []
    if isinstance(prices, (str, bytes)):
        raise InvalidInputError("Prices must be a sequence, not a string")
    validated = [validate_price(price) for price in prices]
    if len(validated) > config.period_length:
        raise InvalidInputError(
            f"Got {len(validated)} prices but a period has only "
            f"{config.period_length} steps"
        )
    return validated


def validate_previous_pattern(previous: PatternLike) -> Optional[Pattern]:
    """None, a Pattern, or a pattern name."""
    if previous is None:
        return None
    try:
        return Pattern.parse(previous)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e


# ============================================================================
# Incremental analyzer
# ============================================================================


class PatternAnalyzer:
    """
    Incremental posterior over the four patterns.

    Example:
        >>> analyzer = PatternAnalyzer(base_price=95, previous_pattern=Pattern.LARGE_SPIKE)
        >>> events = analyzer.process_price(102)
        >>> events = analyzer.process_price(127)
        >>> [r.pattern for r in analyzer.posterior()][:2]
        [<Pattern.RANDOM: 'random'>, <Pattern.SMALL_SPIKE: 'smallspike'>]
    """

    def __init__(
        self,
        base_price: int,
        previous_pattern: PatternLike = None,
        config: Optional[AnalysisConfig] = None,
        prior_table: PriorTable = PRIOR_TABLE,
    ):
        """
        Validate the period inputs and seed the traversal.

        Raises:
            InvalidInputError: On a bad base price or previous pattern.
        """
        self.config = config or AnalysisConfig.default()
        self.base_price = validate_base_price(base_price, self.config)
        self.previous_pattern = validate_previous_pattern(previous_pattern)
        self.prior = prior_table.distribution(self.previous_pattern)
        self.traversal = PatternTraversal(self.base_price, self.config)
        self.aggregator = PosteriorAggregator()
        self.prices: List[Optional[int]] = []
        # Step at which the last pattern was ruled out, if any
        self.inconsistent_at: Optional[int] = None

    def process_price(self, price: Optional[int]) -> List[TraversalEvent]:
        """
        Consume the next observed price.

        Raises:
            InvalidInputError: On a bad price or when the period is full.
        """
        price = validate_price(price)
        if len(self.prices) >= self.config.period_length:
            raise InvalidInputError(
                f"A period has only {self.config.period_length} steps"
            )
        events = self.traversal.process_price(price)
        self.prices.append(price)
        if self.inconsistent_at is None and not self.traversal.live_patterns():
            self.inconsistent_at = len(self.prices)
            logger.info(
                f"Base price {self.base_price}, prices {self.prices}: "
                f"no pattern matches"
            )
        return events

    def process_prices(self, prices: Iterable[Optional[int]]) -> List[TraversalEvent]:
        events: List[TraversalEvent] = []
        for price in prices:
            events.extend(self.process_price(price))
        return events

    def masses(self) -> Dict[Pattern, float]:
        """Per-pattern likelihood of the prices seen so far."""
        return self.traversal.masses()

    @property
    def is_consistent(self) -> bool:
        return self.inconsistent_at is None

    def posterior(self) -> List[PatternResult]:
        """
        Current posterior, most likely pattern first.

        With no prices observed this is the prior itself.

        Raises:
            InconsistentObservationsError: If every pattern is ruled out.
        """
        if not self.prices:
            return self.aggregator.from_prior(self.prior)
        if not self.is_consistent:
            raise InconsistentObservationsError(
                base_price=self.base_price,
                prices=self.prices,
                step=self.inconsistent_at,
            )
        return self.aggregator.aggregate(
            self.prior,
            self.masses(),
            base_price=self.base_price,
            prices=self.prices,
        )

    def checkpoint(self) -> Checkpoint:
        """Posterior after the most recent step, without raising."""
        step = len(self.prices)
        price = self.prices[-1] if self.prices else None
        try:
            results = self.posterior()
        except InconsistentObservationsError:
            return Checkpoint(step=step, price=price, results=None, consistent=False)
        return Checkpoint(step=step, price=price, results=tuple(results))

    def snapshot(self) -> Dict[str, Any]:
        """Serializable view of the analyzer, frontier included."""
        return {
            "previous_pattern": (
                self.previous_pattern.value if self.previous_pattern else None
            ),
            "prices": list(self.prices),
            "prior": {p.value: v for p, v in self.prior.items()},
            "masses": {p.value: v for p, v in self.masses().items()},
            "traversal": self.traversal.to_dict(),
        }


# ============================================================================
# Public operation
# ============================================================================


def compute(
    base_price: int,
    observed_prices: Sequence[Optional[int]] = (),
    previous_pattern: PatternLike = None,
    config: Optional[AnalysisConfig] = None,
    debug: bool = False,
) -> List[PatternResult]:
    """
    Posterior probability of each pattern given the observed prices.

    Args:
        base_price: The period's buy price.
        observed_prices: Prices in step order; None marks a missed step.
        previous_pattern: Last period's pattern (Pattern or name), if known.
        config: Analysis configuration (defaults to AnalysisConfig.default()).
        debug: Log the final frontier at DEBUG level.

    Returns:
        Four PatternResults, most likely first, summing to 1.

    Raises:
        InvalidInputError: On malformed inputs, before any traversal.
        InconsistentObservationsError: If no pattern explains the prices.

    Example:
        >>> results = compute(95, [102, 127], previous_pattern="largespike")
        >>> results[0].pattern
        <Pattern.RANDOM: 'random'>
    """
    config = config or AnalysisConfig.default()
    prices = validate_prices(observed_prices, config)
    analyzer = PatternAnalyzer(base_price, previous_pattern, config)

    analyzer.process_prices(prices)
    if debug:
        analyzer.traversal.dump_frontier()
    return analyzer.posterior()


def compute_checkpoints(
    base_price: int,
    observed_prices: Sequence[Optional[int]] = (),
    previous_pattern: PatternLike = None,
    config: Optional[AnalysisConfig] = None,
) -> List[Checkpoint]:
    """
    Posterior after each observed step.

    Inconsistency does not raise here; the affected checkpoints have
    consistent=False and results=None.

    Raises:
        InvalidInputError: On malformed inputs, before any traversal.
    """
    config = config or AnalysisConfig.default()
    prices = validate_prices(observed_prices, config)
    analyzer = PatternAnalyzer(base_price, previous_pattern, config)

    checkpoints = []
    for price in prices:
        analyzer.process_price(price)
        checkpoints.append(analyzer.checkpoint())
    return checkpoints
