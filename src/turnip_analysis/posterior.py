"""
Posterior Aggregator

Combines per-pattern likelihood (surviving traversal mass) with the
prior via Bayes' rule and normalises across the four patterns.
"""

import math
from typing import List, Mapping, Optional, Sequence

from .errors import InconsistentObservationsError
from .types import Pattern, PatternResult


_PATTERN_ORDER = {pattern: index for index, pattern in enumerate(Pattern)}


def sort_results(results: Sequence[PatternResult]) -> List[PatternResult]:
    """Most likely first; ties keep pattern declaration order."""
    return sorted(
        results,
        key=lambda r: (-r.probability, _PATTERN_ORDER[r.pattern]),
    )


class PosteriorAggregator:
    """Stateless Bayes combination of priors and likelihoods."""

    def aggregate(
        self,
        prior: Mapping[Pattern, float],
        masses: Mapping[Pattern, float],
        base_price: Optional[int] = None,
        prices: Optional[Sequence[Optional[int]]] = None,
    ) -> List[PatternResult]:
        """
        Normalised posterior for every pattern in the prior.

        Args:
            prior: Prior probability per pattern.
            masses: Surviving traversal mass per pattern. Missing patterns
                count as zero.
            base_price: Reported in the error if nothing survives.
            prices: Reported in the error if nothing survives.

        Returns:
            One PatternResult per pattern, most likely first.

        Raises:
            InconsistentObservationsError: If every pattern has zero
                posterior mass.
        """
        raw = {
            pattern: probability * masses.get(pattern, 0.0)
            for pattern, probability in prior.items()
        }
        total = math.fsum(raw.values())
        if total <= 0.0:
            raise InconsistentObservationsError(
                base_price=base_price,
                prices=prices or [],
            )
        return sort_results([
            PatternResult(pattern=pattern, probability=value / total)
            for pattern, value in raw.items()
        ])

    def from_prior(self, prior: Mapping[Pattern, float]) -> List[PatternResult]:
        """The prior itself as a result list (no observations)."""
        return sort_results([
            PatternResult(pattern=pattern, probability=probability)
            for pattern, probability in prior.items()
        ])
