"""
Prior Table

Probability of each pattern given last week's pattern. When last week's
pattern is unknown the marginal row is used.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .types import Pattern


_UNKNOWN_ROW = {
    Pattern.DECREASING: 0.15,
    Pattern.RANDOM: 0.35,
    Pattern.SMALL_SPIKE: 0.25,
    Pattern.LARGE_SPIKE: 0.25,
}

_TRANSITIONS = {
    Pattern.DECREASING: {
        Pattern.DECREASING: 0.05,
        Pattern.RANDOM: 0.25,
        Pattern.SMALL_SPIKE: 0.25,
        Pattern.LARGE_SPIKE: 0.45,
    },
    Pattern.RANDOM: {
        Pattern.DECREASING: 0.15,
        Pattern.RANDOM: 0.20,
        Pattern.SMALL_SPIKE: 0.35,
        Pattern.LARGE_SPIKE: 0.30,
    },
    Pattern.SMALL_SPIKE: {
        Pattern.DECREASING: 0.15,
        Pattern.RANDOM: 0.45,
        Pattern.SMALL_SPIKE: 0.15,
        Pattern.LARGE_SPIKE: 0.25,
    },
    Pattern.LARGE_SPIKE: {
        Pattern.DECREASING: 0.20,
        Pattern.RANDOM: 0.50,
        Pattern.SMALL_SPIKE: 0.25,
        Pattern.LARGE_SPIKE: 0.05,
    },
}


class PriorTable:
    """
    Read-only lookup of pattern priors.

    Rows are keyed by the previous pattern; None is the unknown row.
    """

    def __init__(
        self,
        unknown: Mapping[Pattern, float],
        transitions: Mapping[Pattern, Mapping[Pattern, float]],
    ):
        self._rows = MappingProxyType({
            None: MappingProxyType(dict(unknown)),
            **{prev: MappingProxyType(dict(row)) for prev, row in transitions.items()},
        })

    def distribution(self, previous: Optional[Pattern] = None) -> Dict[Pattern, float]:
        """
        Prior over this period's patterns.

        Args:
            previous: Last period's pattern, or None if unknown.

        Returns:
            A new dict mapping every pattern to its prior probability.
        """
        return dict(self._rows[previous])

    def prior(self, pattern: Pattern, previous: Optional[Pattern] = None) -> float:
        return self._rows[previous][pattern]

    def rows(self) -> Dict[Optional[Pattern], Dict[Pattern, float]]:
        return {prev: dict(row) for prev, row in self._rows.items()}

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Convert to a JSON-friendly dict; the unknown row is keyed 'unknown'."""
        return {
            (prev.value if prev is not None else "unknown"): {
                pattern.value: probability for pattern, probability in row.items()
            }
            for prev, row in self._rows.items()
        }


PRIOR_TABLE = PriorTable(_UNKNOWN_ROW, _TRANSITIONS)
