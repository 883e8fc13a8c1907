"""
Pattern Phase Table

Phase graphs for the four weekly patterns. The constants are the
reverse-engineered Animal Crossing: New Horizons turnip price mechanics
and must not be tuned.

Factors are multiples of the Sunday base price. A sell price is
ceil(base_price * factor).
"""

from typing import Dict, Tuple

from ..constants import HALF_DAYS_PER_WEEK
from ..types import Pattern
from .phase import LengthRule, PatternSpec, PhaseEntry, PhaseSpec


def _spike_chain(
    bands: Tuple[Tuple[float, float], ...],
    first_index: int,
) -> Tuple[PhaseSpec, ...]:
    """Single-step spike phases, each leading to the next."""
    phases = []
    for offset, (low, high) in enumerate(bands):
        phases.append(PhaseSpec(
            name=f"Spike {offset + 1}",
            min_factor=low,
            max_factor=high,
            length=LengthRule.fixed(1),
            successor=first_index + offset + 1,
        ))
    return tuple(phases)


DECREASING_SPEC = PatternSpec(
    pattern=Pattern.DECREASING,
    phases=(
        PhaseSpec(
            name="Decreasing",
            min_factor=0.85,
            max_factor=0.90,
            length=LengthRule.remainder(),
            decrement=(0.03, 0.05),
        ),
    ),
    entries=(PhaseEntry(phase=0, weight=1.0),),
)


# Increasing 1 lasts 0-6 steps. Increasing 1 and 2 share 7 steps, with
# Increasing 2 taking at least one. Decreasing 1 and 2 share 5 steps.
RANDOM_SPEC = PatternSpec(
    pattern=Pattern.RANDOM,
    phases=(
        PhaseSpec(
            name="Increasing 1",
            min_factor=0.90,
            max_factor=1.40,
            length=LengthRule.fixed(1, 6),
            successor=1,
        ),
        PhaseSpec(
            name="Decreasing 1",
            min_factor=0.60,
            max_factor=0.80,
            length=LengthRule.fixed(2, 3),
            decrement=(0.04, 0.10),
            successor=2,
        ),
        PhaseSpec(
            name="Increasing 2",
            min_factor=0.90,
            max_factor=1.40,
            length=LengthRule.bounded_complement(ref_phase=0, total=7, min_len=1),
            successor=3,
        ),
        PhaseSpec(
            name="Decreasing 2",
            min_factor=0.60,
            max_factor=0.80,
            length=LengthRule.complement(ref_phase=1, total=5),
            decrement=(0.04, 0.10),
            successor=4,
        ),
        PhaseSpec(
            name="Increasing 3",
            min_factor=0.90,
            max_factor=1.40,
            length=LengthRule.remainder(),
        ),
    ),
    entries=(
        # Increasing 1 occurs with length 1-6 (6 of 7 cases) ...
        PhaseEntry(phase=0, weight=6.0 / 7.0),
        # ... or is skipped entirely (length 0).
        PhaseEntry(phase=1, weight=1.0 / 7.0, skipped=(0,)),
    ),
)


SMALL_SPIKE_SPEC = PatternSpec(
    pattern=Pattern.SMALL_SPIKE,
    phases=(
        PhaseSpec(
            name="Decreasing",
            min_factor=0.40,
            max_factor=0.90,
            length=LengthRule.fixed(1, 7),
            decrement=(0.03, 0.05),
            successor=1,
        ),
    ) + _spike_chain(
        ((0.90, 1.40), (0.90, 1.40), (1.40, 2.00), (1.40, 2.00), (1.40, 2.00)),
        first_index=1,
    ) + (
        PhaseSpec(
            name="Final Decreasing",
            min_factor=0.40,
            max_factor=0.90,
            length=LengthRule.remainder(),
            decrement=(0.03, 0.05),
        ),
    ),
    entries=(
        # Initial decrease of 1-7 steps (7 of 8 cases) or none at all.
        PhaseEntry(phase=0, weight=7.0 / 8.0),
        PhaseEntry(phase=1, weight=1.0 / 8.0, skipped=(0,)),
    ),
)


LARGE_SPIKE_SPEC = PatternSpec(
    pattern=Pattern.LARGE_SPIKE,
    phases=(
        PhaseSpec(
            name="Decreasing",
            min_factor=0.85,
            max_factor=0.90,
            length=LengthRule.fixed(1, 7),
            decrement=(0.03, 0.05),
            successor=1,
        ),
    ) + _spike_chain(
        ((0.90, 1.40), (1.40, 2.00), (2.00, 6.00), (1.40, 2.00), (0.90, 1.40)),
        first_index=1,
    ) + (
        # Redrawn each step, no decay.
        PhaseSpec(
            name="Final Decreasing",
            min_factor=0.40,
            max_factor=0.90,
            length=LengthRule.remainder(),
        ),
    ),
    entries=(PhaseEntry(phase=0, weight=1.0),),
)


PATTERN_TABLE: Dict[Pattern, PatternSpec] = {
    Pattern.DECREASING: DECREASING_SPEC,
    Pattern.RANDOM: RANDOM_SPEC,
    Pattern.SMALL_SPIKE: SMALL_SPIKE_SPEC,
    Pattern.LARGE_SPIKE: LARGE_SPIKE_SPEC,
}


def pattern_spec(pattern: Pattern) -> PatternSpec:
    """Return the phase graph for a pattern."""
    return PATTERN_TABLE[pattern]


def root_phase(pattern: Pattern) -> PhaseSpec:
    """Return the phase a pattern normally starts in."""
    return PATTERN_TABLE[pattern].root


def max_period_length() -> int:
    """Longest number of price steps any pattern spans."""
    return HALF_DAYS_PER_WEEK


def describe_table() -> Dict[str, list]:
    """Plain-dict view of the table, for the API and debug output."""
    table = {}
    for pattern, spec in PATTERN_TABLE.items():
        phases = []
        for index, phase in enumerate(spec.phases):
            phases.append({
                "index": index,
                "name": phase.name,
                "min_factor": phase.min_factor,
                "max_factor": phase.max_factor,
                "decrement": list(phase.decrement) if phase.decrement else None,
                "length_kind": phase.length.kind,
                "min_len": phase.length.min_len,
                "max_len": phase.length.max_len,
                "successor": phase.successor,
            })
        table[pattern.value] = phases
    return table
