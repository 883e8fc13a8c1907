"""
Phase data structures for the pattern table.

A pattern is a small graph of phases. Each phase has a price band
(multipliers of the base price), an optional per-step decay, a duration
rule, and the index of the phase that follows it. Everything here is
plain frozen data; the behaviour lives in phase_model.py.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..types import Pattern


FIXED = "fixed"
COMPLEMENT = "complement"
BOUNDED_COMPLEMENT = "bounded_complement"
REMAINDER = "remainder"

LENGTH_KINDS = (FIXED, COMPLEMENT, BOUNDED_COMPLEMENT, REMAINDER)


@dataclass(frozen=True)
class LengthRule:
    """
    Duration of a phase, possibly depending on earlier phases.

    Attributes:
        kind: One of:
            - 'fixed': between min_len and max_len steps.
            - 'complement': exactly total - lengths[ref_phase] steps.
            - 'bounded_complement': between min_len and
              total - lengths[ref_phase] steps.
            - 'remainder': whatever is left of the period.
        min_len: Lower bound for 'fixed' and 'bounded_complement'.
        max_len: Upper bound for 'fixed'.
        ref_phase: Index of the earlier phase a complement refers to.
        total: Combined length shared with ref_phase.
    """
    kind: str
    min_len: int = 0
    max_len: int = 0
    ref_phase: Optional[int] = None
    total: int = 0

    def __post_init__(self):
        if self.kind not in LENGTH_KINDS:
            raise ValueError(
                f"Unknown length rule kind: {self.kind}. Expected one of: "
                + ", ".join(LENGTH_KINDS)
            )

    @classmethod
    def fixed(cls, min_len: int, max_len: int = None) -> "LengthRule":
        return cls(FIXED, min_len=min_len, max_len=max_len if max_len is not None else min_len)

    @classmethod
    def complement(cls, ref_phase: int, total: int) -> "LengthRule":
        return cls(COMPLEMENT, ref_phase=ref_phase, total=total)

    @classmethod
    def bounded_complement(cls, ref_phase: int, total: int, min_len: int = 1) -> "LengthRule":
        return cls(BOUNDED_COMPLEMENT, min_len=min_len, ref_phase=ref_phase, total=total)

    @classmethod
    def remainder(cls) -> "LengthRule":
        return cls(REMAINDER)


@dataclass(frozen=True)
class PhaseSpec:
    """
    One phase of a pattern.

    Attributes:
        name: Label used in debug dumps and the API.
        min_factor: Lowest admissible price on entry, as a multiple of the
            base price.
        max_factor: Highest admissible price on entry.
        length: Duration rule.
        decrement: (min_drop, max_drop) subtracted from the factor each step.
            None means the band is redrawn every step.
        successor: Index of the following phase, or None if the phase runs
            to the end of the period.
    """
    name: str
    min_factor: float
    max_factor: float
    length: LengthRule
    decrement: Optional[Tuple[float, float]] = None
    successor: Optional[int] = None


@dataclass(frozen=True)
class PhaseEntry:
    """
    A way for a pattern to begin.

    Attributes:
        phase: Index of the phase the period starts in.
        weight: Probability of starting here, given the pattern.
        skipped: Lengths recorded for earlier phases that were skipped
            (always zeros), so later length rules can refer to them.
    """
    phase: int
    weight: float
    skipped: Tuple[int, ...] = ()


@dataclass(frozen=True)
class PatternSpec:
    """Phase graph for one pattern."""
    pattern: Pattern
    phases: Tuple[PhaseSpec, ...]
    entries: Tuple[PhaseEntry, ...]

    def phase(self, index: int) -> PhaseSpec:
        return self.phases[index]

    @property
    def root(self) -> PhaseSpec:
        """The phase of the primary (first) entry."""
        return self.phases[self.entries[0].phase]
