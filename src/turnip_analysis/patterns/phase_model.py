"""
Phase model: how a phase's admissible price band and duration evolve.

Stateless functions shared by all patterns. Remaining-length bounds count
the step currently being considered, so (1, 1) means "this is the last
step of the phase".
"""

from typing import Sequence, Tuple

from .phase import (
    BOUNDED_COMPLEMENT,
    COMPLEMENT,
    FIXED,
    REMAINDER,
    LengthRule,
    PhaseSpec,
)


STAY = "stay"
ADVANCE = "advance"

Interval = Tuple[float, float]


def factor_bounds(price: int, base_price: int) -> Interval:
    """
    Bounds on the factor that produced an observed price.

    Prices are ceil(base_price * factor), so the factor lies in
    ((price - 1) / base_price, price / base_price].
    """
    return ((price - 1) / base_price, price / base_price)


def resolve_length(
    rule: LengthRule,
    lengths: Sequence[int],
    period_length: int,
) -> Tuple[int, int]:
    """
    (min_len, max_len) of a phase entered after phases of the given lengths.

    Raises:
        ValueError: For an unknown rule kind.
    """
    if rule.kind == FIXED:
        return rule.min_len, rule.max_len
    if rule.kind == COMPLEMENT:
        length = rule.total - lengths[rule.ref_phase]
        return length, length
    if rule.kind == BOUNDED_COMPLEMENT:
        return rule.min_len, rule.total - lengths[rule.ref_phase]
    if rule.kind == REMAINDER:
        remaining = period_length - sum(lengths)
        return remaining, remaining
    raise ValueError(f"Unknown length rule kind: {rule.kind}")


def transition_options(min_len: int, max_len: int) -> Tuple[Tuple[str, float], ...]:
    """
    Live branches after the current step, with their weights.

    - Below the minimum length the phase must continue.
    - Between minimum and maximum both branches are live. Staying has
      weight (max_len - 1) / max_len, which makes every admissible length
      equally likely.
    - At the maximum the phase must end.
    """
    if min_len > 1:
        return ((STAY, 1.0),)
    if max_len > 1:
        return (
            (STAY, (max_len - 1) / max_len),
            (ADVANCE, 1.0 / max_len),
        )
    return ((ADVANCE, 1.0),)


def next_interval(phase: PhaseSpec, interval: Interval) -> Interval:
    """
    Admissible factor interval for the next step of the same phase.

    Decaying phases drop by between min_drop and max_drop, so the band
    widens as it falls. Other phases redraw from their entry band.
    """
    if phase.decrement is None:
        return phase.min_factor, phase.max_factor
    min_drop, max_drop = phase.decrement
    low, high = interval
    return low - max_drop, high - min_drop


def observation_overlap(
    interval: Interval,
    price: int,
    base_price: int,
    tolerance: float,
) -> Tuple[float, Interval]:
    """
    How much of an admissible interval is consistent with an observed price.

    Returns:
        (fraction, consistent_interval). The fraction is the share of the
        admissible interval, under a uniform density, that rounds up to
        the observed price; 0.0 means the price is excluded. The
        consistent interval is the admissible interval narrowed to the
        price's factor bounds.
    """
    low, high = interval
    price_low, price_high = factor_bounds(price, base_price)
    overlap = min(price_high, high + tolerance) - max(price_low, low - tolerance)
    if overlap <= 0.0:
        return 0.0, interval

    width = (high - low) + 2 * tolerance
    fraction = min(1.0, overlap / width) if width > 0 else 1.0

    narrowed_low = max(price_low, low)
    narrowed_high = min(price_high, high)
    if narrowed_low > narrowed_high:
        # Within tolerance of an edge: collapse onto that edge.
        narrowed_low, narrowed_high = narrowed_high, narrowed_low
    return fraction, (narrowed_low, narrowed_high)
