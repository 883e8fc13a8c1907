"""
Tests for the phase model functions.

Covers price-to-factor bounds, duration rules, stay/advance branching,
band evolution and the observation overlap used to weight hypotheses.
"""

import pytest

from turnip_analysis.patterns import (
    ADVANCE,
    STAY,
    factor_bounds,
    next_interval,
    observation_overlap,
    pattern_spec,
    resolve_length,
    transition_options,
)
from turnip_analysis.patterns.phase import LengthRule
from turnip_analysis.types import Pattern


class TestFactorBounds:
    """Prices are ceil(base * factor)."""

    def test_bounds(self):
        low, high = factor_bounds(90, 100)
        assert low == pytest.approx(0.89)
        assert high == pytest.approx(0.90)

    def test_zero_price(self):
        low, high = factor_bounds(0, 100)
        assert low < 0
        assert high == 0


class TestResolveLength:
    """Tests for LengthRule resolution."""

    def test_fixed(self):
        assert resolve_length(LengthRule.fixed(1, 6), (), 12) == (1, 6)

    def test_fixed_single_value(self):
        assert resolve_length(LengthRule.fixed(1), (), 12) == (1, 1)

    def test_complement(self):
        rule = LengthRule.complement(ref_phase=1, total=5)
        assert resolve_length(rule, (2, 3, 1), 12) == (2, 2)

    def test_bounded_complement(self):
        rule = LengthRule.bounded_complement(ref_phase=0, total=7, min_len=1)
        assert resolve_length(rule, (4, 2), 12) == (1, 3)

    def test_bounded_complement_after_skip(self):
        rule = LengthRule.bounded_complement(ref_phase=0, total=7)
        assert resolve_length(rule, (0, 3), 12) == (1, 7)

    def test_remainder(self):
        assert resolve_length(LengthRule.remainder(), (3, 1, 1, 1, 1, 1), 12) == (4, 4)

    def test_remainder_full_period(self):
        assert resolve_length(LengthRule.remainder(), (), 12) == (12, 12)

    def test_unknown_kind_rejected(self):
        """Rules are checked when built, so resolution never sees a bad kind."""
        with pytest.raises(ValueError, match="Unknown length rule kind: sometimes"):
            LengthRule("sometimes")

    @pytest.mark.parametrize("kind", ["fixed", "complement", "bounded_complement", "remainder"])
    def test_known_kinds_accepted(self, kind):
        assert LengthRule(kind).kind == kind


class TestTransitionOptions:
    """Stay/advance branching and its weights."""

    def test_below_minimum_must_stay(self):
        assert transition_options(2, 3) == ((STAY, 1.0),)

    def test_at_maximum_must_advance(self):
        assert transition_options(1, 1) == ((ADVANCE, 1.0),)

    def test_exhausted_phase_advances(self):
        assert transition_options(0, 0) == ((ADVANCE, 1.0),)

    def test_between_bounds_splits(self):
        options = dict(transition_options(1, 4))
        assert options[STAY] == pytest.approx(0.75)
        assert options[ADVANCE] == pytest.approx(0.25)

    @pytest.mark.parametrize("max_len", [2, 3, 6, 7])
    def test_weights_sum_to_one(self, max_len):
        options = transition_options(1, max_len)
        assert sum(weight for _, weight in options) == pytest.approx(1.0)

    def test_lengths_are_uniform(self):
        """Walking a 1-6 phase gives each length the same probability."""
        min_len, max_len = 1, 6
        reach = 1.0
        ends = []
        for _ in range(6):
            options = dict(transition_options(min_len, max_len))
            ends.append(reach * options.get(ADVANCE, 0.0))
            reach *= options.get(STAY, 0.0)
            min_len, max_len = min_len - 1, max_len - 1
        assert ends == pytest.approx([1 / 6] * 6)


class TestNextInterval:
    """Band evolution within a phase."""

    def test_decaying_phase_widens_downwards(self):
        phase = pattern_spec(Pattern.DECREASING).phase(0)
        low, high = next_interval(phase, (0.85, 0.90))
        assert low == pytest.approx(0.80)
        assert high == pytest.approx(0.87)

    def test_redrawn_phase_resets(self):
        phase = pattern_spec(Pattern.RANDOM).phase(0)
        assert next_interval(phase, (1.0, 1.01)) == (0.90, 1.40)


class TestObservationOverlap:
    """Weighting and narrowing of a band by an observed price."""

    def test_excluded_price(self, config):
        fraction, interval = observation_overlap((0.85, 0.90), 102, 95, config.float_tolerance)
        assert fraction == 0.0
        assert interval == (0.85, 0.90)

    def test_interior_price(self, config):
        fraction, interval = observation_overlap((0.90, 1.40), 102, 95, config.float_tolerance)
        assert fraction == pytest.approx((1 / 95) / (0.5 + 2 * config.float_tolerance))
        assert interval[0] == pytest.approx(101 / 95)
        assert interval[1] == pytest.approx(102 / 95)

    def test_band_inside_price_bounds(self, config):
        """A band narrower than one price step is fully consistent."""
        fraction, interval = observation_overlap((0.894, 0.896), 90, 100, config.float_tolerance)
        assert fraction == pytest.approx(1.0)
        assert interval == pytest.approx((0.894, 0.896))

    def test_exact_lower_edge_within_tolerance(self, config):
        """A price at the band's lower edge is kept, collapsed onto the edge."""
        fraction, interval = observation_overlap((0.90, 1.40), 90, 100, config.float_tolerance)
        assert fraction > 0.0
        assert interval == pytest.approx((0.90, 0.90))

    def test_price_below_edge_is_excluded(self, config):
        fraction, _ = observation_overlap((0.90, 1.40), 89, 100, config.float_tolerance)
        assert fraction == 0.0

    def test_fraction_never_exceeds_one(self, config):
        fraction, _ = observation_overlap((0.5, 0.5), 50, 100, config.float_tolerance)
        assert 0.0 < fraction <= 1.0
