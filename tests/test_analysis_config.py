"""
Tests for AnalysisConfig dataclass.

Verifies:
- Default values match the game's period and base price range
- Immutability (frozen=True)
- with_* helpers return modified copies
"""

import dataclasses

import pytest

from turnip_analysis.analysis_config import AnalysisConfig
from turnip_analysis.constants import (
    FLOAT_TOLERANCE,
    HALF_DAY_LABELS,
    HALF_DAYS_PER_WEEK,
    MAX_BASE_PRICE,
    MIN_BASE_PRICE,
)


class TestConstants:
    """Tests for centralized constants."""

    def test_one_label_per_half_day(self):
        assert len(HALF_DAY_LABELS) == HALF_DAYS_PER_WEEK == 12
        assert HALF_DAY_LABELS[0] == "mon_am"
        assert HALF_DAY_LABELS[-1] == "sat_pm"

    def test_labels_are_unique(self):
        assert len(set(HALF_DAY_LABELS)) == len(HALF_DAY_LABELS)

    def test_base_price_range(self):
        assert MIN_BASE_PRICE == 90
        assert MAX_BASE_PRICE == 110


class TestAnalysisConfigDefaults:
    """Tests for default values."""

    def test_default_values(self):
        config = AnalysisConfig.default()

        assert config.period_length == 12
        assert config.float_tolerance == FLOAT_TOLERANCE == 0.0001
        assert config.min_base_price == 90
        assert config.max_base_price == 110

    def test_default_equals_constructor(self):
        assert AnalysisConfig.default() == AnalysisConfig()

    def test_frozen(self):
        config = AnalysisConfig.default()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.period_length = 14


class TestAnalysisConfigBuilders:
    """Tests for the with_* helpers."""

    def test_with_base_price_range_both(self):
        config = AnalysisConfig.default().with_base_price_range(1, 1000)
        assert config.min_base_price == 1
        assert config.max_base_price == 1000

    def test_with_base_price_range_partial(self):
        """Only provided bounds are modified."""
        config = AnalysisConfig.default().with_base_price_range(max_base_price=120)
        assert config.min_base_price == 90
        assert config.max_base_price == 120

    def test_with_base_price_range_returns_new_instance(self):
        original = AnalysisConfig.default()
        modified = original.with_base_price_range(80, 120)
        assert original.min_base_price == 90
        assert modified is not original

    def test_with_float_tolerance(self):
        original = AnalysisConfig.default()
        modified = original.with_float_tolerance(0.001)
        assert modified.float_tolerance == 0.001
        assert original.float_tolerance == 0.0001
        assert modified.period_length == original.period_length
