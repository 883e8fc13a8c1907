"""
Shared test fixtures and helpers for turnip analysis tests.
"""

from typing import Dict, List, Optional, Sequence

import pytest

from turnip_analysis.analysis_config import AnalysisConfig
from turnip_analysis.types import Pattern, PatternResult


# Weeks that only one pattern can explain, as (base_price, prices).
DECREASING_WEEK = (100, [90, 87, 82, 78, 74, 69, 66, 61, 58, 54, 50, 47])
RANDOM_WEEK = (95, [102, 127, 112, 112, 97, 65, 59, 96, 121, 57, 53, 43])
SMALL_SPIKE_WEEK = (90, [55, 52, 48, 43, 38, 90, 89, 135, 170, 165, 81, 77])
LARGE_SPIKE_WEEK = (104, [90, 86, 128, 165, 455, 147, 143, 57, 53, 43, 94, 42])


def probabilities(results: Sequence[PatternResult]) -> Dict[Pattern, float]:
    """Helper to turn a result list into a pattern -> probability dict."""
    return {result.pattern: result.probability for result in results}


def make_prices(*values: Optional[int]) -> List[Optional[int]]:
    """Helper to build a price list, with None for missed steps."""
    return list(values)


@pytest.fixture
def config():
    """Default analysis configuration."""
    return AnalysisConfig.default()
