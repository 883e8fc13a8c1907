"""Tests for the prior table and the posterior aggregator."""

import pytest

from turnip_analysis.errors import InconsistentObservationsError
from turnip_analysis.posterior import PosteriorAggregator, sort_results
from turnip_analysis.priors import PRIOR_TABLE, PriorTable
from turnip_analysis.types import Pattern, PatternResult


class TestPriorTable:
    """Tests for the prior lookup."""

    @pytest.mark.parametrize("previous", [None] + list(Pattern))
    def test_rows_sum_to_one(self, previous):
        assert sum(PRIOR_TABLE.distribution(previous).values()) == pytest.approx(1.0)

    def test_unknown_row(self):
        assert PRIOR_TABLE.distribution() == {
            Pattern.DECREASING: 0.15,
            Pattern.RANDOM: 0.35,
            Pattern.SMALL_SPIKE: 0.25,
            Pattern.LARGE_SPIKE: 0.25,
        }

    def test_transition_entries(self):
        assert PRIOR_TABLE.prior(Pattern.LARGE_SPIKE, Pattern.DECREASING) == 0.45
        assert PRIOR_TABLE.prior(Pattern.LARGE_SPIKE, Pattern.LARGE_SPIKE) == 0.05
        assert PRIOR_TABLE.prior(Pattern.RANDOM, Pattern.SMALL_SPIKE) == 0.45
        assert PRIOR_TABLE.prior(Pattern.SMALL_SPIKE, Pattern.RANDOM) == 0.35

    def test_distribution_returns_copy(self):
        row = PRIOR_TABLE.distribution(Pattern.RANDOM)
        row[Pattern.RANDOM] = 1.0
        assert PRIOR_TABLE.prior(Pattern.RANDOM, Pattern.RANDOM) == 0.20

    def test_rows_cover_every_previous_pattern(self):
        assert set(PRIOR_TABLE.rows()) == {None} | set(Pattern)

    def test_to_dict(self):
        data = PRIOR_TABLE.to_dict()
        assert set(data) == {"unknown", "decreasing", "random", "smallspike", "largespike"}
        assert data["largespike"]["random"] == 0.50

    def test_custom_table(self):
        uniform = {p: 0.25 for p in Pattern}
        table = PriorTable(uniform, {})
        assert table.distribution() == uniform


class TestPosteriorAggregator:
    """Tests for Bayes combination and normalisation."""

    @pytest.fixture
    def aggregator(self):
        return PosteriorAggregator()

    def test_normalises(self, aggregator):
        prior = PRIOR_TABLE.distribution()
        masses = {p: 0.5 for p in Pattern}
        results = aggregator.aggregate(prior, masses)
        assert sum(r.probability for r in results) == pytest.approx(1.0)
        assert {r.pattern: r.probability for r in results} == pytest.approx(prior)

    def test_combines_prior_and_mass(self, aggregator):
        prior = {p: 0.25 for p in Pattern}
        masses = {
            Pattern.DECREASING: 0.0,
            Pattern.RANDOM: 0.3,
            Pattern.SMALL_SPIKE: 0.1,
            Pattern.LARGE_SPIKE: 0.0,
        }
        results = aggregator.aggregate(prior, masses)
        assert [r.pattern for r in results[:2]] == [Pattern.RANDOM, Pattern.SMALL_SPIKE]
        assert results[0].probability == pytest.approx(0.75)
        assert results[1].probability == pytest.approx(0.25)

    def test_missing_masses_count_as_zero(self, aggregator):
        prior = {p: 0.25 for p in Pattern}
        results = aggregator.aggregate(prior, {Pattern.RANDOM: 0.1})
        assert results[0].pattern is Pattern.RANDOM
        assert results[0].probability == pytest.approx(1.0)
        assert len(results) == 4

    def test_zero_total_raises(self, aggregator):
        prior = PRIOR_TABLE.distribution()
        with pytest.raises(InconsistentObservationsError) as exc_info:
            aggregator.aggregate(prior, {p: 0.0 for p in Pattern}, base_price=100, prices=[200])
        assert exc_info.value.base_price == 100
        assert exc_info.value.prices == [200]

    def test_from_prior(self, aggregator):
        results = aggregator.from_prior(PRIOR_TABLE.distribution())
        assert [r.pattern for r in results] == [
            Pattern.RANDOM, Pattern.SMALL_SPIKE, Pattern.LARGE_SPIKE, Pattern.DECREASING,
        ]


class TestSortResults:
    """Ordering of result lists."""

    def test_ties_keep_declaration_order(self):
        results = [
            PatternResult(Pattern.LARGE_SPIKE, 0.25),
            PatternResult(Pattern.DECREASING, 0.25),
            PatternResult(Pattern.SMALL_SPIKE, 0.25),
            PatternResult(Pattern.RANDOM, 0.25),
        ]
        assert [r.pattern for r in sort_results(results)] == list(Pattern)

    def test_descending(self):
        results = [PatternResult(Pattern.DECREASING, 0.1), PatternResult(Pattern.RANDOM, 0.9)]
        assert [r.probability for r in sort_results(results)] == [0.9, 0.1]
