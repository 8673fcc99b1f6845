"""Tests for the compute_quant_analysis entry point."""

import pytest

from stock_quant.data.coverage import assess_snapshot_coverage
from stock_quant.models import MarketAnalysis, MarketSnapshot, Rating
from stock_quant.scoring.composite import compute_composites
from stock_quant.scoring.engine import coerce_snapshot, compute_quant_analysis, run_quant_pipeline
from stock_quant.scoring.factors import score_factors
from stock_quant.scoring.narrative import (
    GROWTH_CAVEAT,
    PROFITABILITY_CAVEAT,
    TRAILING_DATA_CAVEAT,
)


class TestNeutralAnalysis:
    """Empty input degrades to the maximally neutral analysis."""

    def test_empty_snapshot(self, empty_snapshot) -> None:
        a = compute_quant_analysis(empty_snapshot)

        assert a.named_scores() == {
            "tone": 50,
            "growth": 50,
            "profitability": 50,
            "valuation": 50,
            "balance": 50,
            "health": 50,
        }
        assert a.rating is Rating.HOLD
        assert a.conviction == 35
        assert len(a.key_risks) >= 1

    def test_empty_snapshot_caveats(self, empty_snapshot) -> None:
        a = compute_quant_analysis(empty_snapshot)
        assert a.key_risks == (PROFITABILITY_CAVEAT, GROWTH_CAVEAT)

    def test_none_is_empty_snapshot(self, empty_snapshot) -> None:
        assert compute_quant_analysis(None) == compute_quant_analysis(empty_snapshot)

    def test_non_finite_inputs_are_absent(self, empty_snapshot) -> None:
        s = MarketSnapshot(
            pe_ratio=float("nan"),
            beta=float("inf"),
            market_cap="5e10",
            profit_margin=True,
        )
        assert compute_quant_analysis(s) == compute_quant_analysis(empty_snapshot)


class TestReferenceScenario:
    """Structural regression for the reference large cap."""

    def test_scores(self, reference_snapshot) -> None:
        a = compute_quant_analysis(reference_snapshot)

        assert a.valuation_score == 85
        assert a.growth_score == 50
        assert a.profitability_score == 50
        assert a.tone_score == 50
        assert a.balance_score == 58
        assert a.health_score == 56
        assert a.rating is Rating.HOLD
        assert a.conviction == 41

    def test_complete_fundamentals_get_generic_caveat(self, reference_snapshot) -> None:
        a = compute_quant_analysis(reference_snapshot)
        assert a.key_risks == (TRAILING_DATA_CAVEAT,)

    def test_thesis_restates_numbers(self, reference_snapshot) -> None:
        a = compute_quant_analysis(reference_snapshot)
        assert "health score of 56" in a.thesis
        assert "43 for risk" in a.thesis
        assert "HOLD stance with about 41% conviction" in a.thesis


class TestRatings:
    """End-to-end rating outcomes."""

    def test_strong_is_buy(self, strong_snapshot) -> None:
        a = compute_quant_analysis(strong_snapshot)
        assert a.rating is Rating.BUY
        assert a.health_score >= 72
        assert a.balance_score >= 60
        assert a.health_score == 85
        assert a.conviction == 70

    def test_weak_is_sell(self, weak_snapshot) -> None:
        a = compute_quant_analysis(weak_snapshot)
        assert a.rating is Rating.SELL
        assert a.balance_score == 25
        assert a.health_score <= 40

    def test_bounds(self, strong_snapshot, weak_snapshot, reference_snapshot) -> None:
        for s in (strong_snapshot, weak_snapshot, reference_snapshot):
            a = compute_quant_analysis(s)
            assert all(0 <= v <= 100 for v in a.named_scores().values())
            assert 10 <= a.conviction <= 90


class TestPurity:
    """No hidden state between calls."""

    def test_idempotent(self, reference_snapshot) -> None:
        assert compute_quant_analysis(reference_snapshot) == compute_quant_analysis(
            reference_snapshot
        )

    def test_fresh_result_each_call(self, reference_snapshot) -> None:
        first = compute_quant_analysis(reference_snapshot)
        second = compute_quant_analysis(reference_snapshot)
        assert first is not second

    def test_order_independent(self, strong_snapshot, weak_snapshot) -> None:
        a1 = compute_quant_analysis(strong_snapshot)
        compute_quant_analysis(weak_snapshot)
        a2 = compute_quant_analysis(strong_snapshot)
        assert a1 == a2

    def test_returns_analysis(self, reference_snapshot) -> None:
        assert isinstance(compute_quant_analysis(reference_snapshot), MarketAnalysis)


class TestCoerceSnapshot:
    """Tests for accepted input shapes."""

    def test_mapping_with_wire_names(self, reference_snapshot) -> None:
        data = {
            "ticker": "REF",
            "companyName": "Reference Corp",
            "price": 100.0,
            "fiftyTwoWeekLow": 80.0,
            "fiftyTwoWeekHigh": 120.0,
            "peRatio": 12.0,
            "profitMargin": 0.20,
            "roe": 0.20,
            "revenueGrowth": 0.15,
            "epsGrowth": 0.20,
            "beta": 1.0,
            "marketCap": 5e10,
        }
        assert coerce_snapshot(data) == reference_snapshot
        assert compute_quant_analysis(data) == compute_quant_analysis(reference_snapshot)

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            coerce_snapshot(42)


class TestRunQuantPipeline:
    """The single-pass result exposes the intermediates behind the analysis."""

    def test_intermediates_match_standalone_scorers(self, reference_snapshot) -> None:
        result = run_quant_pipeline(reference_snapshot)

        assert result.snapshot == reference_snapshot
        assert result.factors == score_factors(reference_snapshot)
        assert result.composites == compute_composites(result.factors)
        assert result.coverage == assess_snapshot_coverage(reference_snapshot)
        assert result.analysis == compute_quant_analysis(reference_snapshot)

    def test_analysis_built_from_intermediates(self, reference_snapshot) -> None:
        result = run_quant_pipeline(reference_snapshot)

        assert result.analysis.valuation_score == result.factors.value
        assert result.analysis.tone_score == result.factors.momentum
        assert result.analysis.health_score == result.composites.health
        assert result.analysis.balance_score == result.composites.balance

    def test_mapping_input_is_coerced(self) -> None:
        result = run_quant_pipeline({"ticker": "abc", "peRatio": 15})

        assert result.snapshot.ticker == "ABC"
        assert result.factors.value == 80
        assert result.coverage.fields_present == 1
