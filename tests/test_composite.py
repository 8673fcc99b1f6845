"""Tests for composites, rating decision and conviction."""

import logging

import pytest

from stock_quant.models import FactorScores, MarketAnalysis, Rating
from stock_quant.scoring.composite import (
    BALANCE_WEIGHTS,
    HEALTH_WEIGHTS,
    compute_composites,
    compute_conviction,
    decide_rating,
    validate_analysis_invariants,
)


def _uniform(score: int) -> FactorScores:
    return FactorScores(value=score, growth=score, quality=score, momentum=score, risk=score)


class TestComputeComposites:
    """Tests for balance and health."""

    def test_weights_sum_to_one(self) -> None:
        assert sum(BALANCE_WEIGHTS.values()) == pytest.approx(1.0)
        assert sum(HEALTH_WEIGHTS.values()) == pytest.approx(1.0)

    def test_neutral_factors(self) -> None:
        c = compute_composites(_uniform(50))
        assert (c.balance, c.health) == (50, 50)

    def test_reference_factors(self) -> None:
        c = compute_composites(FactorScores(value=85, growth=50, quality=50, momentum=50, risk=43))
        assert c.balance == 58
        assert c.health == 56

    def test_growth_weighs_more_in_health(self) -> None:
        c = compute_composites(FactorScores(value=50, growth=100, quality=50, momentum=50, risk=50))
        assert c.health > c.balance


class TestDecideRating:
    """Tests for the ordered rating rules."""

    def test_buy_boundary_is_inclusive(self) -> None:
        assert decide_rating(71, 60) is Rating.HOLD
        assert decide_rating(72, 60) is Rating.BUY

    def test_buy_needs_balance(self) -> None:
        assert decide_rating(90, 59) is Rating.HOLD

    def test_sell_on_health_or_balance(self) -> None:
        assert decide_rating(40, 80) is Rating.SELL
        assert decide_rating(80, 40) is Rating.SELL

    def test_hold_between(self) -> None:
        assert decide_rating(41, 41) is Rating.HOLD

    def test_health_crossing_flips_hold_to_buy(self) -> None:
        """Uniform factors 71 -> 72 move health across the BUY threshold with balance >= 60."""
        below = compute_composites(_uniform(71))
        at = compute_composites(_uniform(72))
        assert (below.health, below.balance) == (71, 71)
        assert (at.health, at.balance) == (72, 72)
        assert decide_rating(below.health, below.balance) is Rating.HOLD
        assert decide_rating(at.health, at.balance) is Rating.BUY


class TestComputeConviction:
    """Tests for conviction."""

    def test_neutral_health(self) -> None:
        assert compute_conviction(50) == 35

    def test_symmetric(self) -> None:
        assert compute_conviction(20) == compute_conviction(80) == 65

    def test_clamped(self) -> None:
        assert compute_conviction(150) == 90

    def test_range_over_all_health_values(self) -> None:
        for health in range(0, 101):
            assert 10 <= compute_conviction(health) <= 90


class TestValidateAnalysisInvariants:
    """Tests for validate_analysis_invariants."""

    def _analysis(self, **overrides) -> MarketAnalysis:
        fields = dict(
            rating=Rating.HOLD,
            conviction=35,
            tone_score=50,
            growth_score=50,
            profitability_score=50,
            valuation_score=50,
            balance_score=50,
            health_score=50,
            summary="s",
            thesis="t",
            key_risks=("r",),
        )
        fields.update(overrides)
        return MarketAnalysis(**fields)

    def test_valid_analysis_no_warnings(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            assert validate_analysis_invariants(self._analysis()) == []
        assert "invariant violation" not in caplog.text.lower()

    def test_out_of_range_score(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            violations = validate_analysis_invariants(self._analysis(health_score=120))
        assert violations == ["health=120 outside [0, 100]"]
        assert "health=120 outside [0, 100]" in caplog.text

    def test_conviction_and_empty_risks(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            violations = validate_analysis_invariants(
                self._analysis(conviction=95, key_risks=())
            )
        assert "conviction=95 outside [10, 90]" in violations
        assert "key_risks is empty" in violations
