"""Composite scores, rating decision and conviction."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from stock_quant.models import FactorScores, MarketAnalysis, Rating
from stock_quant.utils.numeric import NEUTRAL_SCORE, clamp, round_half_up

logger = logging.getLogger(__name__)

# Risk/reward balance: value, quality and growth dominate
BALANCE_WEIGHTS = {
    "value": 0.25,
    "quality": 0.25,
    "growth": 0.25,
    "risk": 0.15,
    "momentum": 0.10,
}

# Overall health: growth-tilted
HEALTH_WEIGHTS = {
    "value": 0.20,
    "quality": 0.25,
    "growth": 0.30,
    "momentum": 0.15,
    "risk": 0.10,
}

BUY_MIN_HEALTH = 72
BUY_MIN_BALANCE = 60
SELL_MAX_HEALTH = 40
SELL_MAX_BALANCE = 40

CONVICTION_BASE = 35
CONVICTION_MIN = 10
CONVICTION_MAX = 90


@dataclass(frozen=True)
class CompositeScores:
    balance: int
    health: int


def _weighted(factors: FactorScores, weights: dict[str, float]) -> int:
    return round_half_up(sum(getattr(factors, name) * w for name, w in weights.items()))


def compute_composites(factors: FactorScores) -> CompositeScores:
    return CompositeScores(
        balance=_weighted(factors, BALANCE_WEIGHTS),
        health=_weighted(factors, HEALTH_WEIGHTS),
    )


def decide_rating(health: int, balance: int) -> Rating:
    """First match wins: BUY, then SELL, else HOLD."""
    if health >= BUY_MIN_HEALTH and balance >= BUY_MIN_BALANCE:
        return Rating.BUY
    if health <= SELL_MAX_HEALTH or balance <= SELL_MAX_BALANCE:
        return Rating.SELL
    return Rating.HOLD


def compute_conviction(health: int) -> int:
    """Conviction grows with health's distance from neutral, whatever the direction."""
    distance = abs(health - NEUTRAL_SCORE)
    return int(clamp(CONVICTION_BASE + distance, CONVICTION_MIN, CONVICTION_MAX))


def validate_analysis_invariants(analysis: MarketAnalysis) -> list[str]:
    """
    Check range and completeness invariants of a finished analysis.

    Invariants enforced:
    1. Every named score lies in [0, 100]
    2. Conviction lies in [10, 90]
    3. key_risks is non-empty

    Logs warnings for violations rather than raising (production-safe).

    Returns:
        List of violation messages (empty when the analysis is consistent)
    """
    violations: list[str] = []

    for name, score in analysis.named_scores().items():
        if not 0 <= score <= 100:
            violations.append(f"{name}={score} outside [0, 100]")

    if not CONVICTION_MIN <= analysis.conviction <= CONVICTION_MAX:
        violations.append(
            f"conviction={analysis.conviction} outside [{CONVICTION_MIN}, {CONVICTION_MAX}]"
        )

    if not analysis.key_risks:
        violations.append("key_risks is empty")

    for v in violations:
        logger.warning(f"Analysis invariant violation: {v}")

    return violations
