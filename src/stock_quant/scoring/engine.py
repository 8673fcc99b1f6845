"""Entry point: snapshot -> factor scores -> composites -> narrative -> analysis."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from stock_quant.data.coverage import SnapshotCoverage, assess_snapshot_coverage
from stock_quant.models import FactorScores, MarketAnalysis, MarketSnapshot
from stock_quant.scoring.composite import (
    CompositeScores,
    compute_composites,
    compute_conviction,
    decide_rating,
    validate_analysis_invariants,
)
from stock_quant.scoring.factors import score_factors
from stock_quant.scoring.narrative import build_key_risks, build_summary, build_thesis

logger = logging.getLogger(__name__)


def coerce_snapshot(snapshot: MarketSnapshot | Mapping[str, Any] | None) -> MarketSnapshot:
    """Accept a snapshot, a plain mapping, or None (the empty snapshot)."""
    if snapshot is None:
        return MarketSnapshot()
    if isinstance(snapshot, MarketSnapshot):
        return snapshot
    if isinstance(snapshot, Mapping):
        return MarketSnapshot.from_dict(dict(snapshot))
    raise TypeError(f"Expected MarketSnapshot or mapping, got {type(snapshot).__name__}")


@dataclass(frozen=True)
class QuantResult:
    """Every intermediate of one scoring pass, for callers that report more than the analysis."""

    snapshot: MarketSnapshot
    factors: FactorScores
    composites: CompositeScores
    coverage: SnapshotCoverage
    analysis: MarketAnalysis


def run_quant_pipeline(
    snapshot: MarketSnapshot | Mapping[str, Any] | None,
) -> QuantResult:
    """
    Score a snapshot and keep the factor, composite and coverage results.

    Pure and synchronous: no I/O, no shared state, so concurrent calls need
    no coordination. Missing or malformed metrics degrade to neutral scores
    instead of raising; an empty snapshot yields the neutral HOLD analysis.

    Args:
        snapshot: Snapshot record, or a mapping of its fields

    Returns:
        QuantResult holding a fresh MarketAnalysis
    """
    s = coerce_snapshot(snapshot)

    factors = score_factors(s)
    composites = compute_composites(factors)
    rating = decide_rating(composites.health, composites.balance)
    conviction = compute_conviction(composites.health)
    coverage = assess_snapshot_coverage(s)

    analysis = MarketAnalysis(
        rating=rating,
        conviction=conviction,
        tone_score=factors.momentum,
        growth_score=factors.growth,
        profitability_score=factors.quality,
        valuation_score=factors.value,
        balance_score=composites.balance,
        health_score=composites.health,
        summary=build_summary(s),
        thesis=build_thesis(factors, composites, rating, conviction),
        key_risks=build_key_risks(coverage),
    )

    logger.debug(
        f"Scored {s.ticker or '<no ticker>'}: factors={factors.to_dict()} "
        f"balance={composites.balance} health={composites.health} "
        f"rating={rating.value} conviction={conviction} "
        f"coverage={coverage.fields_present}/{coverage.fields_total}"
    )

    validate_analysis_invariants(analysis)
    return QuantResult(
        snapshot=s,
        factors=factors,
        composites=composites,
        coverage=coverage,
        analysis=analysis,
    )


def compute_quant_analysis(
    snapshot: MarketSnapshot | Mapping[str, Any] | None,
) -> MarketAnalysis:
    """Score a snapshot into a complete MarketAnalysis."""
    return run_quant_pipeline(snapshot).analysis
