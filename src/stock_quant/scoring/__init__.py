"""Scoring engine: bands, factor scorers, composites, narrative."""

from stock_quant.scoring.bands import score_from_band, score_from_band_or_none, score_from_pe
from stock_quant.scoring.composite import (
    compute_composites,
    compute_conviction,
    decide_rating,
    validate_analysis_invariants,
)
from stock_quant.scoring.engine import QuantResult, compute_quant_analysis, run_quant_pipeline
from stock_quant.scoring.factors import (
    score_factors,
    score_growth,
    score_momentum,
    score_quality,
    score_risk,
    score_value,
)
from stock_quant.scoring.profiles import (
    RankedAnalysis,
    RiskProfile,
    is_all_neutral,
    rank_analyses,
    ranking_frame,
    score_for_profile,
)

__all__ = [
    "score_from_band",
    "score_from_band_or_none",
    "score_from_pe",
    "compute_composites",
    "compute_conviction",
    "decide_rating",
    "validate_analysis_invariants",
    "QuantResult",
    "compute_quant_analysis",
    "run_quant_pipeline",
    "score_factors",
    "score_growth",
    "score_momentum",
    "score_quality",
    "score_risk",
    "score_value",
    "RankedAnalysis",
    "RiskProfile",
    "is_all_neutral",
    "rank_analyses",
    "ranking_frame",
    "score_for_profile",
]
