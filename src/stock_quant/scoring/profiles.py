"""Risk-profile scoring and ranking of multiple analyses."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

import pandas as pd

from stock_quant.models import MarketAnalysis
from stock_quant.utils.numeric import NEUTRAL_SCORE, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_RANK_LIMIT = 8


class RiskProfile(str, Enum):
    CONSERVATIVE = "conservative"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"


# Weights over the six named scores; each profile sums to 1.0
PROFILE_WEIGHTS: dict[RiskProfile, dict[str, float]] = {
    RiskProfile.CONSERVATIVE: {
        "health": 0.30,
        "balance": 0.30,
        "valuation": 0.20,
        "profitability": 0.15,
        "growth": 0.05,
    },
    RiskProfile.AGGRESSIVE: {
        "growth": 0.40,
        "tone": 0.20,
        "health": 0.15,
        "profitability": 0.10,
        "valuation": 0.10,
        "balance": 0.05,
    },
    RiskProfile.BALANCED: {
        "health": 0.25,
        "growth": 0.25,
        "balance": 0.20,
        "profitability": 0.15,
        "valuation": 0.10,
        "tone": 0.05,
    },
}


def parse_risk_profile(raw: str | RiskProfile | None) -> RiskProfile:
    """Case-insensitive profile lookup; anything unknown means balanced."""
    if isinstance(raw, RiskProfile):
        return raw
    if isinstance(raw, str):
        try:
            return RiskProfile(raw.strip().lower())
        except ValueError:
            logger.info(f"Unknown risk profile {raw!r}, using balanced")
    return RiskProfile.BALANCED


def score_for_profile(analysis: MarketAnalysis, profile: RiskProfile | str) -> float:
    """Weighted blend of the six named scores for a risk profile."""
    weights = PROFILE_WEIGHTS[parse_risk_profile(profile)]
    scores = analysis.named_scores()
    return sum(scores[name] * w for name, w in weights.items())


def is_all_neutral(analysis: MarketAnalysis) -> bool:
    """True when every named score is exactly neutral, i.e. the snapshot carried no signal."""
    return all(score == NEUTRAL_SCORE for score in analysis.named_scores().values())


@dataclass(frozen=True)
class RankedAnalysis:
    ticker: str
    analysis: MarketAnalysis
    profile_score: float

    @property
    def display_score(self) -> int:
        return round_half_up(self.profile_score)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ticker": self.ticker,
            **self.analysis.to_dict(),
            "profileScore": self.display_score,
        }


def rank_analyses(
    items: Iterable[tuple[str, MarketAnalysis]],
    profile: RiskProfile | str = RiskProfile.BALANCED,
    limit: int | None = DEFAULT_RANK_LIMIT,
    skip_neutral: bool = True,
) -> list[RankedAnalysis]:
    """
    Rank analyses by descending profile score.

    Args:
        items: (ticker, analysis) pairs
        profile: Risk profile (enum or name)
        limit: Maximum entries returned (None for all)
        skip_neutral: Drop analyses where every score is neutral

    Returns:
        Ranked entries; ties are broken by ticker for stable output
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    resolved = parse_risk_profile(profile)
    ranked: list[RankedAnalysis] = []
    for ticker, analysis in items:
        if skip_neutral and is_all_neutral(analysis):
            logger.warning(f"All scores neutral for {ticker} - skipping from ranking")
            continue
        ranked.append(
            RankedAnalysis(
                ticker=ticker,
                analysis=analysis,
                profile_score=score_for_profile(analysis, resolved),
            )
        )

    ranked.sort(key=lambda r: (-r.profile_score, r.ticker))
    return ranked if limit is None else ranked[:limit]


RANKING_COLUMNS = [
    "ticker",
    "rating",
    "conviction",
    "tone",
    "growth",
    "profitability",
    "valuation",
    "balance",
    "health",
    "profile_score",
]


def ranking_frame(ranked: list[RankedAnalysis]) -> pd.DataFrame:
    """Tabulate ranked entries, one row per ticker in rank order."""
    rows = [
        {
            "ticker": r.ticker,
            "rating": r.analysis.rating.value,
            "conviction": r.analysis.conviction,
            **r.analysis.named_scores(),
            "profile_score": r.display_score,
        }
        for r in ranked
    ]
    return pd.DataFrame(rows, columns=RANKING_COLUMNS)
