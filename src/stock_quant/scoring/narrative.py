"""Template-based summary, thesis and caveats.

Pure string assembly over the computed numbers; no model-generated text.
"""

from __future__ import annotations

from stock_quant.data.coverage import SnapshotCoverage
from stock_quant.models import FactorScores, MarketSnapshot, Rating
from stock_quant.scoring.composite import CompositeScores
from stock_quant.utils.sanitize import display_name

PROFITABILITY_CAVEAT = (
    "Profitability metrics (margin/ROE) are partially missing or estimated; "
    "interpret profitability-related scores with some caution."
)
GROWTH_CAVEAT = (
    "Growth fundamentals are incomplete, so the growth score leans more heavily on "
    "price-based momentum and position in the 52-week range."
)
TRAILING_DATA_CAVEAT = (
    "Scores are based on trailing data and do not incorporate forward guidance, "
    "breaking news, or macro shocks."
)


def build_summary(snapshot: MarketSnapshot) -> str:
    name = display_name(snapshot.company_name, snapshot.ticker)
    label = f"{name} ({snapshot.ticker})" if snapshot.ticker and name != snapshot.ticker else name
    return (
        f"Quantitative snapshot for {label} using valuation (P/E, PEG, P/S, P/B), "
        "growth (fundamental & price-based), profitability (margin & ROE), momentum, "
        "and basic risk proxies."
    )


def build_thesis(
    factors: FactorScores,
    composites: CompositeScores,
    rating: Rating,
    conviction: int,
) -> str:
    return (
        f"The composite health score of {composites.health} blends {factors.growth} for growth, "
        f"{factors.quality} for profitability, {factors.value} for valuation, and "
        f"{factors.risk} for risk characteristics. This currently supports a {rating.value} "
        f"stance with about {conviction}% conviction given the available data."
    )


def build_key_risks(coverage: SnapshotCoverage) -> tuple[str, ...]:
    """Caveats driven by missing inputs; never empty."""
    risks: list[str] = []
    if not coverage.has_profitability:
        risks.append(PROFITABILITY_CAVEAT)
    if not coverage.has_growth_fundamentals:
        risks.append(GROWTH_CAVEAT)
    if not risks:
        risks.append(TRAILING_DATA_CAVEAT)
    return tuple(risks)
