"""Five independent factor scorers.

Each scorer reads a subset of the snapshot and returns an int in [0, 100].
Missing inputs drop out of the average; a factor with no inputs at all is
neutral (50).
"""

from __future__ import annotations

import math

from stock_quant.models import FactorScores, MarketSnapshot
from stock_quant.scoring.bands import score_from_band_or_none, score_from_pe
from stock_quant.utils.numeric import average, average_or_none

# Band domains (lo, hi)
PRICE_TO_SALES_BAND = (1.0, 12.0)
PRICE_TO_BOOK_BAND = (0.8, 6.0)
PEG_BAND = (0.5, 3.0)
REVENUE_GROWTH_BAND = (0.0, 0.35)
EPS_GROWTH_BAND = (0.0, 0.45)
YEAR_CHANGE_BAND = (-40.0, 150.0)
RANGE_POSITION_BAND = (0.0, 1.0)
PROFIT_MARGIN_BAND = (0.05, 0.35)
ROE_BAND = (0.08, 0.35)
DAY_CHANGE_BAND = (-5.0, 5.0)
DISTANCE_FROM_HIGH_BAND = (-60.0, 0.0)
BETA_BAND = (0.8, 1.8)
LOG_MARKET_CAP_BAND = (9.0, 12.0)  # ~$1B .. ~$1T


def score_value(s: MarketSnapshot) -> int:
    return average(
        [
            score_from_pe(s.pe_ratio),
            score_from_band_or_none(s.price_to_sales, *PRICE_TO_SALES_BAND),
            score_from_band_or_none(s.price_to_book, *PRICE_TO_BOOK_BAND),
            score_from_band_or_none(s.peg_ratio, *PEG_BAND),
        ]
    )


def fundamental_growth_score(s: MarketSnapshot) -> int | None:
    """Revenue/EPS growth blend, or None when neither is reported."""
    return average_or_none(
        [
            score_from_band_or_none(s.revenue_growth, *REVENUE_GROWTH_BAND),
            score_from_band_or_none(s.eps_growth, *EPS_GROWTH_BAND),
        ]
    )


def price_growth_score(s: MarketSnapshot) -> float | None:
    """
    Price-based growth proxy.

    Prefers the 52-week % change; falls back to the price's position inside
    the 52-week range when the range is known and non-degenerate.
    """
    if s.fifty_two_week_change_pct is not None:
        return score_from_band_or_none(s.fifty_two_week_change_pct, *YEAR_CHANGE_BAND)

    low, high = s.fifty_two_week_low, s.fifty_two_week_high
    if s.price is not None and low is not None and high is not None and high > low:
        position = (s.price - low) / (high - low)
        return score_from_band_or_none(position, *RANGE_POSITION_BAND)

    return None


def score_growth(s: MarketSnapshot) -> int:
    fundamental = fundamental_growth_score(s)
    price_based = price_growth_score(s)

    if fundamental is not None:
        return average([fundamental, price_based])
    return average([price_based])


def score_quality(s: MarketSnapshot) -> int:
    return average(
        [
            score_from_band_or_none(s.profit_margin, *PROFIT_MARGIN_BAND),
            score_from_band_or_none(s.roe, *ROE_BAND),
        ]
    )


def score_momentum(s: MarketSnapshot) -> int:
    # Distance below the 52-week high is scored as a non-positive number
    distance_from_high = (
        -abs(s.change_from_52w_high_pct) if s.change_from_52w_high_pct is not None else None
    )
    return average(
        [
            score_from_band_or_none(s.change_1d_pct, *DAY_CHANGE_BAND),
            score_from_band_or_none(s.fifty_two_week_change_pct, *YEAR_CHANGE_BAND),
            score_from_band_or_none(distance_from_high, *DISTANCE_FROM_HIGH_BAND),
        ]
    )


def score_risk(s: MarketSnapshot) -> int:
    size_score: float | None = None
    if s.market_cap is not None and s.market_cap > 0:
        size_score = score_from_band_or_none(math.log10(s.market_cap), *LOG_MARKET_CAP_BAND)

    return average([score_from_band_or_none(s.beta, *BETA_BAND), size_score])


def score_factors(s: MarketSnapshot) -> FactorScores:
    """Run all five factor scorers."""
    return FactorScores(
        value=score_value(s),
        growth=score_growth(s),
        quality=score_quality(s),
        momentum=score_momentum(s),
        risk=score_risk(s),
    )
