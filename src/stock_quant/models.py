"""Input and output records of the scoring engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any

from stock_quant.utils.numeric import safe_number
from stock_quant.utils.sanitize import normalize_ticker, sanitize_text


class Rating(str, Enum):
    """Categorical recommendation."""

    BUY = "BUY"
    HOLD = "HOLD"
    SELL = "SELL"


# Wire names used by upstream collaborators -> dataclass field names
SNAPSHOT_ALIASES: dict[str, str] = {
    "companyName": "company_name",
    "prevClose": "prev_close",
    "dayHigh": "day_high",
    "dayLow": "day_low",
    "fiftyTwoWeekHigh": "fifty_two_week_high",
    "fiftyTwoWeekLow": "fifty_two_week_low",
    "avgVolume3m": "avg_volume_3m",
    "change1dPct": "change_1d_pct",
    "changeFrom52wLowPct": "change_from_52w_low_pct",
    "changeFrom52wHighPct": "change_from_52w_high_pct",
    "fiftyTwoWeekChangePct": "fifty_two_week_change_pct",
    "marketCap": "market_cap",
    "peRatio": "pe_ratio",
    "pegRatio": "peg_ratio",
    "priceToSales": "price_to_sales",
    "priceToBook": "price_to_book",
    "profitMargin": "profit_margin",
    "revenueGrowth": "revenue_growth",
    "epsGrowth": "eps_growth",
}

_IDENTITY_FIELDS = ("ticker", "company_name")


@dataclass(frozen=True)
class MarketSnapshot:
    """Point-in-time market and fundamental metrics for one company.

    Every field is optional. Returns are percents (15 = +15%), fundamentals
    are fractions (0.25 = 25%). Numeric fields that are not finite numbers are
    stored as None, so absence is never confused with zero.
    """

    ticker: str | None = None
    company_name: str | None = None

    # Price & trading
    price: float | None = None
    prev_close: float | None = None
    day_high: float | None = None
    day_low: float | None = None
    fifty_two_week_high: float | None = None
    fifty_two_week_low: float | None = None
    volume: float | None = None
    avg_volume_3m: float | None = None

    # Returns / distances
    change_1d_pct: float | None = None
    change_from_52w_low_pct: float | None = None
    change_from_52w_high_pct: float | None = None
    fifty_two_week_change_pct: float | None = None

    # Valuation
    market_cap: float | None = None
    pe_ratio: float | None = None
    peg_ratio: float | None = None
    price_to_sales: float | None = None
    price_to_book: float | None = None

    # Fundamentals
    profit_margin: float | None = None
    roe: float | None = None
    revenue_growth: float | None = None
    eps_growth: float | None = None

    # Risk
    beta: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "ticker", normalize_ticker(self.ticker))
        object.__setattr__(self, "company_name", sanitize_text(self.company_name))
        for name in numeric_field_names():
            object.__setattr__(self, name, safe_number(getattr(self, name)))

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> MarketSnapshot:
        """Build a snapshot from snake_case or camelCase keys; unknown keys are ignored."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = SNAPSHOT_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def numeric_field_names() -> tuple[str, ...]:
    """Names of every numeric MarketSnapshot field, in declaration order."""
    return tuple(f.name for f in fields(MarketSnapshot) if f.name not in _IDENTITY_FIELDS)


@dataclass(frozen=True)
class FactorScores:
    """The five independent factor scores, each an int in [0, 100]."""

    value: int
    growth: int
    quality: int
    momentum: int
    risk: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class MarketAnalysis:
    """Scores, rating and narrative produced for one snapshot."""

    rating: Rating
    conviction: int
    tone_score: int
    growth_score: int
    profitability_score: int
    valuation_score: int
    balance_score: int
    health_score: int
    summary: str
    thesis: str
    key_risks: tuple[str, ...]

    def named_scores(self) -> dict[str, int]:
        """The six named scores keyed by their short names."""
        return {
            "tone": self.tone_score,
            "growth": self.growth_score,
            "profitability": self.profitability_score,
            "valuation": self.valuation_score,
            "balance": self.balance_score,
            "health": self.health_score,
        }

    def to_dict(self) -> dict[str, Any]:
        """Render with the camelCase wire names consumers persist and display."""
        return {
            "rating": self.rating.value,
            "conviction": self.conviction,
            "toneScore": self.tone_score,
            "growthScore": self.growth_score,
            "profitabilityScore": self.profitability_score,
            "valuationScore": self.valuation_score,
            "balanceScore": self.balance_score,
            "healthScore": self.health_score,
            "summary": self.summary,
            "thesis": self.thesis,
            "keyRisks": list(self.key_risks),
        }
