"""Coerce already-retrieved quote payloads into a MarketSnapshot.

No network access happens here: the payloads come from whichever provider
the caller used. Only shape normalization and the derived percentages
live in this module.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from stock_quant.models import MarketSnapshot

# financialData key -> snapshot field
FINANCIAL_DATA_FIELDS: dict[str, str] = {
    "profitMargins": "profit_margin",
    "returnOnEquity": "roe",
    "revenueGrowth": "revenue_growth",
    "earningsGrowth": "eps_growth",
    "pegRatio": "peg_ratio",
    "priceToSalesTrailing12Months": "price_to_sales",
    "priceToBook": "price_to_book",
}


def to_number(value: Any) -> float | None:
    """
    Convert a provider value to a finite float or None.

    Handles plain numbers, {"raw": x} wrappers and numeric strings with
    %, comma or $ decoration. bools, NaN and inf are treated as missing.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Mapping):
        return to_number(value.get("raw"))
    if isinstance(value, (int, float)):
        try:
            num = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        cleaned = value.strip().replace("%", "").replace(",", "").replace("$", "")
        if not cleaned:
            return None
        try:
            num = float(cleaned)
        except ValueError:
            return None
    else:
        return None
    return num if math.isfinite(num) else None


def _first_number(data: Mapping[str, Any], *keys: str) -> float | None:
    for key in keys:
        num = to_number(data.get(key))
        if num is not None:
            return num
    return None


def _first_text(data: Mapping[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


def _pct_from(price: float | None, base: float | None) -> float | None:
    """Percent change of price relative to base; None if either is missing or base is 0."""
    if price is None or base is None or base == 0:
        return None
    return (price - base) / base * 100


def snapshot_from_quote(
    quote: Mapping[str, Any],
    financial_data: Mapping[str, Any] | None = None,
    symbol: str | None = None,
) -> MarketSnapshot:
    """
    Build a snapshot from a Yahoo-style quote node.

    Derived fields:
    - 1-day % from price and previous close when the provider omits it
    - distance from 52-week low/high in percent of the bound
    - 52-week change converted from a fraction to percent

    Values present in financial_data take precedence over the quote's.

    Args:
        quote: Quote node (regularMarketPrice, trailingPE, fiftyTwoWeekHigh, ...)
        financial_data: Optional financialData block with fundamentals
        symbol: Ticker to use when the quote carries none

    Returns:
        MarketSnapshot with every undeterminable field left absent
    """
    price = _first_number(quote, "regularMarketPrice", "currentPrice")
    prev_close = _first_number(quote, "regularMarketPreviousClose", "previousClose")
    high_52w = _first_number(quote, "fiftyTwoWeekHigh")
    low_52w = _first_number(quote, "fiftyTwoWeekLow")

    change_1d_pct = _first_number(quote, "regularMarketChangePercent")
    if change_1d_pct is None:
        change_1d_pct = _pct_from(price, prev_close)

    year_change = _first_number(quote, "fiftyTwoWeekChange", "52WeekChange")
    ticker = _first_text(quote, "symbol", "ticker") or symbol

    fields: dict[str, Any] = {
        "ticker": ticker,
        "company_name": _first_text(quote, "longName", "shortName") or ticker,
        "price": price,
        "prev_close": prev_close,
        "day_high": _first_number(quote, "regularMarketDayHigh"),
        "day_low": _first_number(quote, "regularMarketDayLow"),
        "fifty_two_week_high": high_52w,
        "fifty_two_week_low": low_52w,
        "volume": _first_number(quote, "regularMarketVolume"),
        "avg_volume_3m": _first_number(quote, "averageDailyVolume3Month"),
        "change_1d_pct": change_1d_pct,
        "change_from_52w_low_pct": _pct_from(price, low_52w),
        "change_from_52w_high_pct": _pct_from(price, high_52w),
        "fifty_two_week_change_pct": year_change * 100 if year_change is not None else None,
        "market_cap": _first_number(quote, "marketCap"),
        "pe_ratio": _first_number(quote, "trailingPE", "forwardPE"),
        "peg_ratio": _first_number(quote, "pegRatio"),
        "price_to_sales": _first_number(quote, "priceToSalesTrailing12Months"),
        "price_to_book": _first_number(quote, "priceToBook"),
        "beta": _first_number(quote, "beta"),
    }

    if financial_data:
        for key, name in FINANCIAL_DATA_FIELDS.items():
            num = to_number(financial_data.get(key))
            if num is not None:
                fields[name] = num

    return MarketSnapshot(**fields)
