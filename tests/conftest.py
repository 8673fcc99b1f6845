"""Pytest configuration and fixtures."""

import pytest

from stock_quant.models import MarketSnapshot


@pytest.fixture
def empty_snapshot() -> MarketSnapshot:
    """Snapshot with every field absent."""
    return MarketSnapshot()


@pytest.fixture
def reference_snapshot() -> MarketSnapshot:
    """Mid-quality large cap with full fundamentals but no return fields.

    Reference scores: value 85, growth 50, quality 50, momentum 50, risk 43,
    balance 58, health 56 -> HOLD with conviction 41.
    """
    return MarketSnapshot(
        ticker="REF",
        company_name="Reference Corp",
        price=100.0,
        fifty_two_week_low=80.0,
        fifty_two_week_high=120.0,
        pe_ratio=12.0,
        profit_margin=0.20,
        roe=0.20,
        revenue_growth=0.15,
        eps_growth=0.20,
        beta=1.0,
        market_cap=5e10,
    )


@pytest.fixture
def strong_snapshot() -> MarketSnapshot:
    """Every growth/quality/momentum input at or beyond the top of its band."""
    return MarketSnapshot(
        ticker="UP",
        company_name="Upside Inc",
        pe_ratio=10.0,
        revenue_growth=0.35,
        eps_growth=0.45,
        fifty_two_week_change_pct=150.0,
        profit_margin=0.35,
        roe=0.35,
        change_1d_pct=5.0,
        change_from_52w_high_pct=0.0,
        beta=0.8,
        market_cap=1e9,
    )


@pytest.fixture
def weak_snapshot() -> MarketSnapshot:
    """Loss-making, shrinking, falling company."""
    return MarketSnapshot(
        ticker="DOWN",
        company_name="Downside Ltd",
        pe_ratio=-5.0,
        revenue_growth=-0.10,
        eps_growth=-0.20,
        fifty_two_week_change_pct=-50.0,
        profit_margin=-0.05,
        roe=0.0,
        change_1d_pct=-6.0,
        change_from_52w_high_pct=-70.0,
        beta=2.0,
        market_cap=1e13,
    )
