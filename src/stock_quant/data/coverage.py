"""Snapshot data-coverage assessment.

Reports which factor inputs were actually present, so callers (and the
narrative caveats) can tell a neutral score from an uninformed one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stock_quant.models import MarketSnapshot, numeric_field_names

# Snapshot fields feeding each factor group
COVERAGE_GROUPS: dict[str, tuple[str, ...]] = {
    "valuation": ("pe_ratio", "price_to_sales", "price_to_book", "peg_ratio"),
    "growth_fundamentals": ("revenue_growth", "eps_growth"),
    "price_growth": (
        "fifty_two_week_change_pct",
        "price",
        "fifty_two_week_low",
        "fifty_two_week_high",
    ),
    "profitability": ("profit_margin", "roe"),
    "momentum": (
        "change_1d_pct",
        "fifty_two_week_change_pct",
        "change_from_52w_high_pct",
    ),
    "risk": ("beta", "market_cap"),
}


@dataclass(frozen=True)
class SnapshotCoverage:
    """Result of snapshot coverage assessment."""

    groups: dict[str, dict[str, int]] = field(default_factory=dict)
    has_profitability: bool = False
    has_growth_fundamentals: bool = False
    fields_present: int = 0
    fields_total: int = 0

    @property
    def is_empty(self) -> bool:
        return self.fields_present == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "groups": {name: dict(counts) for name, counts in self.groups.items()},
            "has_profitability": self.has_profitability,
            "has_growth_fundamentals": self.has_growth_fundamentals,
            "fields_present": self.fields_present,
            "fields_total": self.fields_total,
            "is_empty": self.is_empty,
        }


def _present(snapshot: MarketSnapshot, name: str) -> bool:
    return getattr(snapshot, name) is not None


def assess_snapshot_coverage(snapshot: MarketSnapshot) -> SnapshotCoverage:
    """
    Count present numeric fields, overall and per factor group.

    Profitability counts as covered only when both margin and ROE are
    present; growth fundamentals only when both revenue and EPS growth are.

    Returns:
        SnapshotCoverage with per-group present/expected counts
    """
    groups = {
        name: {
            "present": sum(1 for f in group_fields if _present(snapshot, f)),
            "expected": len(group_fields),
        }
        for name, group_fields in COVERAGE_GROUPS.items()
    }

    numeric = numeric_field_names()

    return SnapshotCoverage(
        groups=groups,
        has_profitability=_present(snapshot, "profit_margin") and _present(snapshot, "roe"),
        has_growth_fundamentals=(
            _present(snapshot, "revenue_growth") and _present(snapshot, "eps_growth")
        ),
        fields_present=sum(1 for f in numeric if _present(snapshot, f)),
        fields_total=len(numeric),
    )
