"""Snapshot construction and coverage assessment."""

from stock_quant.data.coverage import COVERAGE_GROUPS, SnapshotCoverage, assess_snapshot_coverage
from stock_quant.data.quote import FINANCIAL_DATA_FIELDS, snapshot_from_quote, to_number

__all__ = [
    # Coverage
    "COVERAGE_GROUPS",
    "SnapshotCoverage",
    "assess_snapshot_coverage",
    # Quote payloads
    "FINANCIAL_DATA_FIELDS",
    "snapshot_from_quote",
    "to_number",
]
