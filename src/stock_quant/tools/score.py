"""Single-snapshot scoring tools."""

from time import perf_counter
from typing import Any

from stock_quant.data.quote import snapshot_from_quote
from stock_quant.models import MarketSnapshot
from stock_quant.scoring.engine import run_quant_pipeline
from stock_quant.utils.normalize import analysis_fingerprint
from stock_quant.utils.provenance import build_error_response, build_meta


def build_score_response(snapshot: MarketSnapshot, tool: str, start_time: float) -> dict[str, Any]:
    """Score a snapshot and wrap it with coverage, factors and metadata."""
    result = run_quant_pipeline(snapshot)
    coverage = result.coverage

    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta(tool, duration_ms),
        "ticker": snapshot.ticker,
        "company_name": snapshot.company_name,
        "analysis": result.analysis.to_dict(),
        "factors": result.factors.to_dict(),
        "data_coverage": coverage.to_dict(),
        "insufficient_data": coverage.is_empty,
        "fingerprint": analysis_fingerprint(result.analysis),
    }


def score_snapshot(snapshot: dict[str, Any]) -> dict[str, Any]:
    """
    Score one snapshot given as a dict of metrics.

    Args:
        snapshot: Snapshot fields (snake_case or camelCase names)

    Returns:
        Dict with analysis, factor scores, data coverage and fingerprint
    """
    start_time = perf_counter()

    if not isinstance(snapshot, dict):
        return build_error_response(
            error_type="invalid_input",
            message=f"snapshot must be an object, got {type(snapshot).__name__}",
            tool="score_snapshot",
        )

    return build_score_response(MarketSnapshot.from_dict(snapshot), "score_snapshot", start_time)


def score_quote(
    quote: dict[str, Any],
    financial_data: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Score a raw Yahoo-style quote payload.

    Args:
        quote: Quote node as returned by the provider
        financial_data: Optional financialData block

    Returns:
        Same shape as score_snapshot
    """
    start_time = perf_counter()

    if not isinstance(quote, dict):
        return build_error_response(
            error_type="invalid_input",
            message=f"quote must be an object, got {type(quote).__name__}",
            tool="score_quote",
        )
    if financial_data is not None and not isinstance(financial_data, dict):
        return build_error_response(
            error_type="invalid_input",
            message=f"financial_data must be an object, got {type(financial_data).__name__}",
            tool="score_quote",
        )

    snapshot = snapshot_from_quote(quote, financial_data)
    return build_score_response(snapshot, "score_quote", start_time)
