"""Multi-snapshot ranking tool."""

import logging
import os
from time import perf_counter
from typing import Any

from stock_quant.models import MarketSnapshot
from stock_quant.scoring.engine import compute_quant_analysis
from stock_quant.scoring.profiles import is_all_neutral, parse_risk_profile, rank_analyses
from stock_quant.utils.provenance import build_error_response, build_meta

logger = logging.getLogger(__name__)

DEFAULT_RISK_PROFILE = os.environ.get("DEFAULT_RISK_PROFILE", "balanced")
RANK_LIMIT = int(os.environ.get("RANK_LIMIT", "8"))


def rank_snapshots(
    snapshots: list[dict[str, Any]],
    risk_profile: str | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    """
    Score several snapshots and rank them for a risk profile.

    Snapshots whose scores are all neutral carry no signal and are reported
    under "skipped" instead of being ranked. Duplicate tickers keep the
    first occurrence that carries a signal.

    Args:
        snapshots: List of snapshot dicts, each with a ticker
        risk_profile: conservative, balanced or aggressive
        limit: Maximum ranked entries (default RANK_LIMIT)

    Returns:
        Dict with ranked entries, skipped tickers and the profile used
    """
    start_time = perf_counter()

    if not isinstance(snapshots, list):
        return build_error_response(
            error_type="invalid_input",
            message=f"snapshots must be a list, got {type(snapshots).__name__}",
            tool="rank_snapshots",
        )

    limit = RANK_LIMIT if limit is None else limit
    if limit < 0:
        return build_error_response(
            error_type="invalid_input",
            message=f"limit must be non-negative, got {limit}",
            tool="rank_snapshots",
        )

    profile = parse_risk_profile(risk_profile or DEFAULT_RISK_PROFILE)

    scored = []
    skipped: list[dict[str, Any]] = []
    seen: set[str] = set()

    for i, raw in enumerate(snapshots):
        if not isinstance(raw, dict):
            skipped.append({"index": i, "reason": "not_an_object"})
            continue
        snapshot = MarketSnapshot.from_dict(raw)
        ticker = snapshot.ticker
        if ticker is None:
            skipped.append({"index": i, "reason": "missing_ticker"})
            continue
        if ticker in seen:
            skipped.append({"index": i, "ticker": ticker, "reason": "duplicate_ticker"})
            continue

        analysis = compute_quant_analysis(snapshot)
        if is_all_neutral(analysis):
            skipped.append({"index": i, "ticker": ticker, "reason": "all_scores_neutral"})
            continue
        seen.add(ticker)
        scored.append((ticker, analysis))

    ranked = rank_analyses(scored, profile, limit=limit, skip_neutral=False)
    logger.info(
        f"Ranked {len(ranked)} of {len(snapshots)} snapshots for {profile.value} profile "
        f"({len(skipped)} skipped)"
    )

    duration_ms = (perf_counter() - start_time) * 1000

    return {
        "meta": build_meta("rank_snapshots", duration_ms),
        "risk_profile": profile.value,
        "ranked": [r.to_dict() for r in ranked],
        "skipped": skipped,
    }
