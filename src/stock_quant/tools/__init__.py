"""Scoring tools exposed by the MCP server."""

from stock_quant.tools.rank import rank_snapshots
from stock_quant.tools.score import score_quote, score_snapshot

__all__ = [
    "rank_snapshots",
    "score_quote",
    "score_snapshot",
]
