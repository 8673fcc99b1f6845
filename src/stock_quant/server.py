"""Stock Quant Scoring MCP Server using FastMCP."""

import json
import logging
import os
from typing import Any

from fastmcp import FastMCP

from stock_quant import SCHEMA_VERSION, SERVER_VERSION
from stock_quant.prompts.templates import get_prompt
from stock_quant.tools import rank_snapshots, score_quote, score_snapshot

# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
logger = logging.getLogger(__name__)

# Create FastMCP server instance
mcp = FastMCP(
    name="stock-quant",
)


# ============================================================================
# TOOLS
# ============================================================================


@mcp.tool
def score(snapshot: dict[str, Any]) -> str:
    """
    Score one company snapshot into ratings, scores and caveats.

    Every metric is optional; leave out anything unknown rather than sending 0.
    Returns are percents (15 = +15%), fundamentals are fractions (0.25 = 25%).

    Args:
        snapshot: Metrics such as ticker, companyName, price, fiftyTwoWeekHigh,
                  fiftyTwoWeekLow, change1dPct, fiftyTwoWeekChangePct,
                  changeFrom52wHighPct, marketCap, peRatio, pegRatio,
                  priceToSales, priceToBook, profitMargin, roe,
                  revenueGrowth, epsGrowth, beta

    Returns:
        JSON with rating, conviction, six named scores, thesis, key risks,
        factor scores, data coverage and a result fingerprint
    """
    result = score_snapshot(snapshot=snapshot)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
def score_raw_quote(quote: dict[str, Any], financial_data: dict[str, Any] | None = None) -> str:
    """
    Score a raw Yahoo-style quote payload.

    Args:
        quote: Quote node (regularMarketPrice, trailingPE, fiftyTwoWeekHigh, ...)
        financial_data: Optional financialData block (profitMargins, returnOnEquity, ...)

    Returns:
        JSON with the same shape as score
    """
    result = score_quote(quote=quote, financial_data=financial_data)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
def rank(
    snapshots: list[dict[str, Any]],
    risk_profile: str | None = None,
    limit: int | None = None,
) -> str:
    """
    Score several snapshots and rank them for a risk profile.

    Args:
        snapshots: List of snapshots, each with a ticker
        risk_profile: conservative, balanced or aggressive (default from DEFAULT_RISK_PROFILE)
        limit: Maximum ranked entries (default from RANK_LIMIT)

    Returns:
        JSON with ranked entries (profileScore included) and skipped tickers
    """
    result = rank_snapshots(snapshots=snapshots, risk_profile=risk_profile, limit=limit)
    return json.dumps(result, indent=2, default=str)


# ============================================================================
# PROMPTS
# ============================================================================


@mcp.prompt
def score_review(ticker: str) -> str:
    """Score one company's snapshot and present the result consistently."""
    result = get_prompt("score_review", {"ticker": ticker})
    if result:
        return result["messages"][0]["content"]
    return f"Score {ticker} using the score tool."


@mcp.prompt
def profile_shortlist(risk_profile: str = "balanced") -> str:
    """Rank several snapshots for a risk profile."""
    result = get_prompt("profile_shortlist", {"risk_profile": risk_profile})
    if result:
        return result["messages"][0]["content"]
    return f"Rank the candidate snapshots for a {risk_profile} profile using the rank tool."


# ============================================================================
# ENTRY POINT
# ============================================================================


def main() -> None:
    """Run the MCP server."""
    logger.info(f"Starting Stock Quant MCP Server v{SERVER_VERSION} (schema v{SCHEMA_VERSION})")
    mcp.run()


if __name__ == "__main__":
    main()
