"""Prompt templates for snapshot scoring."""

from typing import Any

# Prompt definitions
PROMPTS = {
    "score_review": {
        "description": "Score one company's snapshot and present the result consistently",
        "arguments": [{"name": "ticker", "required": True}],
    },
    "profile_shortlist": {
        "description": "Rank several snapshots for a risk profile",
        "arguments": [{"name": "risk_profile", "required": False}],
    },
}


def list_prompts() -> list[dict[str, Any]]:
    """List available prompts."""
    return [
        {
            "name": name,
            "description": info["description"],
            "arguments": info["arguments"],
        }
        for name, info in PROMPTS.items()
    ]


def get_prompt(name: str, arguments: dict[str, str]) -> dict[str, Any] | None:
    """
    Get a prompt by name with arguments filled in.

    Returns dict with 'messages' key for MCP GetPromptResult.
    """
    if name not in PROMPTS:
        return None

    if name == "score_review":
        ticker = arguments.get("ticker", "").upper().strip()
        content = f"""Score {ticker}.

Gather a snapshot for {ticker} (price, 52-week range, P/E, PEG, P/S, P/B,
profit margin, ROE, revenue and EPS growth, beta, market cap). Leave any
metric you cannot find out of the snapshot; never send 0 for unknown values.

Call score_snapshot with that snapshot, then present:
1. Rating and conviction (analysis.rating, analysis.conviction)
2. The six named scores as a table (tone, growth, profitability,
   valuation, balance, health)
3. analysis.thesis verbatim
4. analysis.keyRisks as a bullet list
5. data_coverage: which groups were missing inputs

If insufficient_data is true, say the snapshot carried no usable metrics
instead of presenting the neutral scores as a view."""
    else:
        profile = arguments.get("risk_profile") or "balanced"
        content = f"""Build a {profile} shortlist.

Collect snapshots for the candidate tickers, call
rank_snapshots(snapshots, risk_profile="{profile}"), and present the ranked
entries in order with ticker, rating, profileScore and healthScore.
List the skipped tickers with their reason afterwards."""

    return {"messages": [{"role": "user", "content": content}]}
