"""Utility modules."""

from stock_quant.utils.numeric import (
    NEUTRAL_SCORE,
    average,
    average_or_none,
    clamp,
    round_half_up,
    safe_number,
)
from stock_quant.utils.sanitize import display_name, normalize_ticker, sanitize_text

__all__ = [
    "NEUTRAL_SCORE",
    "average",
    "average_or_none",
    "clamp",
    "round_half_up",
    "safe_number",
    "display_name",
    "normalize_ticker",
    "sanitize_text",
]
