"""Null-tolerant numeric helpers shared by the scoring engine.

Absent data is always ``None``. Nothing in here raises on bad input: values
that are not finite real numbers are treated as absent.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

# Score used whenever a factor has no usable inputs
NEUTRAL_SCORE = 50


def clamp(v: float, lo: float, hi: float) -> float:
    """Restrict v to [lo, hi]."""
    return min(hi, max(lo, v))


def safe_number(x: Any) -> float | int | None:
    """Return x if it is a finite real number, else None.

    bools are rejected even though they subclass int: a flag is not a metric.
    """
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return None
    try:
        if not math.isfinite(x):
            return None
    except (TypeError, ValueError, OverflowError):
        return None
    return x


def round_half_up(x: float) -> int:
    """Round to the nearest int with .5 going up (never banker's rounding)."""
    return int(math.floor(x + 0.5))


def _present(scores: Iterable[float | None]) -> list[float]:
    return [s for s in scores if safe_number(s) is not None]


def average(scores: Iterable[float | None]) -> int:
    """Rounded mean of the present scores, or NEUTRAL_SCORE if none are present."""
    vals = _present(scores)
    if not vals:
        return NEUTRAL_SCORE
    return round_half_up(sum(vals) / len(vals))


def average_or_none(scores: Iterable[float | None]) -> int | None:
    """Rounded mean of the present scores, or None if none are present.

    Used where "no information" must reach a caller that applies its own
    fallback policy.
    """
    vals = _present(scores)
    if not vals:
        return None
    return round_half_up(sum(vals) / len(vals))
