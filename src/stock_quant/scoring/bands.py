"""Band mapping: raw ratios -> bounded scores."""

from __future__ import annotations

from stock_quant.utils.numeric import NEUTRAL_SCORE, round_half_up, safe_number

BAND_FLOOR = 10
BAND_CEILING = 95

# P/E curve breakpoints: (pe_from, pe_to, score_from, score_to)
PE_SEGMENTS: tuple[tuple[float, float, float, float], ...] = (
    (5.0, 15.0, 95.0, 80.0),
    (15.0, 30.0, 80.0, 55.0),
    (30.0, 60.0, 55.0, 40.0),
)
PE_NEGATIVE_SCORE = 20
PE_FALLTHROUGH_SCORE = 35


def score_from_band_or_none(value: float | None, lo: float, hi: float) -> float | None:
    """
    Linearly map value from [lo, hi] onto [10, 95], saturating at the edges.

    Args:
        value: Raw metric (None if absent)
        lo: Value scored 10 (and anything below it)
        hi: Value scored 95 (and anything above it)

    Returns:
        Unrounded score, or None if value is absent
    """
    value = safe_number(value)
    if value is None:
        return None
    if value <= lo:
        return BAND_FLOOR
    if value >= hi:
        return BAND_CEILING
    t = (value - lo) / (hi - lo)
    return BAND_FLOOR + t * (BAND_CEILING - BAND_FLOOR)


def score_from_band(value: float | None, lo: float, hi: float) -> float:
    """Same as score_from_band_or_none, but an absent value scores neutral (50)."""
    score = score_from_band_or_none(value, lo, hi)
    return NEUTRAL_SCORE if score is None else score


def score_from_pe(pe: float | None) -> int | None:
    """P/E curve: cheap earnings score high, expensive earnings decay to 35.

    Negative or zero earnings score 20. Multiples between 0 and 5 match no
    segment and take the flat 35 branch, same as the very expensive tail.
    """
    pe = safe_number(pe)
    if pe is None:
        return None
    if pe <= 0:
        return PE_NEGATIVE_SCORE

    for i, (pe_from, pe_to, score_from, score_to) in enumerate(PE_SEGMENTS):
        # First segment is closed on both ends, later ones are (from, to]
        in_segment = pe_from <= pe <= pe_to if i == 0 else pe_from < pe <= pe_to
        if in_segment:
            t = (pe - pe_from) / (pe_to - pe_from)
            return round_half_up(score_from - t * (score_from - score_to))

    return PE_FALLTHROUGH_SCORE
