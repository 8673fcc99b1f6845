"""Canonical serialization for diff-stable analysis output.

Two analyses of the same snapshot must serialize to the same bytes, so
collaborators that persist results can detect real changes by hash:
1. Key ordering: sorted at every level
2. NaN/inf: replaced with null before dumping
3. -0.0: normalized to 0.0
"""

from __future__ import annotations

import hashlib
import json
import math
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from stock_quant.models import MarketAnalysis

# Fingerprint format version - bump when the hashed payload changes
FINGERPRINT_VERSION = "1"


def canonical_dumps(obj: Any) -> str:
    """Produce canonical JSON string with sorted keys and minimal separators.

    Uses allow_nan=False to fail fast if NaN/inf values slip through
    sanitization.
    """
    return json.dumps(
        sanitize_nan_inf(obj),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def _is_nan_or_inf(x: Any) -> bool:
    if isinstance(x, bool) or not isinstance(x, float):
        return False
    return math.isnan(x) or math.isinf(x)


def _is_negative_zero(x: Any) -> bool:
    return isinstance(x, float) and x == 0.0 and math.copysign(1.0, x) < 0


def sanitize_nan_inf(obj: Any) -> Any:
    """Recursively replace NaN, inf, -inf with None and -0.0 with 0.0."""
    if isinstance(obj, dict):
        return {k: sanitize_nan_inf(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [sanitize_nan_inf(item) for item in obj]
    elif _is_nan_or_inf(obj):
        return None
    elif _is_negative_zero(obj):
        return 0.0
    return obj


def analysis_fingerprint(analysis: MarketAnalysis) -> str:
    """Short SHA-256 over the canonical JSON of an analysis."""
    payload = {"fingerprint_version": FINGERPRINT_VERSION, **analysis.to_dict()}
    digest = hashlib.sha256(canonical_dumps(payload).encode("utf-8")).hexdigest()
    return digest[:16]
