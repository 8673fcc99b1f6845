"""Text sanitization for identity fields that end up in narrative text."""

import re
from typing import Any

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def sanitize_text(text: Any, max_length: int = 120) -> str | None:
    """
    Sanitize an untrusted identity string (company name, ticker).

    Removes control characters, collapses to stripped text and truncates to
    max_length. Non-strings and blank strings are treated as absent.

    Args:
        text: Value to sanitize (may be None or a non-string)
        max_length: Maximum length before truncation

    Returns:
        Sanitized text, or None when nothing usable remains
    """
    if not isinstance(text, str):
        return None

    text = _CONTROL_CHARS.sub("", text).strip()
    if not text:
        return None

    if len(text) > max_length:
        text = text[:max_length].rstrip() + "..."

    return text


def normalize_ticker(ticker: Any) -> str | None:
    """Uppercase and strip a ticker symbol; blank or non-string becomes None."""
    cleaned = sanitize_text(ticker, max_length=20)
    return cleaned.upper() if cleaned else None


def display_name(company_name: str | None, ticker: str | None) -> str:
    """Name used in narrative text: company name, then ticker, then a placeholder."""
    return company_name or ticker or "this company"
