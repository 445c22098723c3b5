"""Helpers for turning raw scraper values into canonical field values."""

import re
from typing import Any

HASHTAG_RE = re.compile(r"#\w+")

_MULTIPLIERS = {
    "K": 1_000,
    "M": 1_000_000,
    "B": 1_000_000_000,
}


def normalize_count(value: Any) -> int | None:
    """
    Convert a raw count to an integer.

    Examples:
        "1.2K" -> 1200
        "1M" -> 1000000
        "1,234" -> 1234
        12.0 -> 12
        None -> None
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)

    text = str(value).strip().upper().replace(",", "")
    if not text:
        return None

    for suffix, multiplier in _MULTIPLIERS.items():
        if text.endswith(suffix):
            try:
                return int(round(float(text[:-1]) * multiplier))
            except ValueError:
                return None

    try:
        return int(float(text))
    except ValueError:
        return None


def extract_hashtags(text: str | None) -> list[str]:
    """Lower-cased hashtags in order of appearance."""
    if not text:
        return []
    return [tag.lower() for tag in HASHTAG_RE.findall(text)]


def optional_str(value: Any) -> str | None:
    """Non-empty string or None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None
