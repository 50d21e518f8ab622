"""
Core Utility Functions.

Small helpers shared by the catalog and results packages.
"""

import math
import re
from collections import Counter
from typing import Any, Dict, List
from urllib.parse import urlparse


HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-F]{6}$", re.IGNORECASE)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up.

    Python's round() uses banker's rounding (round(12.5) == 12); the
    percentages shown to users have always rounded 12.5 to 13.

    Examples:
        >>> round_half_up(12.5)
        13
        >>> round_half_up(33.333)
        33
    """
    return int(math.floor(value + 0.5))


def percentage_of(count: int, total: int) -> int:
    """Share of ``total`` that ``count`` represents, as a rounded integer percentage."""
    return round_half_up(count / total * 100)


def is_hex_color(value: str) -> bool:
    """True for ``#RRGGBB`` strings (either case)."""
    return bool(HEX_COLOR_PATTERN.match(value))


def is_valid_url(url: Any) -> bool:
    """
    Check that an image reference is usable.

    Absolute URLs (with scheme and host) and relative paths are both
    accepted, since catalogs ship with images next to the JSON file.

    Args:
        url: Candidate URL or path.

    Returns:
        True if the value is a non-empty string that is an absolute URL or
        a relative path.
    """
    if not isinstance(url, str) or not url:
        return False
    parsed = urlparse(url)
    if parsed.scheme and parsed.netloc:
        return True
    return url.startswith("./") or url.startswith("../") or "://" not in url


def most_common(values: List[str], limit: int = 5) -> List[Dict[str, Any]]:
    """
    Count values and return the most frequent ones.

    Ties keep first-seen order.

    Args:
        values: Values to count
        limit: Maximum number of entries returned

    Returns:
        List of ``{"tag": value, "count": n}`` dicts, most frequent first
    """
    ranked = Counter(values).most_common(limit)
    return [{"tag": tag, "count": count} for tag, count in ranked]
