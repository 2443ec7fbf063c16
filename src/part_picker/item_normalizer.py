"""Shared label parsing, search normalization and quantity coercion."""

import math
import re
import unicodedata
from typing import Any

from .models import UNCATEGORIZED

_LABEL_PATTERN = re.compile(r"^\s*\[([^\]]+)\]\s*(.*)$", re.DOTALL)
_WHITESPACE = re.compile(r"[\s\ufeff]+")


def parse_label(raw: Any, default_category: str = UNCATEGORIZED) -> tuple[str, str]:
    """Split a raw label like ``[동물] 강아지`` into ``(category, name)``.

    A label that is only a category tag uses the category as its name.
    Labels without a tag fall into ``default_category``.
    """
    text = "" if raw is None else str(raw).strip()
    match = _LABEL_PATTERN.match(text)
    if not match:
        return default_category, text

    category = match.group(1).strip() or default_category
    name = match.group(2).strip() or category
    return category, name


def normalize_search(text: str | None) -> str:
    """Canonicalize text for whitespace- and case-insensitive matching."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", str(text)).lower()
    return _WHITESPACE.sub("", decomposed)


def matches_query(name: str, query: str | None) -> bool:
    """Check whether a name contains the query once both are normalized."""
    needle = normalize_search(query)
    if not needle:
        return True
    return needle in normalize_search(name)


def to_number(value: Any) -> float | None:
    """Read a cell or user input as a number, or None if it is not one."""
    if value is None:
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    # float() accepts digit separators like "1_0"; spreadsheets do not.
    if not text or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def coerce_quantity(value: Any) -> int:
    """Coerce any input to a positive integer quantity, falling back to 1."""
    number = to_number(value)
    if number is None or not math.isfinite(number):
        return 1
    return max(1, math.floor(number))
