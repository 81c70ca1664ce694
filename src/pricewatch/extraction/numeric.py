"""Locale-tolerant price parsing.

Grouping and decimal separators differ between locales ("1.234,56" in most of
Europe, "1,234.56" in the US). The parser treats every separator inside the
whole-number part as grouping and only an explicit trailing group of one or
two digits as the fraction, so both spellings give the same value.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

_SPACE_LIKE = str.maketrans({"\u00a0": " ", "\u202f": " "})

_PRICE_RE = re.compile(
    r"(?:[€$£] *)?"
    # 3-digit groups joined by separators, or a plain digit run
    r"([0-9]{1,3}(?:[., ][0-9]{3})+(?![0-9])|[0-9]+)"
    r"(?:[.,]([0-9]{1,2}))?"
    r"(?: *[€$£])?"
)
_GROUPING_RE = re.compile(r"[., ]")


def parse_price(text: str) -> Decimal | None:
    """Return the first price-looking number in ``text``, or ``None``."""
    if not text:
        return None

    match = _PRICE_RE.search(text.translate(_SPACE_LIKE))
    if match is None:
        return None

    whole = _GROUPING_RE.sub("", match.group(1))
    fraction = match.group(2)
    literal = f"{whole}.{fraction}" if fraction else whole

    try:
        value = Decimal(literal)
    except InvalidOperation:
        return None
    if not value.is_finite() or not math.isfinite(float(value)):
        return None
    return value


__all__ = ["parse_price"]
