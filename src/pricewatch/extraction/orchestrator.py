"""Ordered fallback chain over the extraction strategies."""

from __future__ import annotations

import logging
from decimal import Decimal

from pricewatch.extraction.models import ExtractionHints
from pricewatch.extraction.numeric import parse_price
from pricewatch.extraction.pattern import extract_by_pattern
from pricewatch.extraction.structural import DocumentScanner, extract_by_selector

logger = logging.getLogger(__name__)


async def extract_price(
    html: str,
    hints: ExtractionHints | None = None,
    scanner: DocumentScanner | None = None,
) -> Decimal | None:
    """Extract a single price from ``html``.

    Strategies run in fixed order and the first one that applies wins:

    1. ``hints.pattern``: when the pattern matches, its fragment decides the
       outcome. A fragment without a parseable number yields ``None`` and the
       selector and whole-document strategies are NOT consulted.
    2. ``hints.selector``: text or ``hints.attribute`` of the matched elements.
    3. The first price-looking number anywhere in the raw document.

    Raises:
        ConfigurationError: the pattern or selector cannot be compiled.
    """
    hints = hints or ExtractionHints()

    if hints.pattern:
        fragment = extract_by_pattern(html, hints.pattern)
        if fragment is not None:
            price = parse_price(fragment)
            logger.debug(
                "Pattern matched",
                extra={"strategy": "pattern", "found": price is not None},
            )
            return price

    if hints.selector:
        fragment = await extract_by_selector(
            html, hints.selector, hints.attribute, scanner=scanner
        )
        price = parse_price(fragment)
        if price is not None:
            logger.debug("Price extracted via selector", extra={"strategy": "selector"})
            return price

    price = parse_price(html)
    logger.debug(
        "Whole document scanned",
        extra={"strategy": "document", "found": price is not None},
    )
    return price


__all__ = ["extract_price"]
