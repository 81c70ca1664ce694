"""Price extraction pipeline.

Pattern, then selector, then whole-document parsing, returning the first
price found or ``None``.
"""

from pricewatch.extraction.models import MAX_FRAGMENT_LENGTH, ExtractionHints
from pricewatch.extraction.numeric import parse_price
from pricewatch.extraction.orchestrator import extract_price
from pricewatch.extraction.pattern import extract_by_pattern
from pricewatch.extraction.structural import extract_by_selector

__all__ = [
    "MAX_FRAGMENT_LENGTH",
    "ExtractionHints",
    "extract_by_pattern",
    "extract_by_selector",
    "extract_price",
    "parse_price",
]
