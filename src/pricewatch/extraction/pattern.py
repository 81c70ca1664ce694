"""Regular-expression based fragment extraction."""

from __future__ import annotations

import re

from pricewatch.core.errors import ConfigurationError
from pricewatch.extraction.models import MAX_FRAGMENT_LENGTH

_PATTERN_FLAGS = re.IGNORECASE | re.MULTILINE | re.DOTALL


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a user supplied pattern with the extraction flags."""
    try:
        return re.compile(pattern, _PATTERN_FLAGS)
    except re.error as exc:
        raise ConfigurationError(f"invalid pattern {pattern!r}: {exc}") from exc


def extract_by_pattern(html: str, pattern: str) -> str | None:
    """Return capture group 1 (or the whole match) of ``pattern`` in ``html``.

    Returns ``None`` when the pattern does not match. The fragment is cut to
    ``MAX_FRAGMENT_LENGTH`` characters.
    """
    match = compile_pattern(pattern).search(html)
    if match is None:
        return None

    fragment = match.group(1) if match.re.groups and match.group(1) is not None else None
    if fragment is None:
        fragment = match.group(0)
    return fragment[:MAX_FRAGMENT_LENGTH]


__all__ = ["compile_pattern", "extract_by_pattern"]
