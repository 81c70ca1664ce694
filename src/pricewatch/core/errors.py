"""Exception hierarchy for price extraction and tracking.

A missing price is not an error: extraction returns ``None`` for that case.
The classes below cover the failures an operator has to act on.
"""

from __future__ import annotations


class PriceWatchError(Exception):
    """Base class for all Price Watch failures."""


class ConfigurationError(PriceWatchError):
    """A tracked item's rule or the item configuration itself is unusable.

    Raised for patterns that fail to compile, selectors that fail to parse and
    item files that cannot be read or validated. Kept apart from a missing
    price so that "bad rule" can be told from "site layout changed".
    """


class UpstreamError(PriceWatchError):
    """Fetching a product page failed (non-2xx status, timeout, transport)."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


__all__ = ["ConfigurationError", "PriceWatchError", "UpstreamError"]
