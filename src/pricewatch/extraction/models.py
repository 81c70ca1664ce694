"""Shared types for price extraction."""

from dataclasses import dataclass

# Upper bound on any fragment handed to the numeric parser.
MAX_FRAGMENT_LENGTH = 5000


@dataclass(frozen=True)
class ExtractionHints:
    """Per-item hints steering the extraction strategies.

    ``attribute`` only applies together with ``selector``.
    """

    selector: str | None = None
    pattern: str | None = None
    attribute: str | None = None
