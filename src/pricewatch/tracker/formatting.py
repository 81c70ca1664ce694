"""Price formatting for the report."""

from __future__ import annotations

from decimal import Decimal

DEFAULT_CURRENCY = "€"


def format_price(currency: str | None, value: Decimal) -> str:
    """``€1299.00`` style: symbol followed by exactly two decimals."""
    symbol = DEFAULT_CURRENCY if currency is None else currency
    return f"{symbol}{value:.2f}"


def format_delta(currency: str | None, price: Decimal, previous: Decimal | None) -> str:
    """Suffix describing how ``price`` moved since ``previous``."""
    if previous is None:
        return " (new)"
    if price == previous:
        return " (no change)"
    sign = "+" if price > previous else "-"
    return f" ({sign}{format_price(currency, abs(price - previous))})"


__all__ = ["DEFAULT_CURRENCY", "format_delta", "format_price"]
