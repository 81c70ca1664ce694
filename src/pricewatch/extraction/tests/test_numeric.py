"""Tests for locale-tolerant price parsing."""

from decimal import Decimal

import pytest

from pricewatch.extraction.numeric import parse_price


class TestSeparatorResolution:
    """EU and US spellings of the same amount parse identically."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1.234,56", Decimal("1234.56")),
            ("1,234.56", Decimal("1234.56")),
            ("1234", Decimal("1234")),
            ("1 234,56", Decimal("1234.56")),
            ("1.234.567,89", Decimal("1234567.89")),
            ("1,234,567.89", Decimal("1234567.89")),
            ("1234.56", Decimal("1234.56")),
            ("49,99", Decimal("49.99")),
            ("1,5", Decimal("1.5")),
        ],
    )
    def test_grouping_and_fraction(self, text: str, expected: Decimal) -> None:
        assert parse_price(text) == expected

    def test_three_digit_suffix_is_grouping(self) -> None:
        """A trailing group of three digits is thousands, not a fraction."""
        assert parse_price("1.234") == Decimal("1234")
        assert parse_price("1,234") == Decimal("1234")


class TestCurrencyAndWhitespace:
    def test_leading_euro_symbol(self) -> None:
        assert parse_price("€1.299,00") == Decimal("1299.00")

    def test_trailing_euro_symbol(self) -> None:
        assert parse_price("49,99 €") == Decimal("49.99")

    def test_dollar_with_space(self) -> None:
        assert parse_price("$ 49.99") == Decimal("49.99")

    def test_pound(self) -> None:
        assert parse_price("£5") == Decimal("5")

    def test_non_breaking_space_grouping(self) -> None:
        assert parse_price("1\u00a0234,50\u00a0€") == Decimal("1234.50")

    def test_narrow_non_breaking_space_grouping(self) -> None:
        assert parse_price("1\u202f234,50") == Decimal("1234.50")

    def test_first_number_wins(self) -> None:
        assert parse_price("Was 10.00, now 8.00") == Decimal("10.00")


class TestNotFound:
    @pytest.mark.parametrize("text", ["", "Out of stock", "€", "price: n/a"])
    def test_no_number(self, text: str) -> None:
        assert parse_price(text) is None

    def test_empty_fragment_is_none_not_zero(self) -> None:
        result = parse_price("")
        assert result is None
        assert result != Decimal("0")

    def test_overflowing_value_is_none(self) -> None:
        assert parse_price("9" * 400) is None

    def test_long_input_without_digits_returns(self) -> None:
        assert parse_price(" " * 200_000 + "€" + " " * 200_000) is None


class TestIdempotence:
    @pytest.mark.parametrize(
        "text", ["1.234,56", "1,234.56", "1234", "€1.299,00", "$49.99", "0,5", "12 345"]
    )
    def test_reparsing_canonical_form(self, text: str) -> None:
        value = parse_price(text)
        assert value is not None
        assert parse_price(str(value)) == value
