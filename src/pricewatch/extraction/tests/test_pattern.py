"""Tests for regular-expression fragment extraction."""

import pytest

from pricewatch.core.errors import ConfigurationError
from pricewatch.extraction.models import MAX_FRAGMENT_LENGTH
from pricewatch.extraction.pattern import extract_by_pattern


def test_returns_first_capture_group() -> None:
    assert extract_by_pattern("Price: $49.99 USD", r"Price: \$([0-9.]+)") == "49.99"


def test_returns_whole_match_without_groups() -> None:
    assert extract_by_pattern("total 12,50 eur", r"\d+,\d{2}") == "12,50"


def test_returns_whole_match_when_group_did_not_participate() -> None:
    assert extract_by_pattern("123", r"(foo)?\d+") == "123"


def test_is_case_insensitive() -> None:
    assert extract_by_pattern("PRICE: 10", r"price: (\S+)") == "10"


def test_dot_matches_newline() -> None:
    html = '<div class="p">\n  19,95\n</div>'
    assert extract_by_pattern(html, r'<div class="p">(.*?)</div>') == "\n  19,95\n"


def test_multiline_anchors() -> None:
    html = "header\nprice=7\nfooter"
    assert extract_by_pattern(html, r"^price=(\d+)$") == "7"


def test_no_match_returns_none() -> None:
    assert extract_by_pattern("<html></html>", r"Price: (\d+)") is None


def test_invalid_pattern_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="invalid pattern"):
        extract_by_pattern("anything", "([0-9")


def test_fragment_is_truncated() -> None:
    html = "START" + "x" * (MAX_FRAGMENT_LENGTH + 1000) + "END"
    fragment = extract_by_pattern(html, "START(.*)END")
    assert fragment is not None
    assert len(fragment) == MAX_FRAGMENT_LENGTH
