"""Tests for logging setup."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from decimal import Decimal

import pytest

from pricewatch.core.observability.logging import PriceWatchJsonFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_format_is_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    setup_logging("debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, PriceWatchJsonFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_json_record_fields(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    setup_logging("INFO")
    formatter = logging.getLogger().handlers[0].formatter
    record = logging.LogRecord(
        "pricewatch.test", logging.WARNING, __file__, 1, "price missing", None, None
    )
    record.item = "Kettle"

    payload = json.loads(formatter.format(record))

    assert payload["level"] == "WARNING"
    assert payload["name"] == "pricewatch.test"
    assert payload["message"] == "price missing"
    assert payload["item"] == "Kettle"
    assert payload["service"] == "pricewatch"
    assert payload["timestamp"]


def test_text_format_uses_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    from rich.logging import RichHandler

    monkeypatch.setenv("LOG_FORMAT", "text")

    setup_logging("INFO")

    assert isinstance(logging.getLogger().handlers[0], RichHandler)


def test_json_record_carries_environment_and_exact_prices(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    setup_logging("INFO", environment="production")
    formatter = logging.getLogger().handlers[0].formatter
    record = logging.LogRecord(
        "pricewatch.tracker.service", logging.INFO, __file__, 1, "Price checked", None, None
    )
    record.item = "Kettle"
    record.price = Decimal("1299.00")
    record.previous = Decimal("1E+3")

    payload = json.loads(formatter.format(record))

    assert payload["environment"] == "production"
    assert payload["price"] == "1299.00"
    assert payload["previous"] == "1000"
