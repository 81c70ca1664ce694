"""Tests for tracked item configuration."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pricewatch.core.config import Settings
from pricewatch.core.errors import ConfigurationError
from pricewatch.extraction import ExtractionHints
from pricewatch.tracker.items import TrackedItem, load_items, parse_items


class TestTrackedItem:
    def test_defaults(self) -> None:
        item = TrackedItem(name="Kettle", url="https://shop.example/kettle")
        assert item.enabled is True
        assert item.timeout_ms is None
        assert item.hints == ExtractionHints()
        assert item.state_key == "last:Kettle"

    def test_alternative_key_names_are_accepted(self) -> None:
        item = TrackedItem.model_validate(
            {
                "name": "Kettle",
                "url": "https://shop.example/kettle",
                "css": ".price",
                "regex": r"(\d+,\d\d)",
                "timeoutMs": 5000,
            }
        )
        assert item.selector == ".price"
        assert item.pattern == r"(\d+,\d\d)"
        assert item.timeout_ms == 5000

    def test_hints_forward_attribute_with_selector(self) -> None:
        item = TrackedItem(
            name="Kettle",
            url="https://shop.example/kettle",
            selector="meta[itemprop=price]",
            attribute="content",
        )
        assert item.hints == ExtractionHints(
            selector="meta[itemprop=price]", attribute="content"
        )

    def test_hints_drop_attribute_without_selector(self) -> None:
        item = TrackedItem(name="Kettle", url="https://shop.example/k", attribute="content")
        assert item.hints.attribute is None

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValueError):
            TrackedItem(name="Kettle", url="https://shop.example/k", timeout_ms=0)


class TestParseItems:
    def test_mapping_with_items_key(self) -> None:
        items = parse_items({"items": [{"name": "A", "url": "https://a.example"}]})
        assert [item.name for item in items] == ["A"]

    def test_none_is_empty(self) -> None:
        assert parse_items(None) == []

    def test_invalid_entry_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="invalid item configuration"):
            parse_items([{"name": "missing url"}])


class TestLoadItems:
    def test_from_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "items.yaml"
        path.write_text(
            """
- name: Kettle
  url: https://shop.example/kettle
  selector: .price
  currency: "$"
- name: Toaster
  url: https://shop.example/toaster
  enabled: false
""",
            encoding="utf-8",
        )
        items = load_items(Settings(items_path=path, items_json=None))
        assert [item.name for item in items] == ["Kettle", "Toaster"]
        assert items[0].currency == "$"
        assert items[1].enabled is False

    def test_from_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "items.json"
        path.write_text(json.dumps([{"name": "A", "url": "https://a.example"}]), encoding="utf-8")
        items = load_items(Settings(items_path=path, items_json=None))
        assert items[0].name == "A"

    def test_inline_json_wins(self, tmp_path: Path) -> None:
        path = tmp_path / "items.yaml"
        path.write_text("- name: FromFile\n  url: https://file.example\n", encoding="utf-8")
        settings = Settings(
            items_path=path,
            items_json=json.dumps([{"name": "FromEnv", "url": "https://env.example"}]),
        )
        assert [item.name for item in load_items(settings)] == ["FromEnv"]

    def test_missing_file_means_no_items(self, tmp_path: Path) -> None:
        settings = Settings(items_path=tmp_path / "absent.yaml", items_json=None)
        assert load_items(settings) == []

    def test_invalid_inline_json(self) -> None:
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_items(Settings(items_json="[{"))

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "items.yaml"
        path.write_text("- name: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="cannot read items file"):
            load_items(Settings(items_path=path, items_json=None))
