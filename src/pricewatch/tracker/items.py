"""Tracked item configuration."""

from __future__ import annotations

import json
import logging
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from pricewatch.core.config import Settings
from pricewatch.core.errors import ConfigurationError
from pricewatch.extraction.models import ExtractionHints

logger = logging.getLogger(__name__)


class TrackedItem(BaseModel):
    """A product page to check on every run.

    ``css``, ``regex`` and ``timeoutMs`` are accepted as alternative keys for
    ``selector``, ``pattern`` and ``timeout_ms``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    url: str = Field(min_length=1)
    selector: str | None = Field(
        default=None, validation_alias=AliasChoices("selector", "css")
    )
    pattern: str | None = Field(
        default=None, validation_alias=AliasChoices("pattern", "regex")
    )
    attribute: str | None = None
    currency: str | None = None
    enabled: bool = True
    timeout_ms: int | None = Field(
        default=None, gt=0, validation_alias=AliasChoices("timeout_ms", "timeoutMs")
    )

    @property
    def hints(self) -> ExtractionHints:
        return ExtractionHints(
            selector=self.selector or None,
            pattern=self.pattern or None,
            attribute=(self.attribute or None) if self.selector else None,
        )

    @property
    def state_key(self) -> str:
        return f"last:{self.name}"


_ITEMS_ADAPTER = TypeAdapter(list[TrackedItem])


def parse_items(raw: Any) -> list[TrackedItem]:
    """Validate a decoded list (or ``{"items": [...]}`` mapping) of items."""
    if raw is None:
        return []
    if isinstance(raw, dict):
        raw = raw.get("items") or []
    try:
        return _ITEMS_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid item configuration: {exc}") from exc


def load_items(settings: Settings) -> list[TrackedItem]:
    """Load tracked items from ``items_json`` or the ``items_path`` file."""
    if settings.items_json:
        try:
            raw = json.loads(settings.items_json)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"items_json is not valid JSON: {exc}") from exc
        return parse_items(raw)

    path = settings.items_path
    if not path.exists():
        logger.warning("Items file %s not found; no items configured", path)
        return []

    try:
        # YAML is a superset of JSON, so .json files load the same way
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"cannot read items file {path}: {exc}") from exc
    return parse_items(raw)


__all__ = ["TrackedItem", "load_items", "parse_items"]
