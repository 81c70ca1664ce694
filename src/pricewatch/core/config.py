"""Configuration management for the price watch service."""

from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, ClassVar, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Ensure .env values are loaded before settings initialisation.
load_dotenv()

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; PriceTrackerBot/1.0)"
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.9"
DEFAULT_TIMEOUT_MS = 20000

_REPORT_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    ENV_PREFIX: ClassVar[str] = "PRICEWATCH_"

    model_config = ConfigDict(extra="ignore")

    app_name: str = Field(default="Price Watch", description="Human friendly service name.")
    environment: Literal["development", "production", "test"] = Field(
        default="development",
        description="Runtime environment used for logging and diagnostics.",
    )
    host: str = Field(default="0.0.0.0", description="Host interface for the FastAPI server.")
    port: int = Field(default=8787, description="Listening port for the FastAPI server.")

    items_path: Path = Field(
        default=Path("config/items.yaml"),
        description="YAML (or JSON) file listing the tracked items.",
    )
    items_json: str | None = Field(
        default=None,
        description="Inline JSON list of tracked items. Takes precedence over items_path.",
    )
    state_path: Path = Field(
        default=Path("data/prices.sqlite"),
        description="Path to the SQLite database holding the last seen prices.",
    )

    telegram_bot_token: str | None = Field(default=None, description="Telegram bot token.")
    telegram_chat_id: str | None = Field(
        default=None, description="Chat that receives the daily report."
    )
    telegram_api_base: str = Field(
        default="https://api.telegram.org",
        description="Base URL of the Telegram Bot API.",
    )

    default_timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Fetch timeout used for items that do not set timeout_ms.",
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent for page fetches.")
    accept_language: str = Field(
        default=DEFAULT_ACCEPT_LANGUAGE, description="Accept-Language for page fetches."
    )

    report_time: str = Field(
        default="08:00",
        description="UTC time of day (HH:MM) at which the daily report runs.",
    )

    log_level: str = Field(default="INFO", description="Python logging level for the service.")

    def __init__(self, **data: Any) -> None:  # noqa: D401 - inherited docstring
        env_values = type(self)._load_environment_values()
        env_values.update(data)
        super().__init__(**env_values)

    @field_validator("report_time")
    @classmethod
    def _validate_report_time(cls, value: str) -> str:
        if not _REPORT_TIME_RE.match(value):
            raise ValueError("report_time must use the HH:MM 24-hour format")
        return value

    @property
    def report_hour_minute(self) -> tuple[int, int]:
        hour, minute = self.report_time.split(":")
        return int(hour), int(minute)

    @property
    def telegram_enabled(self) -> bool:
        return bool(self.telegram_bot_token and self.telegram_chat_id)

    @classmethod
    def _load_environment_values(cls) -> dict[str, Any]:
        """Return field values sourced from the current environment."""

        values: dict[str, Any] = {}
        for field_name in cls.model_fields:
            env_key = f"{cls.ENV_PREFIX}{field_name.upper()}"
            if env_key in os.environ:
                values[field_name] = os.environ[env_key]
        return values


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a singleton instance of :class:`Settings`."""

    return Settings()


__all__ = ["Settings", "get_settings"]
