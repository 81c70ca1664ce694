"""Report delivery via the Telegram Bot API."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


class TelegramNotifier:
    """Send the daily report to a Telegram chat."""

    DEFAULT_API_BASE = "https://api.telegram.org"

    def __init__(
        self,
        bot_token: str | None,
        chat_id: str | None,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 30.0,
    ) -> None:
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.bot_token and self.chat_id)

    async def send(self, text: str) -> bool:
        """Post ``text`` as a Markdown message. Failures are logged, not raised."""
        if not self.enabled:
            logger.warning("Telegram token or chat id not configured; report not sent")
            return False

        url = f"{self.api_base}/bot{self.bot_token}/sendMessage"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    url,
                    json={"chat_id": self.chat_id, "text": text, "parse_mode": "Markdown"},
                )
        except httpx.HTTPError as e:
            logger.error(f"Telegram send error: {e}")
            return False

        if response.status_code == 200:
            logger.info("Report sent to Telegram", extra={"chat_id": self.chat_id})
            return True
        logger.error(f"Failed to send Telegram message: {response.status_code} - {response.text}")
        return False


__all__ = ["TelegramNotifier"]
