"""HTTP fetcher for product pages."""

from __future__ import annotations

import logging

import httpx

from pricewatch.core.config import (
    DEFAULT_ACCEPT_LANGUAGE,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_USER_AGENT,
)
from pricewatch.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class HttpFetcher:
    """Fetch page HTML with httpx, one client per request."""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        accept_language: str = DEFAULT_ACCEPT_LANGUAGE,
    ) -> None:
        self.headers = {
            "User-Agent": user_agent,
            "Accept-Language": accept_language,
        }

    async def fetch(self, url: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> str:
        """Return the body of ``url``.

        Raises:
            UpstreamError: on a non-2xx status, a timeout or a transport error.
        """
        try:
            async with httpx.AsyncClient(
                timeout=timeout_ms / 1000, follow_redirects=True
            ) as client:
                response = await client.get(url, headers=self.headers)
        except httpx.TimeoutException as exc:
            raise UpstreamError(f"timeout after {timeout_ms} ms", url=url) from exc
        except httpx.HTTPError as exc:
            message = str(exc) or exc.__class__.__name__
            raise UpstreamError(message, url=url) from exc

        if not response.is_success:
            logger.debug("Fetch of %s returned %d", url, response.status_code)
            raise UpstreamError(
                f"HTTP {response.status_code}", url=url, status_code=response.status_code
            )
        return response.text


__all__ = ["HttpFetcher"]
