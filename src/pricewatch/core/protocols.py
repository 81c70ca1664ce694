"""Protocols for the collaborators driven by the report run."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IFetcher(Protocol):
    """Fetch the raw HTML of a product page."""

    async def fetch(self, url: str, timeout_ms: int) -> str:
        """Return the response body.

        Raises:
            UpstreamError: non-2xx status, timeout or transport failure.
        """
        ...


@runtime_checkable
class IStateStore(Protocol):
    """Key/value store for the last observed price of each item."""

    def get(self, key: str) -> str | None: ...

    def put(self, key: str, value: str) -> None: ...


@runtime_checkable
class INotifier(Protocol):
    """Deliver a pre-formatted report to a channel."""

    async def send(self, text: str) -> bool:
        """Return True when the channel accepted the message. Never raises."""
        ...


__all__ = ["IFetcher", "INotifier", "IStateStore"]
