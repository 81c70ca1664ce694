"""Daily price report run."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation
from typing import Literal

from pricewatch.core.config import DEFAULT_TIMEOUT_MS, Settings
from pricewatch.core.errors import ConfigurationError, UpstreamError
from pricewatch.core.protocols import IFetcher, INotifier, IStateStore
from pricewatch.extraction import extract_price
from pricewatch.tracker.fetcher import HttpFetcher
from pricewatch.tracker.formatting import format_delta, format_price
from pricewatch.tracker.items import TrackedItem
from pricewatch.tracker.notifier import TelegramNotifier
from pricewatch.tracker.stores import SqliteStateStore

logger = logging.getLogger(__name__)

ItemStatus = Literal["ok", "not_found", "invalid_rule", "error"]

ERROR_HINT = "\n_One or more items returned errors. Check selectors/regex or site changes._"


def _utc_today() -> date:
    return datetime.now(UTC).date()


@dataclass
class ItemOutcome:
    """What happened to one item during a run."""

    name: str
    status: ItemStatus
    line: str
    price: Decimal | None = None
    previous: Decimal | None = None
    changed: bool = False
    detail: str | None = None


@dataclass
class ReportResult:
    """The rendered report plus the counts behind it."""

    message: str
    tracked: int
    changes: int
    errors: int
    delivered: bool = False
    outcomes: list[ItemOutcome] = field(default_factory=list)


class PriceReportService:
    """Check every enabled item once and render a one-message report.

    Item failures never abort the run: they are counted and rendered as a
    one-line diagnostic in the report.
    """

    def __init__(
        self,
        fetcher: IFetcher,
        store: IStateStore,
        notifier: INotifier | None = None,
        default_timeout_ms: int = DEFAULT_TIMEOUT_MS,
        today: Callable[[], date] = _utc_today,
    ) -> None:
        self.fetcher = fetcher
        self.store = store
        self.notifier = notifier
        self.default_timeout_ms = default_timeout_ms
        self._today = today

    async def run(self, items: Sequence[TrackedItem], notify: bool = True) -> ReportResult:
        """Check ``items``, update stored prices and send the report."""
        active = [item for item in items if item.enabled]
        lines = [f"*Daily Price Report - {self._today().isoformat()}*"]
        outcomes: list[ItemOutcome] = []

        for item in active:
            outcome = await self.check_item(item)
            outcomes.append(outcome)
            lines.append(outcome.line)

        changes = sum(1 for outcome in outcomes if outcome.changed)
        errors = sum(1 for outcome in outcomes if outcome.status != "ok")

        if not active:
            lines.append("_No items configured._")
        if errors:
            lines.append(ERROR_HINT)
        lines.append(f"\nTracked {len(active)} item(s); {changes} change(s).")

        message = "\n".join(lines)
        logger.info(
            "Price report complete",
            extra={"tracked": len(active), "changes": changes, "errors": errors},
        )

        delivered = False
        if notify and self.notifier is not None:
            delivered = await self.notifier.send(message)

        return ReportResult(
            message=message,
            tracked=len(active),
            changes=changes,
            errors=errors,
            delivered=delivered,
            outcomes=outcomes,
        )

    async def check_item(self, item: TrackedItem) -> ItemOutcome:
        """Fetch, extract and compare a single item."""
        previous: Decimal | None = None
        try:
            html = await self.fetcher.fetch(item.url, item.timeout_ms or self.default_timeout_ms)
            price = await extract_price(html, item.hints)
            if price is not None:
                previous = self._previous_price(item)
                self.store.put(item.state_key, str(price))
        except ConfigurationError as e:
            logger.warning(f"Invalid rule for {item.name}: {e}", extra={"item": item.name})
            return ItemOutcome(
                name=item.name,
                status="invalid_rule",
                line=f"• *{item.name}*: invalid rule - {e}",
                detail=str(e),
            )
        except UpstreamError as e:
            logger.warning(f"Fetch failed for {item.name}: {e}", extra={"item": item.name})
            return ItemOutcome(
                name=item.name,
                status="error",
                line=f"• *{item.name}*: error - {e}",
                detail=str(e),
            )
        except Exception as e:
            logger.error(f"Failed to check {item.name}: {e}", exc_info=True)
            return ItemOutcome(
                name=item.name,
                status="error",
                line=f"• *{item.name}*: error - {e}",
                detail=str(e),
            )

        if price is None:
            logger.info("No price found", extra={"item": item.name, "url": item.url})
            return ItemOutcome(
                name=item.name,
                status="not_found",
                line=f"• *{item.name}*: could not find price",
            )

        changed = previous is None or previous != price
        logger.info(
            "Price checked",
            extra={"item": item.name, "price": price, "previous": previous, "changed": changed},
        )

        return ItemOutcome(
            name=item.name,
            status="ok",
            line=(
                f"• *{item.name}*: {format_price(item.currency, price)}"
                f"{format_delta(item.currency, price, previous)}"
            ),
            price=price,
            previous=previous,
            changed=changed,
        )

    def _previous_price(self, item: TrackedItem) -> Decimal | None:
        stored = self.store.get(item.state_key)
        if not stored:
            return None
        try:
            previous = Decimal(stored)
        except InvalidOperation:
            logger.warning(f"Ignoring unreadable stored price {stored!r} for {item.name}")
            return None
        return previous if previous.is_finite() else None


def create_report_service(settings: Settings) -> PriceReportService:
    """Wire the production collaborators from ``settings``."""
    return PriceReportService(
        fetcher=HttpFetcher(
            user_agent=settings.user_agent,
            accept_language=settings.accept_language,
        ),
        store=SqliteStateStore(settings.state_path),
        notifier=TelegramNotifier(
            settings.telegram_bot_token,
            settings.telegram_chat_id,
            api_base=settings.telegram_api_base,
        ),
        default_timeout_ms=settings.default_timeout_ms,
    )


__all__ = ["ItemOutcome", "PriceReportService", "ReportResult", "create_report_service"]
