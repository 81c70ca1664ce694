"""Background scheduler running the price report once a day."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta
from typing import Any

logger = logging.getLogger(__name__)


class DailyReportScheduler:
    """Run ``run_report`` every day at ``report_time`` (UTC hour, minute)."""

    def __init__(
        self,
        run_report: Callable[[], Awaitable[Any]],
        report_time: tuple[int, int] = (8, 0),
    ) -> None:
        self._run_report = run_report
        self.report_time = report_time
        self._running = False
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._running

    def seconds_until_next_run(self, now: datetime) -> float:
        """Seconds from ``now`` to the next occurrence of ``report_time``."""
        hour, minute = self.report_time
        next_run = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
        if next_run <= now:
            next_run += timedelta(days=1)
        return (next_run - now).total_seconds()

    async def start(self) -> None:
        """Start the background scheduler."""
        if self._running:
            logger.warning("Scheduler already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info("Daily report scheduler started", extra={"report_time": self.report_time})

    async def stop(self) -> None:
        """Stop the scheduler gracefully."""
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("Daily report scheduler stopped")

    async def _run_loop(self) -> None:
        while self._running:
            await asyncio.sleep(self.seconds_until_next_run(datetime.now(UTC)))
            try:
                await self._run_report()
            except Exception as e:
                logger.error(f"Scheduled report failed: {e}", exc_info=True)


__all__ = ["DailyReportScheduler"]
