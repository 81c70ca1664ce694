"""FastAPI application: manual report trigger and extraction endpoint."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse

from pricewatch.core.config import Settings, get_settings
from pricewatch.core.errors import ConfigurationError
from pricewatch.core.observability.logging import setup_logging
from pricewatch.extraction import ExtractionHints, extract_price
from pricewatch.interfaces.http.schemas.extraction import (
    ExtractRequest,
    ExtractResponse,
    HealthStatus,
)
from pricewatch.tracker.formatting import format_price
from pricewatch.tracker.items import load_items
from pricewatch.tracker.scheduler import DailyReportScheduler
from pricewatch.tracker.service import PriceReportService, create_report_service

LOGGER = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, service: PriceReportService | None = None
) -> FastAPI:
    """Initialise the FastAPI application.

    Args:
        settings: Application settings. If None, uses get_settings().
        service: Pre-configured report service, mainly for tests.
    """

    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.environment)
    report_service = service or create_report_service(settings)

    async def run_report() -> str:
        items = load_items(settings)
        result = await report_service.run(items)
        return result.message

    scheduler = DailyReportScheduler(run_report, settings.report_hour_minute)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Run the daily scheduler for the lifetime of the app."""
        if settings.environment != "test":
            await scheduler.start()
        yield
        await scheduler.stop()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.report_service = report_service
    app.state.scheduler = scheduler

    @app.get("/", response_class=PlainTextResponse)
    async def trigger_report() -> str:
        """Run the report now and return the message that was sent."""
        try:
            return await run_report()
        except ConfigurationError as exc:
            LOGGER.error(f"Manual report failed: {exc}")
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    @app.get("/healthz", response_model=HealthStatus)
    async def health() -> HealthStatus:  # pragma: no cover - trivial endpoint
        return HealthStatus(status="ok")

    @app.post("/extract", response_model=ExtractResponse)
    async def extract(request: ExtractRequest) -> ExtractResponse:
        hints = ExtractionHints(
            selector=request.selector or None,
            pattern=request.pattern or None,
            attribute=request.attribute or None,
        )
        try:
            price = await extract_price(request.html, hints)
        except ConfigurationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        if price is None:
            return ExtractResponse(found=False)
        return ExtractResponse(
            found=True, price=price, formatted=format_price(request.currency, price)
        )

    return app


__all__ = ["create_app"]
