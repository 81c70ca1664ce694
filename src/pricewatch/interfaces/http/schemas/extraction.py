"""Pydantic schemas for the HTTP API."""

from decimal import Decimal

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    status: str


class ExtractRequest(BaseModel):
    """Run the extraction pipeline against supplied HTML."""

    html: str
    selector: str | None = None
    pattern: str | None = None
    attribute: str | None = None
    currency: str | None = None


class ExtractResponse(BaseModel):
    found: bool
    price: Decimal | None = None
    formatted: str | None = Field(default=None, description="Price as rendered in the report.")
