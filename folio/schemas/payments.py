"""Checkout and payment schemas for API contracts."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from folio.schemas.common import CamelModel


class CheckoutSessionRequest(CamelModel):
    deposit_amount: int | None = None
    package_name: str = Field(min_length=1, max_length=64)
    customer_email: str = Field(min_length=3, max_length=320)
    customer_name: str = Field(min_length=1, max_length=255)
    project_details: Any = None


class CheckoutSessionResponse(CamelModel):
    url: str


class CheckoutSessionStatus(CamelModel):
    status: str | None = None
    customer_email: str | None = None
    amount_total: float = 0
    metadata: dict[str, Any] | None = None


class PublishableKeyResponse(CamelModel):
    publishable_key: str


class PaymentResponse(CamelModel):
    id: int
    external_session_id: str
    customer_name: str
    customer_email: str
    package_name: str
    amount: int
    status: str
    project_details: str | None = None
    created_at: datetime | None = None
