"""Order request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field

from folio.models.enums import PackageName, ProjectStatus
from folio.schemas.common import CamelModel


class OrderUpdateRequest(CamelModel):
    """Admin-editable order fields.

    id, inquiryId, remainingBalance, completionDate and the timestamps are
    server-managed and cannot be written through this payload.
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    business_name: str | None = Field(default=None, max_length=255)
    project_description: str | None = Field(default=None, min_length=1, max_length=10000)
    selected_package: PackageName | None = None
    rush_option: bool | None = None
    notes: str | None = Field(default=None, max_length=10000)
    total_price: int | None = Field(default=None, ge=0)
    deposit_amount: int | None = Field(default=None, ge=0)
    deposit_paid: bool | None = None
    status: ProjectStatus | None = None
    estimated_delivery: str | None = Field(default=None, max_length=64)


class OrderResponse(CamelModel):
    id: int
    inquiry_id: int | None = None
    name: str
    email: str
    business_name: str | None = None
    project_description: str
    selected_package: str
    rush_option: bool
    notes: str | None = None
    total_price: int
    deposit_amount: int
    deposit_paid: bool
    remaining_balance: int | None = None
    status: str
    estimated_delivery: str | None = None
    completion_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
