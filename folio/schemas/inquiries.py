"""Project inquiry request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field

from folio.models.enums import PackageName, ProjectStatus
from folio.schemas.common import CamelModel


class InquiryCreateRequest(CamelModel):
    """Public project-start form.

    Price fields sent by the browser are ignored; the server re-quotes them.
    """

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    business_name: str | None = Field(default=None, max_length=255)
    project_description: str = Field(min_length=1, max_length=10000)
    selected_package: PackageName
    rush_option: bool = False
    notes: str | None = Field(default=None, max_length=10000)


class InquiryUpdateRequest(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    business_name: str | None = Field(default=None, max_length=255)
    project_description: str | None = Field(default=None, min_length=1, max_length=10000)
    selected_package: PackageName | None = None
    rush_option: bool | None = None
    notes: str | None = Field(default=None, max_length=10000)
    total_price: int | None = Field(default=None, ge=0)
    deposit_amount: int | None = Field(default=None, ge=0)
    is_waitlist: bool | None = None
    waitlist_position: int | None = Field(default=None, ge=1)
    status: ProjectStatus | None = None


class MoveToOrdersRequest(CamelModel):
    estimated_delivery: str | None = Field(default=None, max_length=64)


class InquiryResponse(CamelModel):
    id: int
    name: str
    email: str
    business_name: str | None = None
    project_description: str
    selected_package: str
    rush_option: bool
    notes: str | None = None
    total_price: int
    deposit_amount: int
    is_waitlist: bool
    waitlist_position: int | None = None
    status: str
    created_at: datetime | None = None


class WaitlistCountResponse(CamelModel):
    count: int
