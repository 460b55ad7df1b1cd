"""Contact form schema module."""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field

from folio.schemas.common import CamelModel


class ContactCreateRequest(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    message: str = Field(min_length=1, max_length=10000)


class ContactMessageResponse(CamelModel):
    id: int
    name: str
    email: str
    message: str
    created_at: datetime | None = None
