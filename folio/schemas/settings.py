"""Admin and public settings schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from folio.schemas.common import CamelModel


class SettingUpsertRequest(CamelModel):
    key: str = Field(min_length=1, max_length=128)
    value: str = Field(max_length=10000)


class SettingResponse(CamelModel):
    id: int
    key: str
    value: str
    updated_at: datetime | None = None


class PublicSettingsResponse(CamelModel):
    active_projects: int
    delivery_time: str
    availability: str
