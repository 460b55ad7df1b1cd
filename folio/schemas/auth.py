"""Auth schema module."""

from __future__ import annotations

from pydantic import Field

from folio.schemas.common import CamelModel


class LoginRequest(CamelModel):
    password: str = Field(default="", max_length=256)


class LoginResponse(CamelModel):
    success: bool = True
    token: str
