"""Admin login/logout endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header

from folio.auth.admin_guard import AdminSessionGuard
from folio.core.dependencies import get_admin_guard
from folio.schemas import LoginRequest, LoginResponse, SuccessResponse

router = APIRouter(prefix="/admin", tags=["admin-auth"])


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, guard: AdminSessionGuard = Depends(get_admin_guard)) -> LoginResponse:
    return LoginResponse(success=True, token=guard.login(payload.password))


@router.post("/logout", response_model=SuccessResponse)
def logout(
    authorization: str | None = Header(default=None, alias="Authorization"),
    guard: AdminSessionGuard = Depends(get_admin_guard),
) -> SuccessResponse:
    guard.logout(authorization)
    return SuccessResponse(success=True)
