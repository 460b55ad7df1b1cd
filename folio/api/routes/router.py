"""Root API router."""

from __future__ import annotations

from fastapi import APIRouter

from folio.api.routes import admin_auth, admin_finance, admin_projects, admin_settings, checkout, public

api_router = APIRouter(prefix="/api")
api_router.include_router(public.router)
api_router.include_router(checkout.router)
api_router.include_router(admin_auth.router)
api_router.include_router(admin_projects.router)
api_router.include_router(admin_finance.router)
api_router.include_router(admin_settings.router)


def get_api_router() -> APIRouter:
    return api_router
