"""Dependency providers for API handlers."""

from __future__ import annotations

from collections.abc import Generator

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from folio.auth.admin_guard import AdminSessionGuard
from folio.auth.session_store import InMemorySessionStore, SessionStore
from folio.core.config import Config, get_config
from folio.database.db import get_db
from folio.database.record_store import RecordStore
from folio.services.checkout_service import CheckoutService, PaymentGateway, StripeGateway
from folio.services.finance_service import FinanceService
from folio.services.lifecycle_service import LifecycleService


def get_settings() -> Config:
    """Return validated application configuration."""
    return get_config()


def get_db_session() -> Generator[Session, None, None]:
    """Yield SQLAlchemy session for dependency injection."""
    yield from get_db()


def get_record_store(db: Session = Depends(get_db_session)) -> RecordStore:
    return RecordStore(db=db)


def get_session_store(request: Request) -> SessionStore:
    """Admin tokens live on the application instance, one store per app."""
    store = getattr(request.app.state, "session_store", None)
    if store is None:
        store = InMemorySessionStore()
        request.app.state.session_store = store
    return store


def get_payment_gateway(settings: Config = Depends(get_settings)) -> PaymentGateway:
    return StripeGateway(api_key=settings.STRIPE_SECRET_KEY)


def get_lifecycle_service(
    store: RecordStore = Depends(get_record_store),
    settings: Config = Depends(get_settings),
) -> LifecycleService:
    return LifecycleService(store=store, config=settings)


def get_checkout_service(
    store: RecordStore = Depends(get_record_store),
    gateway: PaymentGateway = Depends(get_payment_gateway),
    settings: Config = Depends(get_settings),
) -> CheckoutService:
    return CheckoutService(store=store, gateway=gateway, config=settings)


def get_finance_service(store: RecordStore = Depends(get_record_store)) -> FinanceService:
    return FinanceService(store=store)


def get_admin_guard(
    store: RecordStore = Depends(get_record_store),
    sessions: SessionStore = Depends(get_session_store),
    settings: Config = Depends(get_settings),
) -> AdminSessionGuard:
    return AdminSessionGuard(store=store, sessions=sessions, config=settings)


def require_admin(
    authorization: str | None = Header(default=None, alias="Authorization"),
    guard: AdminSessionGuard = Depends(get_admin_guard),
) -> str:
    """Gate for every protected admin route; returns the validated token."""
    return guard.authorize(authorization)
