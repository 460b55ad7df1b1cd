"""Stripe checkout endpoints used by the project-start and payment-success pages."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from folio.core.dependencies import get_checkout_service
from folio.schemas import (
    CheckoutSessionRequest,
    CheckoutSessionResponse,
    CheckoutSessionStatus,
    PublishableKeyResponse,
)
from folio.services.checkout_service import CheckoutService, resolve_base_url

router = APIRouter(tags=["checkout"])


@router.get("/stripe/publishable-key", response_model=PublishableKeyResponse)
def publishable_key(checkout: CheckoutService = Depends(get_checkout_service)) -> PublishableKeyResponse:
    return PublishableKeyResponse(publishable_key=checkout.publishable_key())


@router.post("/create-checkout-session", response_model=CheckoutSessionResponse)
def create_checkout_session(
    payload: CheckoutSessionRequest,
    request: Request,
    checkout: CheckoutService = Depends(get_checkout_service),
) -> CheckoutSessionResponse:
    base_url = resolve_base_url(
        origin=request.headers.get("origin"),
        referer=request.headers.get("referer"),
        host=request.headers.get("host"),
        scheme=request.url.scheme,
        public_base_url=checkout.config.PUBLIC_BASE_URL,
    )
    return CheckoutSessionResponse(url=checkout.create_deposit_session(payload, base_url=base_url))


@router.get("/checkout-session/{session_id}", response_model=CheckoutSessionStatus)
def checkout_session(
    session_id: str,
    checkout: CheckoutService = Depends(get_checkout_service),
) -> CheckoutSessionStatus:
    result = checkout.reconcile_session(session_id)
    return CheckoutSessionStatus(**result.as_view())
