"""Public site endpoints: contact form, project inquiries and workload info."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from folio.core.dependencies import get_lifecycle_service, get_record_store
from folio.database.record_store import RecordStore
from folio.models.enums import PackageName
from folio.schemas import (
    ContactCreateRequest,
    ContactMessageResponse,
    InquiryCreateRequest,
    InquiryResponse,
    LocalPrice,
    PriceQuoteResponse,
    PublicSettingsResponse,
    WaitlistCountResponse,
)
from folio.services import pricing
from folio.services.lifecycle_service import LifecycleService

router = APIRouter(tags=["public"])


@router.post("/contact", response_model=ContactMessageResponse)
def submit_contact(
    payload: ContactCreateRequest,
    store: RecordStore = Depends(get_record_store),
) -> ContactMessageResponse:
    message = store.create_message(name=payload.name, email=str(payload.email), message=payload.message)
    return ContactMessageResponse.model_validate(message)


@router.post("/project-inquiry", response_model=InquiryResponse)
def submit_project_inquiry(
    payload: InquiryCreateRequest,
    lifecycle: LifecycleService = Depends(get_lifecycle_service),
) -> InquiryResponse:
    inquiry = lifecycle.submit_inquiry(payload)
    return InquiryResponse.model_validate(inquiry)


@router.get("/waitlist-count", response_model=WaitlistCountResponse)
def waitlist_count(store: RecordStore = Depends(get_record_store)) -> WaitlistCountResponse:
    return WaitlistCountResponse(count=store.count_waitlisted())


@router.get("/pricing/quote", response_model=PriceQuoteResponse)
def price_quote(
    package: PackageName = Query(default=PackageName.STANDARD),
    rush: bool = Query(default=False),
    locale: str | None = Query(default=None, max_length=35),
    lifecycle: LifecycleService = Depends(get_lifecycle_service),
) -> PriceQuoteResponse:
    quote = pricing.quote(package, lifecycle.active_project_count(), rush=rush)
    local = pricing.convert_price(quote.total_price, locale)
    return PriceQuoteResponse(
        package=quote.package,
        base_price=quote.base_price,
        surcharge=quote.surcharge,
        rush_fee=quote.rush_fee,
        total_price=quote.total_price,
        deposit_amount=quote.deposit_amount,
        remaining_balance=quote.remaining_balance,
        delivery_estimate=quote.delivery_estimate,
        delivery_days=quote.delivery_days,
        workload_status=quote.workload_status,
        is_waitlist=quote.is_waitlist,
        active_projects=quote.active_projects,
        local_total=(
            LocalPrice(currency=local.currency, symbol=local.symbol, amount=local.amount, display=local.display)
            if local
            else None
        ),
    )


@router.get("/settings/public", response_model=PublicSettingsResponse)
def public_settings(lifecycle: LifecycleService = Depends(get_lifecycle_service)) -> PublicSettingsResponse:
    return PublicSettingsResponse(**lifecycle.public_settings())
