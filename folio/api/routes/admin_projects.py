"""Admin management of inquiries (waitlist tab) and orders."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from folio.core.dependencies import get_lifecycle_service, require_admin
from folio.schemas import (
    InquiryResponse,
    InquiryUpdateRequest,
    MoveToOrdersRequest,
    OrderResponse,
    OrderUpdateRequest,
    SuccessResponse,
)
from folio.services.lifecycle_service import LifecycleService

router = APIRouter(prefix="/admin", tags=["admin-projects"], dependencies=[Depends(require_admin)])


@router.get("/inquiries", response_model=list[InquiryResponse])
def list_inquiries(lifecycle: LifecycleService = Depends(get_lifecycle_service)) -> list[InquiryResponse]:
    return [InquiryResponse.model_validate(row) for row in lifecycle.store.list_inquiries()]


@router.patch("/inquiries/{inquiry_id}", response_model=InquiryResponse)
def update_inquiry(
    inquiry_id: int,
    payload: InquiryUpdateRequest,
    lifecycle: LifecycleService = Depends(get_lifecycle_service),
) -> InquiryResponse:
    inquiry = lifecycle.update_inquiry(inquiry_id, payload.model_dump(exclude_unset=True))
    return InquiryResponse.model_validate(inquiry)


@router.delete("/inquiries/{inquiry_id}", response_model=SuccessResponse)
def delete_inquiry(
    inquiry_id: int,
    lifecycle: LifecycleService = Depends(get_lifecycle_service),
) -> SuccessResponse:
    lifecycle.delete_inquiry(inquiry_id)
    return SuccessResponse(success=True)


@router.post("/inquiries/{inquiry_id}/move-to-orders", response_model=OrderResponse)
def move_to_orders(
    inquiry_id: int,
    payload: MoveToOrdersRequest | None = Body(default=None),
    lifecycle: LifecycleService = Depends(get_lifecycle_service),
) -> OrderResponse:
    estimated_delivery = payload.estimated_delivery if payload else None
    order = lifecycle.promote_to_order(inquiry_id, estimated_delivery=estimated_delivery)
    return OrderResponse.model_validate(order)


@router.get("/orders", response_model=list[OrderResponse])
def list_orders(lifecycle: LifecycleService = Depends(get_lifecycle_service)) -> list[OrderResponse]:
    return [OrderResponse.model_validate(row) for row in lifecycle.store.list_orders()]


@router.patch("/orders/{order_id}", response_model=OrderResponse)
def update_order(
    order_id: int,
    payload: OrderUpdateRequest,
    lifecycle: LifecycleService = Depends(get_lifecycle_service),
) -> OrderResponse:
    order = lifecycle.update_order(order_id, payload.model_dump(exclude_unset=True))
    return OrderResponse.model_validate(order)


@router.delete("/orders/{order_id}", response_model=SuccessResponse)
def delete_order(
    order_id: int,
    lifecycle: LifecycleService = Depends(get_lifecycle_service),
) -> SuccessResponse:
    lifecycle.delete_order(order_id)
    return SuccessResponse(success=True)


@router.post("/orders/{order_id}/move-to-waitlist", response_model=InquiryResponse)
def move_to_waitlist(
    order_id: int,
    lifecycle: LifecycleService = Depends(get_lifecycle_service),
) -> InquiryResponse:
    inquiry = lifecycle.demote_to_waitlist(order_id)
    return InquiryResponse.model_validate(inquiry)
