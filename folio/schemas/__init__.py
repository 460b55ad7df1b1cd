"""Pydantic schema package for API contracts."""

from folio.schemas.auth import LoginRequest, LoginResponse
from folio.schemas.common import CamelModel, SuccessResponse
from folio.schemas.contact import ContactCreateRequest, ContactMessageResponse
from folio.schemas.expenses import (
    ExpenseCreateRequest,
    ExpenseResponse,
    ExpenseUpdateRequest,
    FinanceSummaryResponse,
)
from folio.schemas.inquiries import (
    InquiryCreateRequest,
    InquiryResponse,
    InquiryUpdateRequest,
    MoveToOrdersRequest,
    WaitlistCountResponse,
)
from folio.schemas.orders import OrderResponse, OrderUpdateRequest
from folio.schemas.payments import (
    CheckoutSessionRequest,
    CheckoutSessionResponse,
    CheckoutSessionStatus,
    PaymentResponse,
    PublishableKeyResponse,
)
from folio.schemas.pricing import LocalPrice, PriceQuoteResponse
from folio.schemas.settings import PublicSettingsResponse, SettingResponse, SettingUpsertRequest

__all__ = [
    "CamelModel",
    "CheckoutSessionRequest",
    "CheckoutSessionResponse",
    "CheckoutSessionStatus",
    "ContactCreateRequest",
    "ContactMessageResponse",
    "ExpenseCreateRequest",
    "ExpenseResponse",
    "ExpenseUpdateRequest",
    "FinanceSummaryResponse",
    "InquiryCreateRequest",
    "InquiryResponse",
    "InquiryUpdateRequest",
    "LocalPrice",
    "LoginRequest",
    "LoginResponse",
    "MoveToOrdersRequest",
    "OrderResponse",
    "OrderUpdateRequest",
    "PaymentResponse",
    "PriceQuoteResponse",
    "PublicSettingsResponse",
    "PublishableKeyResponse",
    "SettingResponse",
    "SettingUpsertRequest",
    "SuccessResponse",
    "WaitlistCountResponse",
]
