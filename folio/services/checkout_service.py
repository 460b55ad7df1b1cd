"""Deposit checkout through Stripe's hosted checkout pages."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Protocol

import stripe

from folio.core.config import Config, get_config
from folio.core.exceptions import DuplicateRecordError, PaymentProviderError, ValidationError
from folio.database.record_store import RecordStore
from folio.models import Payment, PaymentStatus
from folio.schemas.payments import CheckoutSessionRequest

logger = logging.getLogger(__name__)

MIN_DEPOSIT_AMOUNT = 100
METADATA_VALUE_LIMIT = 500


@dataclass(frozen=True)
class CheckoutSession:
    """Provider-neutral snapshot of a hosted checkout session."""

    id: str
    url: str | None = None
    payment_status: str | None = None
    customer_email: str | None = None
    amount_total: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class PaymentGateway(Protocol):
    def create_session(self, params: dict[str, Any]) -> CheckoutSession: ...

    def retrieve_session(self, session_id: str) -> CheckoutSession: ...


def _as_dict(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if hasattr(value, "to_dict"):
        return dict(value.to_dict())
    return dict(value)


class StripeGateway:
    """PaymentGateway backed by the stripe SDK."""

    def __init__(self, api_key: str | None) -> None:
        self.api_key = api_key

    def _require_key(self) -> str:
        if not self.api_key:
            raise PaymentProviderError("Stripe is not configured")
        return self.api_key

    @staticmethod
    def _snapshot(session: Any) -> CheckoutSession:
        customer_email = getattr(session, "customer_email", None)
        if not customer_email:
            details = getattr(session, "customer_details", None)
            customer_email = getattr(details, "email", None) if details else None
        return CheckoutSession(
            id=session.id,
            url=getattr(session, "url", None),
            payment_status=getattr(session, "payment_status", None),
            customer_email=customer_email,
            amount_total=getattr(session, "amount_total", None),
            metadata=_as_dict(getattr(session, "metadata", None)),
        )

    def create_session(self, params: dict[str, Any]) -> CheckoutSession:
        api_key = self._require_key()
        try:
            session = stripe.checkout.Session.create(api_key=api_key, **params)
        except stripe.StripeError as exc:
            raise PaymentProviderError(exc.user_message or str(exc) or "Failed to create checkout session") from exc
        return self._snapshot(session)

    def retrieve_session(self, session_id: str) -> CheckoutSession:
        api_key = self._require_key()
        try:
            session = stripe.checkout.Session.retrieve(session_id, api_key=api_key)
        except stripe.StripeError as exc:
            raise PaymentProviderError(exc.user_message or str(exc) or "Failed to retrieve session") from exc
        return self._snapshot(session)


@dataclass(frozen=True)
class ReconciliationResult:
    status: str | None
    customer_email: str | None
    amount_total: float
    metadata: dict[str, Any]
    payment: Payment | None = None
    created: bool = False

    def as_view(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "customer_email": self.customer_email,
            "amount_total": self.amount_total,
            "metadata": self.metadata,
        }


def serialize_project_details(project_details: Any) -> str:
    if project_details is None:
        return ""
    return json.dumps(project_details, separators=(",", ":"), default=str)[:METADATA_VALUE_LIMIT]


def to_whole_units(minor_amount: int | None) -> int:
    if not minor_amount:
        return 0
    return int((Decimal(minor_amount) / 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def resolve_base_url(
    origin: str | None,
    referer: str | None,
    host: str | None,
    scheme: str = "https",
    public_base_url: str | None = None,
) -> str:
    """Where Stripe should send the customer back to."""
    if origin:
        return origin.rstrip("/")
    if referer:
        return referer.rstrip("/")
    if public_base_url:
        return public_base_url.rstrip("/")
    return f"{scheme}://{host or 'localhost'}"


class CheckoutService:
    """Creates deposit sessions and records paid sessions as payments."""

    def __init__(self, store: RecordStore, gateway: PaymentGateway, config: Config | None = None) -> None:
        self.store = store
        self.gateway = gateway
        self.config = config or get_config()

    def publishable_key(self) -> str:
        if not self.config.STRIPE_PUBLISHABLE_KEY:
            raise PaymentProviderError("Failed to get Stripe configuration")
        return self.config.STRIPE_PUBLISHABLE_KEY

    def create_deposit_session(self, request: CheckoutSessionRequest, base_url: str) -> str:
        deposit = request.deposit_amount
        if not deposit or deposit < MIN_DEPOSIT_AMOUNT:
            raise ValidationError("Invalid deposit amount")

        package = request.package_name
        params = {
            "payment_method_types": ["card"],
            "line_items": [
                {
                    "price_data": {
                        "currency": self.config.CHECKOUT_CURRENCY,
                        "product_data": {
                            "name": f"{package} - 50% Deposit",
                            "description": f"Project deposit for {package} package",
                        },
                        "unit_amount": deposit * 100,
                    },
                    "quantity": 1,
                }
            ],
            "mode": "payment",
            "customer_email": request.customer_email,
            "success_url": f"{base_url}/payment-success?session_id={{CHECKOUT_SESSION_ID}}",
            "cancel_url": f"{base_url}/start-project",
            "metadata": {
                "customerName": request.customer_name,
                "customerEmail": request.customer_email,
                "packageName": package,
                "depositAmount": str(deposit),
                "projectDetails": serialize_project_details(request.project_details),
            },
        }

        try:
            session = self.gateway.create_session(params)
        except PaymentProviderError:
            logger.exception("checkout.session.create_failed", extra={"event": "checkout.session.create_failed"})
            raise
        if not session.url:
            raise PaymentProviderError("Checkout provider returned no redirect URL")

        logger.info(
            "checkout.session.created",
            extra={"event": "checkout.session.created", "session_id": session.id, "deposit_amount": deposit},
        )
        return session.url

    def reconcile_session(self, session_id: str) -> ReconciliationResult:
        """Record a paid session exactly once and report its state."""
        try:
            session = self.gateway.retrieve_session(session_id)
        except PaymentProviderError:
            logger.exception(
                "checkout.session.retrieve_failed",
                extra={"event": "checkout.session.retrieve_failed", "session_id": session_id},
            )
            raise

        payment: Payment | None = None
        created = False
        if session.payment_status == PaymentStatus.PAID.value:
            payment = self.store.find_payment_by_session_id(session_id)
            if payment is None:
                payment, created = self._record_payment(session_id, session)

        amount_total = session.amount_total / 100 if session.amount_total else 0
        return ReconciliationResult(
            status=session.payment_status,
            customer_email=session.customer_email,
            amount_total=amount_total,
            metadata=session.metadata,
            payment=payment,
            created=created,
        )

    def _record_payment(self, session_id: str, session: CheckoutSession) -> tuple[Payment | None, bool]:
        metadata = session.metadata
        try:
            payment = self.store.create_payment(
                external_session_id=session_id,
                customer_name=metadata.get("customerName") or "",
                customer_email=session.customer_email or "",
                package_name=metadata.get("packageName") or "",
                amount=to_whole_units(session.amount_total),
                status=PaymentStatus.PAID.value,
                project_details=metadata.get("projectDetails") or None,
            )
        except DuplicateRecordError:
            # A concurrent request reconciled the same session first.
            logger.info(
                "payment.reconcile.already_recorded",
                extra={"event": "payment.reconcile.already_recorded", "session_id": session_id},
            )
            return self.store.find_payment_by_session_id(session_id), False

        logger.info(
            "payment.reconciled",
            extra={"event": "payment.reconciled", "session_id": session_id, "amount": payment.amount},
        )
        return payment, True
