"""Inquiry and order lifecycle: submission, promotion, demotion and status edits."""

from __future__ import annotations

import logging
from typing import Any

from folio.core.config import Config, get_config
from folio.core.exceptions import NotFoundError
from folio.database.record_store import RecordStore
from folio.models import Order, ProjectInquiry, ProjectStatus
from folio.models.base import PROJECT_FIELDS, utcnow
from folio.orchestration.state_machine import project_lifecycle
from folio.schemas.inquiries import InquiryCreateRequest
from folio.services import pricing

logger = logging.getLogger(__name__)

ACTIVE_PROJECTS_KEY = "active_projects"
DELIVERY_TIME_KEY = "delivery_time"
AVAILABILITY_KEY = "availability"

DEFAULT_DELIVERY_TIME = "2-3 weeks"
DEFAULT_AVAILABILITY = "Available"


def _project_fields(record: ProjectInquiry | Order) -> dict[str, Any]:
    return {field: getattr(record, field) for field in PROJECT_FIELDS}


class LifecycleService:
    """Moves a customer project between the inquiry and order collections."""

    def __init__(self, store: RecordStore, config: Config | None = None) -> None:
        self.store = store
        self.config = config or get_config()

    def active_project_count(self) -> int:
        """Current workload: the admin-maintained setting, else the configured default."""
        raw = self.store.get_setting(ACTIVE_PROJECTS_KEY)
        if raw is not None:
            try:
                value = int(raw)
            except ValueError:
                logger.warning(
                    "settings.active_projects.invalid",
                    extra={"event": "settings.active_projects.invalid", "value": raw},
                )
            else:
                if value >= 0:
                    return value
        return self.config.DEFAULT_ACTIVE_PROJECTS

    def public_settings(self) -> dict[str, Any]:
        return {
            "active_projects": self.active_project_count(),
            "delivery_time": self.store.get_setting(DELIVERY_TIME_KEY) or DEFAULT_DELIVERY_TIME,
            "availability": self.store.get_setting(AVAILABILITY_KEY) or DEFAULT_AVAILABILITY,
        }

    def submit_inquiry(self, payload: InquiryCreateRequest, active_projects: int | None = None) -> ProjectInquiry:
        workload = self.active_project_count() if active_projects is None else active_projects
        quote = pricing.quote(payload.selected_package, workload, rush=payload.rush_option)

        waitlist_position = None
        if quote.is_waitlist:
            waitlist_position = self.store.count_waitlisted() + 1

        inquiry = self.store.create_inquiry(
            name=payload.name.strip(),
            email=str(payload.email),
            business_name=payload.business_name,
            project_description=payload.project_description.strip(),
            selected_package=payload.selected_package,
            rush_option=quote.rush_fee > 0,
            notes=payload.notes,
            total_price=quote.total_price,
            deposit_amount=quote.deposit_amount,
            is_waitlist=quote.is_waitlist,
            waitlist_position=waitlist_position,
            status=ProjectStatus.PENDING,
        )
        logger.info(
            "inquiry.submitted",
            extra={
                "event": "inquiry.submitted",
                "inquiry_id": inquiry.id,
                "package": inquiry.selected_package,
                "total_price": inquiry.total_price,
                "is_waitlist": inquiry.is_waitlist,
                "waitlist_position": waitlist_position,
            },
        )
        return inquiry

    def promote_to_order(self, inquiry_id: int, estimated_delivery: str | None = None) -> Order:
        with self.store.transaction():
            inquiry = self.store.get_inquiry(inquiry_id)
            if inquiry is None:
                raise NotFoundError("Inquiry not found")
            order = self.store.create_order(
                inquiry_id=inquiry.id,
                deposit_paid=False,
                status=ProjectStatus.IN_PROGRESS,
                estimated_delivery=estimated_delivery,
                **_project_fields(inquiry),
            )
            self.store.delete_inquiry(inquiry.id)
        self.store.db.refresh(order)

        logger.info(
            "order.promoted",
            extra={"event": "order.promoted", "inquiry_id": inquiry_id, "order_id": order.id},
        )
        return order

    def demote_to_waitlist(self, order_id: int) -> ProjectInquiry:
        with self.store.transaction():
            order = self.store.get_order(order_id)
            if order is None:
                raise NotFoundError("Order not found")
            inquiry = self.store.create_inquiry(
                is_waitlist=False,
                waitlist_position=None,
                status=ProjectStatus.PENDING,
                **_project_fields(order),
            )
            self.store.delete_order(order.id)
        self.store.db.refresh(inquiry)

        logger.info(
            "order.demoted",
            extra={"event": "order.demoted", "order_id": order_id, "inquiry_id": inquiry.id},
        )
        return inquiry

    def update_inquiry(self, inquiry_id: int, changes: dict[str, Any]) -> ProjectInquiry:
        inquiry = self.store.update_inquiry(inquiry_id, changes)
        if inquiry is None:
            raise NotFoundError("Inquiry not found")
        return inquiry

    def update_order(self, order_id: int, changes: dict[str, Any]) -> Order:
        """Apply admin edits; moving to completed stamps the completion date."""
        current = self.store.get_order(order_id)
        if current is None:
            raise NotFoundError("Order not found")

        changes = dict(changes)
        new_status = changes.get("status")
        if new_status is not None:
            new_status = getattr(new_status, "value", new_status)
            previous = current.status
            if new_status != previous and not project_lifecycle.can_transition(previous, new_status):
                logger.warning(
                    "order.status.manual_override",
                    extra={
                        "event": "order.status.manual_override",
                        "order_id": order_id,
                        "from_status": previous,
                        "to_status": new_status,
                    },
                )
            if new_status == ProjectStatus.COMPLETED.value:
                changes["completion_date"] = utcnow()

        order = self.store.update_order(order_id, changes)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    def update_order_status(self, order_id: int, new_status: str | ProjectStatus) -> Order:
        return self.update_order(order_id, {"status": new_status})

    def delete_inquiry(self, inquiry_id: int) -> None:
        self.store.delete_inquiry(inquiry_id)
        logger.info("inquiry.deleted", extra={"event": "inquiry.deleted", "inquiry_id": inquiry_id})

    def delete_order(self, order_id: int) -> None:
        self.store.delete_order(order_id)
        logger.info("order.deleted", extra={"event": "order.deleted", "order_id": order_id})
