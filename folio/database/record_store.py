"""Record store over the six Folio tables.

Single-record operations commit on their own. Multi-step work (promotion and
demotion between inquiries and orders) runs inside ``transaction()`` so the
intermediate states are never visible to other sessions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from folio.core.exceptions import DatabaseError
from folio.models import AdminSetting, ContactMessage, Expense, Order, Payment, ProjectInquiry
from folio.models.base import Base, utcnow
from folio.services.base_service import BaseService

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

INQUIRY_UPDATABLE = frozenset(
    {
        "name",
        "email",
        "business_name",
        "project_description",
        "selected_package",
        "rush_option",
        "notes",
        "total_price",
        "deposit_amount",
        "is_waitlist",
        "waitlist_position",
        "status",
    }
)
ORDER_UPDATABLE = frozenset(
    {
        "name",
        "email",
        "business_name",
        "project_description",
        "selected_package",
        "rush_option",
        "notes",
        "total_price",
        "deposit_amount",
        "deposit_paid",
        "status",
        "estimated_delivery",
        "completion_date",
    }
)
EXPENSE_UPDATABLE = frozenset({"description", "amount", "category", "notes", "date"})

# Columns an admin may clear by sending an explicit null.
NULLABLE_FIELDS = frozenset({"business_name", "notes", "waitlist_position", "estimated_delivery", "completion_date"})


def _plain(value: Any) -> Any:
    # Enum members from request schemas are stored as their raw values.
    return getattr(value, "value", value)


class RecordStore(BaseService):
    """Persistence for contact messages, inquiries, orders, payments, expenses and settings."""

    def __init__(self, db=None) -> None:
        super().__init__(db=db)
        self._in_transaction = False

    # ------------------------------------------------------------------
    # transaction plumbing
    # ------------------------------------------------------------------

    @contextmanager
    def transaction(self) -> Iterator["RecordStore"]:
        """Group several writes into one commit; rolls back on any error."""
        if self._in_transaction:
            yield self
            return

        self._in_transaction = True
        try:
            yield self
            self.commit()
        except SQLAlchemyError as exc:
            self.rollback()
            logger.exception("store.transaction.failed", extra={"event": "store.transaction.failed"})
            raise DatabaseError("Database transaction failed.") from exc
        except Exception:
            self.rollback()
            raise
        finally:
            self._in_transaction = False

    def _save(self, record: Base | None = None) -> None:
        if self._in_transaction:
            self.db.flush()
            return
        self.commit()
        if record is not None:
            self.db.refresh(record)

    def _create(self, record: ModelT) -> ModelT:
        self.db.add(record)
        self._save(record)
        return record

    def _get(self, model: type[ModelT], record_id: int) -> ModelT | None:
        return self.db.query(model).filter(model.id == record_id).first()

    def _delete(self, model: type[Base], record_id: int) -> bool:
        self.db.query(model).filter(model.id == record_id).delete(synchronize_session="fetch")
        self._save()
        return True

    @staticmethod
    def _apply(record: Base, changes: dict[str, Any], allowed: frozenset[str]) -> None:
        for field, value in changes.items():
            if field not in allowed:
                continue
            if value is None and field not in NULLABLE_FIELDS:
                continue
            setattr(record, field, _plain(value))

    # ------------------------------------------------------------------
    # contact messages
    # ------------------------------------------------------------------

    def create_message(self, name: str, email: str, message: str) -> ContactMessage:
        return self._create(ContactMessage(name=name, email=email, message=message))

    # ------------------------------------------------------------------
    # project inquiries
    # ------------------------------------------------------------------

    def create_inquiry(self, **fields: Any) -> ProjectInquiry:
        return self._create(ProjectInquiry(**{key: _plain(value) for key, value in fields.items()}))

    def get_inquiry(self, inquiry_id: int) -> ProjectInquiry | None:
        return self._get(ProjectInquiry, inquiry_id)

    def list_inquiries(self) -> list[ProjectInquiry]:
        return (
            self.db.query(ProjectInquiry)
            .order_by(ProjectInquiry.created_at.desc(), ProjectInquiry.id.desc())
            .all()
        )

    def update_inquiry(self, inquiry_id: int, changes: dict[str, Any]) -> ProjectInquiry | None:
        inquiry = self.get_inquiry(inquiry_id)
        if inquiry is None:
            return None
        self._apply(inquiry, changes, INQUIRY_UPDATABLE)
        self._save(inquiry)
        return inquiry

    def delete_inquiry(self, inquiry_id: int) -> bool:
        return self._delete(ProjectInquiry, inquiry_id)

    def count_waitlisted(self) -> int:
        return (
            self.db.query(func.count(ProjectInquiry.id))
            .filter(ProjectInquiry.is_waitlist.is_(True))
            .scalar()
            or 0
        )

    # ------------------------------------------------------------------
    # orders
    # ------------------------------------------------------------------

    def create_order(self, **fields: Any) -> Order:
        values = {key: _plain(value) for key, value in fields.items()}
        values["remaining_balance"] = values["total_price"] - values["deposit_amount"]
        return self._create(Order(**values))

    def get_order(self, order_id: int) -> Order | None:
        return self._get(Order, order_id)

    def list_orders(self) -> list[Order]:
        return self.db.query(Order).order_by(Order.created_at.desc(), Order.id.desc()).all()

    def update_order(self, order_id: int, changes: dict[str, Any]) -> Order | None:
        order = self.get_order(order_id)
        if order is None:
            return None
        self._apply(order, changes, ORDER_UPDATABLE)
        order.remaining_balance = order.total_price - order.deposit_amount
        order.updated_at = utcnow()
        self._save(order)
        return order

    def delete_order(self, order_id: int) -> bool:
        return self._delete(Order, order_id)

    # ------------------------------------------------------------------
    # payments
    # ------------------------------------------------------------------

    def create_payment(self, **fields: Any) -> Payment:
        """Insert a payment; a repeated session id raises DuplicateRecordError."""
        return self._create(Payment(**fields))

    def list_payments(self) -> list[Payment]:
        return self.db.query(Payment).order_by(Payment.created_at.desc(), Payment.id.desc()).all()

    def find_payment_by_session_id(self, session_id: str) -> Payment | None:
        return self.db.query(Payment).filter(Payment.external_session_id == session_id).first()

    def update_payment_status(self, session_id: str, status: str) -> Payment | None:
        payment = self.find_payment_by_session_id(session_id)
        if payment is None:
            return None
        payment.status = status
        self._save(payment)
        return payment

    # ------------------------------------------------------------------
    # expenses
    # ------------------------------------------------------------------

    def create_expense(self, **fields: Any) -> Expense:
        values = {key: value for key, value in fields.items() if key in EXPENSE_UPDATABLE}
        if values.get("date") is None:
            values.pop("date", None)
        return self._create(Expense(**values))

    def get_expense(self, expense_id: int) -> Expense | None:
        return self._get(Expense, expense_id)

    def list_expenses(self) -> list[Expense]:
        return self.db.query(Expense).order_by(Expense.date.desc(), Expense.id.desc()).all()

    def update_expense(self, expense_id: int, changes: dict[str, Any]) -> Expense | None:
        expense = self.get_expense(expense_id)
        if expense is None:
            return None
        self._apply(expense, changes, EXPENSE_UPDATABLE)
        self._save(expense)
        return expense

    def delete_expense(self, expense_id: int) -> bool:
        return self._delete(Expense, expense_id)

    # ------------------------------------------------------------------
    # settings
    # ------------------------------------------------------------------

    def get_setting(self, key: str) -> str | None:
        setting = self.db.query(AdminSetting).filter(AdminSetting.key == key).first()
        if setting is None or setting.value == "":
            return None
        return setting.value

    def set_setting(self, key: str, value: str) -> AdminSetting:
        setting = self.db.query(AdminSetting).filter(AdminSetting.key == key).first()
        if setting is None:
            return self._create(AdminSetting(key=key, value=value))
        setting.value = value
        setting.updated_at = utcnow()
        self._save(setting)
        return setting

    def list_settings(self) -> list[AdminSetting]:
        return self.db.query(AdminSetting).order_by(AdminSetting.key).all()
