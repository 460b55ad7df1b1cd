"""Modular SQLAlchemy model package for the lead-to-order schema."""

from folio.models.admin_setting import AdminSetting
from folio.models.base import Base
from folio.models.contact_message import ContactMessage
from folio.models.enums import PackageName, PaymentStatus, ProjectStatus
from folio.models.expense import Expense
from folio.models.inquiry import ProjectInquiry
from folio.models.order import Order
from folio.models.payment import Payment

__all__ = [
    "AdminSetting",
    "Base",
    "ContactMessage",
    "Expense",
    "Order",
    "PackageName",
    "Payment",
    "PaymentStatus",
    "ProjectInquiry",
    "ProjectStatus",
]
