"""Canonical enum values for the lead-to-order schema."""

from __future__ import annotations

import enum


class PackageName(str, enum.Enum):
    STARTER = "Starter"
    STANDARD = "Standard"
    PREMIUM = "Premium"


class ProjectStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, enum.Enum):
    PAID = "paid"
    # Label the admin dashboard historically summed revenue on.
    COMPLETED = "completed"


REVENUE_PAYMENT_STATUSES = frozenset({PaymentStatus.PAID.value, PaymentStatus.COMPLETED.value})
