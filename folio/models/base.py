"""Shared SQLAlchemy base and common mixins for modular models."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware UTC timestamp helper."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base class for all Folio tables."""


class CreatedAtMixin:
    """Insert timestamp shared by every record kind."""

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)


class ProjectFieldsMixin:
    """Customer-facing project fields carried by both inquiries and orders.

    Promotion and demotion copy exactly these columns between the two tables.
    """

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    business_name: Mapped[str | None] = mapped_column(String(255))
    project_description: Mapped[str] = mapped_column(Text, nullable=False)
    selected_package: Mapped[str] = mapped_column(String(32), nullable=False)
    rush_option: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)
    total_price: Mapped[int] = mapped_column(Integer, nullable=False)
    deposit_amount: Mapped[int] = mapped_column(Integer, nullable=False)


PROJECT_FIELDS = (
    "name",
    "email",
    "business_name",
    "project_description",
    "selected_package",
    "rush_option",
    "notes",
    "total_price",
    "deposit_amount",
)
