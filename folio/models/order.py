"""Order model module."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from folio.models.base import Base, CreatedAtMixin, ProjectFieldsMixin, utcnow
from folio.models.enums import ProjectStatus


class Order(Base, CreatedAtMixin, ProjectFieldsMixin):
    __tablename__ = "orders"
    __table_args__ = (Index("idx_orders_status", "status"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Weak reference: the originating inquiry row is deleted on promotion.
    inquiry_id: Mapped[int | None] = mapped_column(Integer)
    deposit_paid: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    remaining_balance: Mapped[int | None] = mapped_column(Integer)
    status: Mapped[str] = mapped_column(String(32), default=ProjectStatus.IN_PROGRESS.value, nullable=False)
    estimated_delivery: Mapped[str | None] = mapped_column(String(64))
    completion_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
