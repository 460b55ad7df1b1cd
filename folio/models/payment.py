"""Payment model module."""

from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from folio.models.base import Base, CreatedAtMixin


class Payment(Base, CreatedAtMixin):
    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    external_session_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    customer_email: Mapped[str] = mapped_column(String(320), nullable=False)
    package_name: Mapped[str] = mapped_column(String(64), nullable=False)
    # Whole currency units, not the provider's minor units.
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    project_details: Mapped[str | None] = mapped_column(Text)
