"""Project inquiry model module."""

from __future__ import annotations

from sqlalchemy import Boolean, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from folio.models.base import Base, CreatedAtMixin, ProjectFieldsMixin
from folio.models.enums import ProjectStatus


class ProjectInquiry(Base, CreatedAtMixin, ProjectFieldsMixin):
    __tablename__ = "project_inquiries"
    __table_args__ = (
        Index("idx_project_inquiries_is_waitlist", "is_waitlist"),
        Index("idx_project_inquiries_status", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    is_waitlist: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    waitlist_position: Mapped[int | None] = mapped_column(Integer)
    status: Mapped[str] = mapped_column(String(32), default=ProjectStatus.PENDING.value, nullable=False)
