"""Expense request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from folio.schemas.common import CamelModel


class ExpenseCreateRequest(CamelModel):
    description: str = Field(min_length=1, max_length=500)
    amount: int = Field(ge=0, description="Minor currency units.")
    category: str = Field(default="general", min_length=1, max_length=64)
    notes: str | None = Field(default=None, max_length=10000)
    date: datetime | None = None


class ExpenseUpdateRequest(CamelModel):
    description: str | None = Field(default=None, min_length=1, max_length=500)
    amount: int | None = Field(default=None, ge=0)
    category: str | None = Field(default=None, min_length=1, max_length=64)
    notes: str | None = Field(default=None, max_length=10000)
    date: datetime | None = None


class ExpenseResponse(CamelModel):
    id: int
    description: str
    amount: int
    category: str
    notes: str | None = None
    date: datetime | None = None
    created_at: datetime | None = None


class FinanceSummaryResponse(CamelModel):
    total_revenue: int
    total_expenses: int
    net_profit: int
