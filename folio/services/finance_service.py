"""Revenue, expense and profit totals for the admin finance tab."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from folio.database.record_store import RecordStore
from folio.models.enums import REVENUE_PAYMENT_STATUSES


@dataclass(frozen=True)
class FinanceTotals:
    """All amounts in minor currency units (cents)."""

    total_revenue: int
    total_expenses: int
    net_profit: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


class FinanceService:
    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def compute_totals(self) -> FinanceTotals:
        # Payments are stored in whole units, expenses in cents.
        revenue = sum(
            payment.amount * 100
            for payment in self.store.list_payments()
            if payment.status in REVENUE_PAYMENT_STATUSES
        )
        expenses = sum(expense.amount for expense in self.store.list_expenses())
        return FinanceTotals(total_revenue=revenue, total_expenses=expenses, net_profit=revenue - expenses)
