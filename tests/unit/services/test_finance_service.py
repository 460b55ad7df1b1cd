from __future__ import annotations

from folio.services.finance_service import FinanceService


def _payment(store, session_id, amount, status="paid"):
    return store.create_payment(
        external_session_id=session_id,
        customer_name="Ada",
        customer_email="ada@example.com",
        package_name="Standard",
        amount=amount,
        status=status,
    )


def test_empty_ledger_is_zero(store):
    totals = FinanceService(store=store).compute_totals()
    assert totals.as_dict() == {"total_revenue": 0, "total_expenses": 0, "net_profit": 0}


def test_totals_are_reported_in_cents(store):
    _payment(store, "cs_1", 525)
    _payment(store, "cs_2", 300, status="completed")
    _payment(store, "cs_3", 999, status="unpaid")
    store.create_expense(description="Hosting", amount=2500)
    store.create_expense(description="Fonts", amount=4999, category="software")

    totals = FinanceService(store=store).compute_totals()

    assert totals.total_revenue == 82500
    assert totals.total_expenses == 7499
    assert totals.net_profit == 82500 - 7499
