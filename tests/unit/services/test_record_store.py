from __future__ import annotations

import pytest

from folio.core.exceptions import DatabaseError, DuplicateRecordError, NotFoundError
from folio.models import Order, ProjectInquiry


def _inquiry_fields(**overrides):
    fields = {
        "name": "Grace Hopper",
        "email": "grace@example.com",
        "business_name": "Compilers Inc",
        "project_description": "Five page brochure site",
        "selected_package": "Standard",
        "rush_option": False,
        "notes": None,
        "total_price": 900,
        "deposit_amount": 450,
        "is_waitlist": False,
        "waitlist_position": None,
        "status": "pending",
    }
    fields.update(overrides)
    return fields


def test_create_and_list_inquiries_newest_first(store):
    first = store.create_inquiry(**_inquiry_fields(name="First"))
    second = store.create_inquiry(**_inquiry_fields(name="Second"))

    listed = store.list_inquiries()
    assert [row.id for row in listed] == [second.id, first.id]
    assert first.created_at is not None


def test_count_waitlisted_only_counts_flagged_rows(store):
    store.create_inquiry(**_inquiry_fields())
    store.create_inquiry(**_inquiry_fields(is_waitlist=True, waitlist_position=1, deposit_amount=0))
    store.create_inquiry(**_inquiry_fields(is_waitlist=True, waitlist_position=2, deposit_amount=0))

    assert store.count_waitlisted() == 2


def test_update_inquiry_ignores_server_managed_fields(store):
    inquiry = store.create_inquiry(**_inquiry_fields())
    original_id = inquiry.id
    original_created = inquiry.created_at

    updated = store.update_inquiry(
        inquiry.id,
        {"notes": "call back", "id": 999, "created_at": None, "name": None},
    )

    assert updated is not None
    assert updated.id == original_id
    assert updated.created_at == original_created
    assert updated.name == "Grace Hopper"
    assert updated.notes == "call back"


def test_update_missing_inquiry_returns_none(store):
    assert store.update_inquiry(404, {"notes": "x"}) is None


def test_delete_missing_records_is_success(store):
    assert store.delete_inquiry(12345) is True
    assert store.delete_order(12345) is True
    assert store.delete_expense(12345) is True


def test_order_remaining_balance_is_recomputed(store):
    order = store.create_order(
        inquiry_id=None,
        deposit_paid=False,
        status="in_progress",
        **{k: v for k, v in _inquiry_fields().items() if k not in {"is_waitlist", "waitlist_position", "status"}},
    )
    assert order.remaining_balance == 450

    updated = store.update_order(order.id, {"total_price": 1300, "remaining_balance": 1})
    assert updated.remaining_balance == 850


def test_payment_session_id_is_unique(store):
    store.create_payment(
        external_session_id="cs_dup",
        customer_name="Ada",
        customer_email="ada@example.com",
        package_name="Starter",
        amount=300,
        status="paid",
    )
    with pytest.raises(DuplicateRecordError):
        store.create_payment(
            external_session_id="cs_dup",
            customer_name="Ada",
            customer_email="ada@example.com",
            package_name="Starter",
            amount=300,
            status="paid",
        )
    assert len(store.list_payments()) == 1


def test_update_payment_status(store):
    store.create_payment(
        external_session_id="cs_status",
        customer_name="Ada",
        customer_email="ada@example.com",
        package_name="Starter",
        amount=300,
        status="paid",
    )
    payment = store.update_payment_status("cs_status", "completed")
    assert payment.status == "completed"
    assert store.update_payment_status("cs_missing", "paid") is None


def test_expense_defaults_and_ordering(store):
    expense = store.create_expense(description="Hosting", amount=1500, date=None)
    assert expense.category == "general"
    assert expense.date is not None
    assert store.list_expenses()[0].id == expense.id


def test_settings_upsert_and_empty_value_reads_as_missing(store):
    store.set_setting("availability", "Booked")
    store.set_setting("availability", "Open")
    assert store.get_setting("availability") == "Open"
    assert len(store.list_settings()) == 1

    store.set_setting("delivery_time", "")
    assert store.get_setting("delivery_time") is None
    assert store.get_setting("never_set") is None


def test_transaction_commits_once_for_grouped_writes(store, session_factory):
    with store.transaction():
        inquiry = store.create_inquiry(**_inquiry_fields())
        store.delete_inquiry(inquiry.id)
        store.create_inquiry(**_inquiry_fields(name="Kept"))

    other = session_factory()
    try:
        names = [row.name for row in other.query(ProjectInquiry).all()]
    finally:
        other.close()
    assert names == ["Kept"]


def test_transaction_rolls_back_on_error(store, session_factory):
    with pytest.raises(NotFoundError):
        with store.transaction():
            store.create_inquiry(**_inquiry_fields())
            raise NotFoundError("Order not found")

    other = session_factory()
    try:
        assert other.query(ProjectInquiry).count() == 0
        assert other.query(Order).count() == 0
    finally:
        other.close()


def test_transaction_wraps_database_failures(store):
    with pytest.raises(DatabaseError):
        with store.transaction():
            store.create_payment(
                external_session_id="cs_same",
                customer_name="A",
                customer_email="a@example.com",
                package_name="Starter",
                amount=1,
                status="paid",
            )
            store.create_payment(
                external_session_id="cs_same",
                customer_name="A",
                customer_email="a@example.com",
                package_name="Starter",
                amount=1,
                status="paid",
            )
    assert store.list_payments() == []
