from __future__ import annotations

from sqlalchemy import inspect

from folio.models import Base


def test_metadata_declares_all_tables():
    assert set(Base.metadata.tables) == {
        "messages",
        "project_inquiries",
        "orders",
        "payments",
        "expenses",
        "admin_settings",
    }


def test_payment_session_id_and_setting_key_are_unique(engine):
    inspector = inspect(engine)

    payment_columns = {column["name"]: column for column in inspector.get_columns("payments")}
    assert "external_session_id" in payment_columns
    unique_payment = inspector.get_unique_constraints("payments")
    unique_indexes = [ix for ix in inspector.get_indexes("payments") if ix.get("unique")]
    assert any("external_session_id" in c["column_names"] for c in unique_payment + unique_indexes)

    unique_settings = inspector.get_unique_constraints("admin_settings")
    setting_indexes = [ix for ix in inspector.get_indexes("admin_settings") if ix.get("unique")]
    assert any("key" in c["column_names"] for c in unique_settings + setting_indexes)


def test_lifecycle_indexes_exist(engine):
    inspector = inspect(engine)
    assert {ix["name"] for ix in inspector.get_indexes("project_inquiries")} >= {
        "idx_project_inquiries_is_waitlist",
        "idx_project_inquiries_status",
    }
    assert "idx_orders_status" in {ix["name"] for ix in inspector.get_indexes("orders")}
