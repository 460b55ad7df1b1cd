from __future__ import annotations

from sqlalchemy import inspect

import folio.database.db as db_module
import folio.database.init_db as init_db_module


def test_init_db_applies_baseline_migration(tmp_path, monkeypatch):
    monkeypatch.setattr(init_db_module, "bootstrap", lambda: None)
    original_url = db_module.get_active_database_url()
    db_module.reset_engine(f"sqlite:///{tmp_path / 'folio.db'}")
    try:
        init_db_module.init_db()
        tables = set(inspect(db_module.get_engine()).get_table_names())
    finally:
        db_module.get_engine().dispose()
        db_module.reset_engine(original_url)

    assert {
        "alembic_version",
        "messages",
        "project_inquiries",
        "orders",
        "payments",
        "expenses",
        "admin_settings",
    } <= tables
