from __future__ import annotations

import pytest

import folio.core.startup as startup_module


class _Cfg:
    def __init__(self, admin_password: str | None = "secret", stripe_key: str | None = "sk_test_x") -> None:
        self.ENV = "development"
        self.ADMIN_PASSWORD = admin_password
        self.STRIPE_SECRET_KEY = stripe_key

    @property
    def is_production(self) -> bool:
        return False


def test_startup_raises_when_database_unreachable(monkeypatch):
    monkeypatch.setattr(startup_module, "get_config", lambda: _Cfg())
    monkeypatch.setattr(startup_module, "verify_database_connection", lambda: False)

    with pytest.raises(RuntimeError, match="Database connectivity check failed"):
        startup_module.validate_startup_config()


def test_startup_warns_about_missing_secrets(monkeypatch, caplog):
    monkeypatch.setattr(startup_module, "get_config", lambda: _Cfg(admin_password=None, stripe_key=None))
    monkeypatch.setattr(startup_module, "verify_database_connection", lambda: True)

    with caplog.at_level("WARNING", logger="folio.core.startup"):
        startup_module.validate_startup_config()

    events = {record.getMessage() for record in caplog.records}
    assert "startup.admin_password.unset" in events
    assert "startup.stripe.disabled" in events
