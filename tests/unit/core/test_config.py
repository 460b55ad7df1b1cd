from __future__ import annotations

import logging

import pytest

from folio.core import config as config_module
from folio.core.exceptions import ConfigurationError
from folio.core.logging_config import JsonFormatter


def test_build_config_reads_environment(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setenv("ADMIN_PASSWORD", "  hunter2  ")
    monkeypatch.setenv("STRIPE_SECRET_KEY", "")
    monkeypatch.setenv("DEFAULT_ACTIVE_PROJECTS", "4")
    monkeypatch.setenv("CHECKOUT_CURRENCY", "EUR")

    cfg = config_module._build_config("development")

    assert cfg.ADMIN_PASSWORD == "hunter2"
    assert cfg.STRIPE_SECRET_KEY is None
    assert cfg.DEFAULT_ACTIVE_PROJECTS == 4
    assert cfg.CHECKOUT_CURRENCY == "eur"
    assert cfg.DEBUG is True


def test_production_disables_debug(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)
    cfg = config_module._build_config("production")
    assert cfg.is_production is True
    assert cfg.DEBUG is False


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("DATABASE_URL", "mysql://db/folio"),
        ("DEFAULT_ACTIVE_PROJECTS", "-1"),
        ("CHECKOUT_CURRENCY", "dollars"),
        ("PUBLIC_BASE_URL", "studio.example"),
        ("LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values_are_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        config_module._build_config("development")


def test_production_rejects_test_mode_stripe_key(monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_123")
    with pytest.raises(ConfigurationError):
        config_module._build_config("production")


def test_json_formatter_includes_extra_fields():
    record = logging.makeLogRecord(
        {"name": "folio.test", "levelname": "INFO", "msg": "order.promoted", "event": "order.promoted", "order_id": 7}
    )
    rendered = JsonFormatter().format(record)
    assert '"event": "order.promoted"' in rendered
    assert '"order_id": 7' in rendered
