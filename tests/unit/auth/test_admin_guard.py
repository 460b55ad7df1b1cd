from __future__ import annotations

import pytest

from folio.auth.admin_guard import ADMIN_PASSWORD_KEY, AdminSessionGuard, extract_bearer_token
from folio.auth.session_store import InMemorySessionStore
from folio.core.exceptions import AuthenticationError, ConfigurationError


@pytest.fixture
def sessions():
    return InMemorySessionStore()


@pytest.fixture
def guard(store, sessions, config):
    return AdminSessionGuard(store=store, sessions=sessions, config=config)


def test_login_issues_token_that_authorizes(guard, sessions):
    token = guard.login("correct-horse")

    assert len(token) == 96
    assert sessions.validate(token) is True
    assert guard.authorize(f"Bearer {token}") == token


def test_login_with_wrong_password_is_rejected(guard, sessions, monkeypatch):
    monkeypatch.setattr(sessions, "issue", lambda: pytest.fail("token issued for a bad password"))
    with pytest.raises(AuthenticationError, match="Invalid password"):
        guard.login("nope")


def test_stored_password_overrides_environment(guard, store):
    store.set_setting(ADMIN_PASSWORD_KEY, "rotated")

    with pytest.raises(AuthenticationError):
        guard.login("correct-horse")
    assert guard.login("rotated")


def test_login_without_any_password_configured(store, sessions, make_config):
    guard = AdminSessionGuard(store=store, sessions=sessions, config=make_config(ADMIN_PASSWORD=None))
    with pytest.raises(ConfigurationError):
        guard.login("anything")


def test_authorize_rejects_unknown_and_revoked_tokens(guard):
    with pytest.raises(AuthenticationError):
        guard.authorize("Bearer never-issued")

    token = guard.login("correct-horse")
    guard.logout(f"Bearer {token}")
    with pytest.raises(AuthenticationError):
        guard.authorize(f"Bearer {token}")


@pytest.mark.parametrize("header", [None, "", "Bearer", "Basic abc", "token-without-scheme"])
def test_authorize_rejects_malformed_headers(guard, header):
    with pytest.raises(AuthenticationError, match="Unauthorized"):
        guard.authorize(header)


def test_logout_without_token_is_noop(guard, sessions):
    token = guard.login("correct-horse")
    guard.logout(None)
    assert sessions.validate(token) is True


def test_extract_bearer_token_is_case_insensitive():
    assert extract_bearer_token("bearer abc") == "abc"
    assert extract_bearer_token("Bearer  abc ") == "abc"
