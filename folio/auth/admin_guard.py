"""Single shared-secret admin login and bearer-token authorization."""

from __future__ import annotations

import hmac
import logging

from folio.auth.session_store import SessionStore
from folio.core.config import Config, get_config
from folio.core.exceptions import AuthenticationError, ConfigurationError
from folio.database.record_store import RecordStore

logger = logging.getLogger(__name__)

ADMIN_PASSWORD_KEY = "admin_password"
UNAUTHORIZED = "Unauthorized."


def extract_bearer_token(authorization: str | None) -> str | None:
    if authorization is None or not authorization.strip():
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None


class AdminSessionGuard:
    def __init__(self, store: RecordStore, sessions: SessionStore, config: Config | None = None) -> None:
        self.store = store
        self.sessions = sessions
        self.config = config or get_config()

    def resolve_admin_password(self) -> str:
        """Stored override first, then the ADMIN_PASSWORD environment value."""
        stored = self.store.get_setting(ADMIN_PASSWORD_KEY)
        if stored:
            return stored
        if self.config.ADMIN_PASSWORD:
            return self.config.ADMIN_PASSWORD
        raise ConfigurationError(
            "Admin portal not configured. Please set ADMIN_PASSWORD environment variable."
        )

    def login(self, password: str | None) -> str:
        expected = self.resolve_admin_password()
        candidate = password or ""
        if not hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8")):
            logger.warning("admin.login.failed", extra={"event": "admin.login.failed"})
            raise AuthenticationError("Invalid password")
        token = self.sessions.issue()
        logger.info("admin.login.succeeded", extra={"event": "admin.login.succeeded"})
        return token

    def logout(self, authorization: str | None) -> None:
        token = extract_bearer_token(authorization)
        if token:
            self.sessions.revoke(token)
            logger.info("admin.logout", extra={"event": "admin.logout"})

    def authorize(self, authorization: str | None) -> str:
        # Missing, malformed and unknown tokens are indistinguishable to callers.
        token = extract_bearer_token(authorization)
        if token is None or not self.sessions.validate(token):
            raise AuthenticationError(UNAUTHORIZED)
        return token
