"""Opaque admin session tokens."""

from __future__ import annotations

import secrets
from threading import Lock
from typing import Protocol

TOKEN_BYTES = 48


class SessionStore(Protocol):
    def issue(self) -> str: ...

    def validate(self, token: str) -> bool: ...

    def revoke(self, token: str) -> None: ...


class InMemorySessionStore:
    """Process-lifetime token set.

    Tokens never expire; they disappear on logout or process restart.
    """

    def __init__(self) -> None:
        self._tokens: set[str] = set()
        self._lock = Lock()

    def issue(self) -> str:
        token = secrets.token_hex(TOKEN_BYTES)
        with self._lock:
            self._tokens.add(token)
        return token

    def validate(self, token: str) -> bool:
        with self._lock:
            return token in self._tokens

    def revoke(self, token: str) -> None:
        with self._lock:
            self._tokens.discard(token)
