"""Configuration module for the Folio application."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv

from folio.core.exceptions import ConfigurationError

load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_optional(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class Config:
    """Runtime configuration with validation."""

    APP_NAME: str
    APP_VERSION: str
    ENV: str
    DEBUG: bool
    DATABASE_URL: str
    ADMIN_PASSWORD: str | None
    STRIPE_SECRET_KEY: str | None
    STRIPE_PUBLISHABLE_KEY: str | None
    CHECKOUT_CURRENCY: str
    PUBLIC_BASE_URL: str | None
    DEFAULT_ACTIVE_PROJECTS: int
    API_HOST: str
    API_PORT: int
    LOG_LEVEL: str
    LOG_FILE: str

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


def _build_config(env: str | None = None) -> Config:
    resolved_env = (env or os.getenv("ENV", "development")).strip().lower()
    debug = _as_bool(os.getenv("DEBUG"), default=(resolved_env != "production"))

    config = Config(
        APP_NAME="Folio",
        APP_VERSION=os.getenv("APP_VERSION", "1.0.0"),
        ENV=resolved_env,
        DEBUG=debug if resolved_env != "production" else False,
        DATABASE_URL=os.getenv("DATABASE_URL", "sqlite:///./folio.db"),
        ADMIN_PASSWORD=_as_optional(os.getenv("ADMIN_PASSWORD")),
        STRIPE_SECRET_KEY=_as_optional(os.getenv("STRIPE_SECRET_KEY")),
        STRIPE_PUBLISHABLE_KEY=_as_optional(os.getenv("STRIPE_PUBLISHABLE_KEY")),
        CHECKOUT_CURRENCY=os.getenv("CHECKOUT_CURRENCY", "usd").strip().lower(),
        PUBLIC_BASE_URL=_as_optional(os.getenv("PUBLIC_BASE_URL")),
        DEFAULT_ACTIVE_PROJECTS=int(os.getenv("DEFAULT_ACTIVE_PROJECTS", "2")),
        API_HOST=os.getenv("API_HOST", "0.0.0.0"),
        API_PORT=int(os.getenv("API_PORT", "8000")),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        LOG_FILE=os.getenv("LOG_FILE", ""),
    )
    _validate_config(config)
    return config


def _validate_database_url(database_url: str) -> None:
    parsed = urlparse(database_url)
    if parsed.scheme not in {"sqlite", "postgresql", "postgresql+psycopg2"}:
        raise ConfigurationError(
            "DATABASE_URL must use sqlite:// or postgresql:// style URL."
        )
    if parsed.scheme.startswith("postgresql") and not parsed.hostname:
        raise ConfigurationError("PostgreSQL DATABASE_URL is missing hostname.")


def _validate_config(config: Config) -> None:
    _validate_database_url(config.DATABASE_URL)

    if config.DEFAULT_ACTIVE_PROJECTS < 0:
        raise ConfigurationError("DEFAULT_ACTIVE_PROJECTS must be >= 0.")
    if len(config.CHECKOUT_CURRENCY) != 3:
        raise ConfigurationError("CHECKOUT_CURRENCY must be a three-letter ISO currency code.")
    if config.PUBLIC_BASE_URL and not config.PUBLIC_BASE_URL.startswith(("http://", "https://")):
        raise ConfigurationError("PUBLIC_BASE_URL must start with http:// or https://.")
    if config.LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigurationError("LOG_LEVEL must be one of DEBUG/INFO/WARNING/ERROR/CRITICAL.")
    if config.is_production and config.STRIPE_SECRET_KEY and config.STRIPE_SECRET_KEY.startswith("sk_test_"):
        raise ConfigurationError("Production STRIPE_SECRET_KEY must not be a test-mode key.")


@lru_cache(maxsize=8)
def get_config(env: str | None = None) -> Config:
    """Get validated configuration for the requested environment."""
    return _build_config(env)
