from __future__ import annotations

from dataclasses import replace
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from folio.auth.session_store import InMemorySessionStore
from folio.core.config import Config
from folio.core.dependencies import get_db_session, get_payment_gateway, get_settings
from folio.core.exceptions import PaymentProviderError
from folio.database.record_store import RecordStore
from folio.main import create_app
from folio.models import Base
from folio.services.checkout_service import CheckoutSession

ADMIN_PASSWORD = "correct-horse"

BASE_CONFIG = Config(
    APP_NAME="Folio",
    APP_VERSION="test",
    ENV="test",
    DEBUG=False,
    DATABASE_URL="sqlite://",
    ADMIN_PASSWORD=ADMIN_PASSWORD,
    STRIPE_SECRET_KEY="sk_test_fake",
    STRIPE_PUBLISHABLE_KEY="pk_test_fake",
    CHECKOUT_CURRENCY="usd",
    PUBLIC_BASE_URL=None,
    DEFAULT_ACTIVE_PROJECTS=2,
    API_HOST="127.0.0.1",
    API_PORT=8000,
    LOG_LEVEL="INFO",
    LOG_FILE="",
)


def build_config(**overrides: Any) -> Config:
    return replace(BASE_CONFIG, **overrides)


class FakeGateway:
    """In-memory stand-in for the Stripe checkout API."""

    def __init__(self) -> None:
        self.created: list[dict[str, Any]] = []
        self.sessions: dict[str, CheckoutSession] = {}
        self.fail_with: str | None = None

    def create_session(self, params: dict[str, Any]) -> CheckoutSession:
        if self.fail_with:
            raise PaymentProviderError(self.fail_with)
        self.created.append(params)
        session_id = f"cs_test_{len(self.created)}"
        session = CheckoutSession(id=session_id, url=f"https://checkout.stripe.test/{session_id}")
        return session

    def retrieve_session(self, session_id: str) -> CheckoutSession:
        if self.fail_with:
            raise PaymentProviderError(self.fail_with)
        try:
            return self.sessions[session_id]
        except KeyError as exc:
            raise PaymentProviderError("No such checkout.session") from exc

    def add_paid_session(self, session_id: str, amount_total: int = 52500, **metadata: str) -> CheckoutSession:
        session = CheckoutSession(
            id=session_id,
            payment_status="paid",
            customer_email="ada@example.com",
            amount_total=amount_total,
            metadata={
                "customerName": "Ada Lovelace",
                "customerEmail": "ada@example.com",
                "packageName": "Standard",
                "depositAmount": str(amount_total // 100),
                "projectDetails": '{"pages":5}',
                **metadata,
            },
        )
        self.sessions[session_id] = session
        return session


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def store(db_session):
    return RecordStore(db=db_session)


@pytest.fixture
def config():
    return build_config()


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def app(session_factory, config, gateway):
    application = create_app()
    application.state.session_store = InMemorySessionStore()

    def _get_db_session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    application.dependency_overrides[get_db_session] = _get_db_session
    application.dependency_overrides[get_settings] = lambda: config
    application.dependency_overrides[get_payment_gateway] = lambda: gateway
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def make_config():
    return build_config
