from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from folio.database.record_store import RecordStore
from folio.models import Base, Payment
from folio.services.checkout_service import CheckoutService

WORKERS = 8


def test_parallel_reconciles_record_one_payment(tmp_path, gateway, config):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'reconcile.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    SessionFactory = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    gateway.add_paid_session("cs_parallel")
    barrier = Barrier(WORKERS)

    def _reconcile(_):
        session = SessionFactory()
        try:
            service = CheckoutService(store=RecordStore(db=session), gateway=gateway, config=config)
            barrier.wait(timeout=30)
            result = service.reconcile_session("cs_parallel")
            return result.created, result.payment.id
        finally:
            session.close()

    try:
        with ThreadPoolExecutor(max_workers=WORKERS) as pool:
            outcomes = list(pool.map(_reconcile, range(WORKERS)))

        session = SessionFactory()
        try:
            payment_ids = [row.id for row in session.query(Payment).all()]
        finally:
            session.close()
    finally:
        engine.dispose()

    assert sorted(created for created, _ in outcomes) == [False] * (WORKERS - 1) + [True]
    assert payment_ids and len(payment_ids) == 1
    assert {payment_id for _, payment_id in outcomes} == set(payment_ids)
