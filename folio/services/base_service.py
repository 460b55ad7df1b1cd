"""Session-owning base for the persistence layer."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from folio.core.exceptions import DatabaseError, DuplicateRecordError
from folio.database.db import SessionLocal

logger = logging.getLogger(__name__)


class BaseService:
    """Wraps a SQLAlchemy session and translates commit failures.

    Unique-constraint violations surface as ``DuplicateRecordError`` so callers
    can treat a lost insert race as "already there"; every other failure is a
    ``DatabaseError``. The session is rolled back before either is raised.
    """

    def __init__(self, db: Session | None = None) -> None:
        self.db = db or SessionLocal()

    def commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if "unique" in str(exc.orig).lower():
                raise DuplicateRecordError(str(exc.orig)) from exc
            logger.exception("store.integrity.failed", extra={"event": "store.integrity.failed"})
            raise DatabaseError("Database constraint violated.") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("store.commit.failed", extra={"event": "store.commit.failed"})
            raise DatabaseError("Database write failed.") from exc

    def rollback(self) -> None:
        self.db.rollback()

    def close(self) -> None:
        self.db.close()

    def __enter__(self) -> "BaseService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type:
            self.rollback()
        self.close()
