import logging
import os
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from exceptions.repository_error import PersistenceError

load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("CRAVEY_DATABASE_URL", "sqlite:///./cravey.db")
IN_MEMORY_URL = "sqlite://"


def make_engine(url: str = DATABASE_URL) -> Engine:
    """
    Create an engine for the journal database.

    In-memory SQLite URLs get a StaticPool so every connection sees the
    same database for the lifetime of the engine.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in (IN_MEMORY_URL, "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url)


def init_db(engine: Engine) -> None:
    """Create all journal tables that don't exist yet."""
    from models import Base

    Base.metadata.create_all(engine)


engine = make_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class StorageContext:
    """
    Single owner of one database session.

    Every repository bound to the context goes through transaction() or
    read(), which hold the same re-entrant lock for the whole operation,
    so the session is never touched by two threads at once.
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self._session: Session = session_factory()
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self, description: str) -> Iterator[Session]:
        """
        Run a unit of work and commit it.

        On a storage fault the session is rolled back and the fault is
        re-raised as PersistenceError. Other exceptions (e.g. NotFoundError)
        roll back and propagate unchanged.
        """
        with self._lock:
            try:
                yield self._session
                self._session.commit()
            except SQLAlchemyError as e:
                self._session.rollback()
                logger.error(f"Failed to {description}: {e}")
                raise PersistenceError(f"Failed to {description}: {e}") from e
            except Exception:
                self._session.rollback()
                raise

    @contextmanager
    def read(self, description: str) -> Iterator[Session]:
        with self._lock:
            try:
                yield self._session
            except SQLAlchemyError as e:
                self._session.rollback()
                logger.error(f"Failed to {description}: {e}")
                raise PersistenceError(f"Failed to {description}: {e}") from e

    def close(self) -> None:
        with self._lock:
            self._session.close()


def create_storage_context(url: Optional[str] = None) -> StorageContext:
    """Build a StorageContext on its own engine, creating the schema if needed."""
    if url is None:
        bound_engine = engine
    else:
        bound_engine = make_engine(url)
    init_db(bound_engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=bound_engine)
    return StorageContext(factory)
