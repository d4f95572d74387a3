"""
SQLite session handling for the SQL-backed collaborators.

One ``DatabaseManager`` per database file. The SQL book directory and member
validator share one session from it and commit after every write.
"""

import logging
from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import TypeVar

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..exceptions import DirectoryError
from .schema import Base

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DatabaseManager:
    """Owns the engine and session factory for one SQLite database URL."""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            # StaticPool keeps one connection, so sqlite:///:memory: survives between sessions
            self._engine = create_engine(
                self.database_url,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
            logger.info("Database engine created: %s", self._engine.url)
        return self._engine

    def create_session(self) -> Session:
        """Create a new session. The caller closes it."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine, autoflush=False, expire_on_commit=False
            )
        return self._session_factory()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """Yield a session that is committed on success and rolled back on error."""
        session = self.create_session()
        try:
            yield session
            session.commit()
        except Exception:
            logger.exception("Database error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()

    def init_database(self, drop_existing: bool = False) -> None:
        """Create the ``books`` and ``members`` tables if they are missing."""
        if drop_existing:
            logger.warning("Dropping all existing tables...")
            Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ready at %s", self.database_url)

    def verify_connection(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.exception("Database connection failed")
            return False
        return True

    def close(self) -> None:
        """Dispose of the engine. The manager can be reused afterwards."""
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._session_factory = None


def safe_commit(session: Session, operation: str) -> None:
    """
    Commit a session, rolling back on failure.

    Raises:
        DirectoryError: If the commit fails
    """
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise DirectoryError(f"Database operation '{operation}' failed: {e!s}") from e


def safe_query(session: Session, query_func: Callable[[Session], T], error_msg: str) -> T:
    """
    Run a query, translating database failures.

    Raises:
        DirectoryError: If the query fails
    """
    try:
        return query_func(session)
    except SQLAlchemyError as e:
        logger.exception("Query failed")
        raise DirectoryError(f"{error_msg}: Database query failed") from e
