"""Test configuration and fixtures for the Library Circulation service.

Fixtures come in three groups:
1. Collaborators - in-memory and Mock(spec=...) stand-ins for the directory,
   member validator and notifier
2. Database - an isolated in-memory SQLite session per test
3. Configuration - fresh settings with the global singleton reset
"""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock

import logfire
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from library_circulation.config import CirculationConfig, reset_config
from library_circulation.database.schema import Base
from library_circulation.directories import InMemoryBookDirectory
from library_circulation.interfaces import BookDirectory, MemberValidator, Notifier
from library_circulation.members import InMemoryMemberValidator
from library_circulation.notifications import RecordingNotifier
from library_circulation.service import CirculationService


@pytest.fixture(scope="session", autouse=True)
def _quiet_logfire():
    """Keep spans and metrics local during tests."""
    logfire.configure(send_to_logfire=False, console=False)


# === Collaborator Fixtures ===


@pytest.fixture
def directory() -> InMemoryBookDirectory:
    return InMemoryBookDirectory()


@pytest.fixture
def validator() -> InMemoryMemberValidator:
    """Validator with no members enrolled."""
    return InMemoryMemberValidator()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def service(directory, validator, notifier) -> CirculationService:
    """Service over in-memory collaborators."""
    return CirculationService(directory, validator, notifier)


@pytest.fixture
def mock_directory() -> Mock:
    """Directory mock that finds nothing and lists nothing by default."""
    mock = Mock(spec=BookDirectory)
    mock.find.return_value = None
    mock.list_all.return_value = []
    return mock


@pytest.fixture
def mock_validator() -> Mock:
    mock = Mock(spec=MemberValidator)
    mock.is_valid.return_value = True
    return mock


@pytest.fixture
def mock_notifier() -> Mock:
    return Mock(spec=Notifier)


@pytest.fixture
def mocked_service(mock_directory, mock_validator, mock_notifier) -> CirculationService:
    """Service whose collaborators are all mocks."""
    return CirculationService(mock_directory, mock_validator, mock_notifier)


# === Database Fixtures ===


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Provide a session on a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    session_local = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = session_local()

    try:
        yield session
    finally:
        session.close()
        engine.dispose()


# === Configuration Fixtures ===


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    return tmp_path / "test_library.db"


@pytest.fixture
def test_config(test_db_path: Path) -> Generator[CirculationConfig, None, None]:
    """Provide a test-specific configuration with in-memory backends."""
    reset_config()

    config = CirculationConfig(
        service_name="test-circulation",
        service_version="0.0.1-test",
        database_path=test_db_path,
        directory_backend="memory",
        member_backend="memory",
        notifier="none",
        debug=True,
        log_level="DEBUG",
    )

    yield config

    reset_config()
