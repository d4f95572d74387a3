"""
Wiring of the circulation service from configuration.

Chooses the collaborator backends named in ``CirculationConfig`` and hands
them to a ``CirculationService``. Logging and Logfire are set up here too,
since this is where an embedding application starts.

```python
with open_circulation_service(config) as service:
    service.add_book("Dune", 2)
# session closed, engine disposed
```
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from .config import CirculationConfig, get_config
from .database.book_directory import SqlBookDirectory
from .database.member_validator import SqlMemberValidator
from .database.session import DatabaseManager
from .directories import InMemoryBookDirectory
from .interfaces import BookDirectory, MemberValidator, Notifier
from .logging_config import configure_logging
from .members import InMemoryMemberValidator
from .notifications import LoggingNotifier, NullNotifier
from .observability import initialize_observability
from .service import CirculationService

logger = logging.getLogger(__name__)


def create_circulation_service(
    config: CirculationConfig | None = None,
    session: Session | None = None,
) -> CirculationService:
    """
    Build a circulation service with the configured collaborators.

    Args:
        config: Settings to use. Defaults to the global configuration.
        session: Session for the SQL backends. The caller owns it.

    Returns:
        A ready CirculationService

    Raises:
        ValueError: If a SQL backend is configured and no session is given
    """
    config = config or get_config()

    if config.uses_database and session is None:
        raise ValueError(
            "SQL backends need a session; pass one or use open_circulation_service()"
        )

    configure_logging(config)
    initialize_observability(config)

    directory: BookDirectory
    if config.directory_backend == "sql":
        directory = SqlBookDirectory(session)
    else:
        directory = InMemoryBookDirectory()

    validator: MemberValidator
    if config.member_backend == "sql":
        validator = SqlMemberValidator(session)
    else:
        validator = InMemoryMemberValidator()

    notifier: Notifier = LoggingNotifier() if config.notifier == "log" else NullNotifier()

    logger.info(
        "%s %s ready (directory=%s, members=%s, notifier=%s)",
        config.service_name,
        config.service_version,
        config.directory_backend,
        config.member_backend,
        config.notifier,
    )
    return CirculationService(directory, validator, notifier)


@contextmanager
def open_circulation_service(
    config: CirculationConfig | None = None,
) -> Generator[CirculationService, None, None]:
    """
    Build a service and release its database on exit.

    Each call opens the database named by ``config.database_path`` with its
    own engine and session, so services built from different configs never
    share storage.
    """
    config = config or get_config()

    if not config.uses_database:
        yield create_circulation_service(config)
        return

    manager = DatabaseManager(config.get_database_url())
    try:
        manager.init_database()
        with manager.session_scope() as session:
            yield create_circulation_service(config, session)
    finally:
        manager.close()
