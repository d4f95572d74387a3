"""
Library Circulation package.

Tracks how many copies of each title a library holds and records borrow and
return transactions. The circulation core delegates storage, membership
checks and notification delivery to injected collaborators.

Key Components:
- service: the CirculationService and its rules
- interfaces: BookDirectory, MemberValidator and Notifier contracts
- models: Pydantic models for books and notification events
- directories, members, notifications: in-memory collaborators
- database: SQLAlchemy-backed collaborators
- config: Settings with pydantic-settings
- app: builds a service from configuration
"""

__version__ = "0.1.0"

from .exceptions import (
    CirculationError,
    DirectoryError,
    InvalidArgumentError,
    InvalidOperationError,
)
from .interfaces import BookDirectory, MemberValidator, Notifier
from .models import Book
from .service import CirculationService

__all__ = [
    "Book",
    "BookDirectory",
    "CirculationError",
    "CirculationService",
    "DirectoryError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "MemberValidator",
    "Notifier",
    "__version__",
]
