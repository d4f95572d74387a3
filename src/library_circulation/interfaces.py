"""
Collaborator contracts consumed by the circulation service.

The service is given one object for each capability at construction time.
Any object with matching methods satisfies a contract; no base class is
required. A lookup that finds nothing returns ``None`` and every caller
checks for it explicitly.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from .models.book import Book


@runtime_checkable
class BookDirectory(Protocol):
    """Source of truth for book records."""

    def find(self, title: str) -> Book | None:
        """Return the book stored under ``title``, or ``None`` if absent."""
        ...

    def save(self, book: Book) -> None:
        """Persist ``book``, creating or replacing the record for its title."""
        ...

    def list_all(self) -> Sequence[Book]:
        """Return every stored book in the directory's own order."""
        ...


@runtime_checkable
class MemberValidator(Protocol):
    """Decides whether a member may currently borrow."""

    def is_valid(self, member_id: int) -> bool: ...


@runtime_checkable
class Notifier(Protocol):
    """Delivers borrow and return events. Return values are ignored."""

    def notify_borrow(self, member_id: int, title: str) -> None: ...

    def notify_return(self, member_id: int, title: str) -> None: ...
