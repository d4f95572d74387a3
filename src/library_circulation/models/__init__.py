"""
Library Circulation models.

Pydantic models shared by the circulation service and its collaborators:
- Book: a catalogued title with its available copy count
- NotificationEvent: a borrow or return event as delivered to a notifier
"""

from .book import Book
from .notification import NotificationEvent, NotificationKind

__all__ = [
    "Book",
    "NotificationEvent",
    "NotificationKind",
]
