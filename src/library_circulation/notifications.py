"""
Notifier implementations for borrow and return events.

- LoggingNotifier: writes each event to the log and the circulation metric
- RecordingNotifier: keeps every event in memory, in delivery order
- NullNotifier: drops every event
"""

import logging

from .models.notification import NotificationEvent, NotificationKind
from .observability import record_circulation_event

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Logs circulation events and counts them in the circulation metric."""

    def notify_borrow(self, member_id: int, title: str) -> None:
        logger.info("Notify: member %s borrowed '%s'", member_id, title)
        record_circulation_event(NotificationKind.BORROW.value)

    def notify_return(self, member_id: int, title: str) -> None:
        logger.info("Notify: member %s returned '%s'", member_id, title)
        record_circulation_event(NotificationKind.RETURN.value)


class RecordingNotifier:
    """Collects delivered events in ``events``."""

    def __init__(self):
        self.events: list[NotificationEvent] = []

    def notify_borrow(self, member_id: int, title: str) -> None:
        self.events.append(
            NotificationEvent(kind=NotificationKind.BORROW, member_id=member_id, title=title)
        )

    def notify_return(self, member_id: int, title: str) -> None:
        self.events.append(
            NotificationEvent(kind=NotificationKind.RETURN, member_id=member_id, title=title)
        )

    def events_of(self, kind: NotificationKind) -> list[NotificationEvent]:
        return [event for event in self.events if event.kind == kind]

    def clear(self) -> None:
        self.events.clear()


class NullNotifier:
    def notify_borrow(self, member_id: int, title: str) -> None:
        pass

    def notify_return(self, member_id: int, title: str) -> None:
        pass
