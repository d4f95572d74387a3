"""Notification event records produced by borrow and return operations."""

import enum
from datetime import datetime

from pydantic import BaseModel, Field


class NotificationKind(str, enum.Enum):
    """Kinds of circulation events delivered to a notifier."""

    BORROW = "borrow"
    RETURN = "return"


class NotificationEvent(BaseModel):
    """A single circulation event as seen by a notifier."""

    kind: NotificationKind
    member_id: int
    title: str
    occurred_at: datetime = Field(default_factory=datetime.now)
