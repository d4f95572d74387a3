"""In-memory member validator."""

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)


class InMemoryMemberValidator:
    """Treats a fixed, mutable set of member ids as valid."""

    def __init__(self, valid_ids: Iterable[int] = ()):
        self._valid_ids: set[int] = set(valid_ids)

    def is_valid(self, member_id: int) -> bool:
        return member_id in self._valid_ids

    def enroll(self, member_id: int) -> None:
        """Mark ``member_id`` as a valid member."""
        self._valid_ids.add(member_id)
        logger.info("Enrolled member %s", member_id)

    def revoke(self, member_id: int) -> None:
        """Remove ``member_id`` from the valid members, if present."""
        self._valid_ids.discard(member_id)
        logger.info("Revoked member %s", member_id)
