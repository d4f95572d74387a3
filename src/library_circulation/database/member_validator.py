"""SQL-backed member validator."""

import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from .schema import MemberRecord, MemberStatusEnum
from .session import safe_commit, safe_query

logger = logging.getLogger(__name__)


class SqlMemberValidator:
    """
    Member validator backed by the ``members`` table.

    A member is valid when its row exists, its status is active and its
    membership has not expired.
    """

    def __init__(self, session: Session):
        self.session = session

    def _get_record(self, member_id: int) -> MemberRecord | None:
        query = select(MemberRecord).where(MemberRecord.id == member_id)
        return safe_query(
            self.session,
            lambda s: s.execute(query).scalar_one_or_none(),
            "Failed to get member",
        )

    def is_valid(self, member_id: int) -> bool:
        record = self._get_record(member_id)
        if record is None:
            logger.debug("Member %s not found", member_id)
            return False
        return record.is_active

    def enroll(
        self,
        member_id: int,
        name: str,
        status: MemberStatusEnum = MemberStatusEnum.ACTIVE,
        expiration_date: date | None = None,
    ) -> None:
        """
        Create or update a member.

        Raises:
            DirectoryError: If the write fails
        """
        record = self._get_record(member_id)
        if record is None:
            record = MemberRecord(id=member_id, name=name)
            self.session.add(record)

        record.name = name
        record.status = status
        record.expiration_date = expiration_date

        safe_commit(self.session, "enroll member")
        logger.info("Enrolled member %s (%s)", member_id, status.value)
