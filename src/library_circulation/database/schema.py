"""
SQLAlchemy database schema for the SQL-backed collaborators.

These tables back the reference Book Directory and Member Validator. The
circulation core never sees them: it only handles ``Book`` models returned
by the directory.
"""

import enum
from datetime import date

from sqlalchemy import Column, Date, DateTime, Enum, Index, Integer, String
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

# Base class for all SQLAlchemy models
Base = declarative_base()


class MemberStatusEnum(str, enum.Enum):
    """Database enum for member status."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
    EXPIRED = "expired"


class BookRecord(Base):
    """
    Books table - one row per catalogued title.

    The autoincrement id gives the directory a stable insertion order and
    stays the same while the copy count is updated.
    """

    __tablename__ = "books"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False, unique=True)
    copies = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=True, default=func.now(), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<BookRecord id={self.id} title={self.title!r} copies={self.copies}>"


class MemberRecord(Base):
    """Members table - library members and their standing."""

    __tablename__ = "members"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(200), nullable=False)
    status = Column(Enum(MemberStatusEnum), nullable=False, default=MemberStatusEnum.ACTIVE)
    expiration_date = Column(Date, nullable=True)

    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    __table_args__ = (Index("idx_member_status", "status"),)

    @property
    def is_active(self) -> bool:
        """Check if the member's membership is currently active."""
        if self.status != MemberStatusEnum.ACTIVE:
            return False

        return not (self.expiration_date and self.expiration_date < date.today())
