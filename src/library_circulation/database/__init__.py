"""
Database package for the SQL-backed collaborators.

This package provides:
- SQLAlchemy schema definitions (schema.py)
- Engine and session handling (session.py)
- A Book Directory over the ``books`` table (book_directory.py)
- A Member Validator over the ``members`` table (member_validator.py)
"""

from .book_directory import SqlBookDirectory
from .member_validator import SqlMemberValidator
from .schema import Base, BookRecord, MemberRecord, MemberStatusEnum
from .session import DatabaseManager, safe_commit, safe_query

__all__ = [
    "Base",
    "BookRecord",
    "DatabaseManager",
    "MemberRecord",
    "MemberStatusEnum",
    "SqlBookDirectory",
    "SqlMemberValidator",
    "safe_commit",
    "safe_query",
]
