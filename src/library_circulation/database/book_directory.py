"""
SQL-backed book directory.

Implements the BookDirectory contract on top of the ``books`` table. Rows
are converted to ``Book`` models on the way out, and ``save`` upserts by
title on the way in, so a book keeps its row (and its place in
``list_all``) across every copy-count change.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models.book import Book
from .schema import BookRecord
from .session import safe_commit, safe_query

logger = logging.getLogger(__name__)


class SqlBookDirectory:
    """Book directory that reads and writes through one SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    def _get_record(self, title: str) -> BookRecord | None:
        query = select(BookRecord).where(BookRecord.title == title)
        return safe_query(
            self.session,
            lambda s: s.execute(query).scalar_one_or_none(),
            "Failed to get book by title",
        )

    @staticmethod
    def _to_model(record: BookRecord) -> Book:
        return Book(title=record.title, copies=record.copies)

    def find(self, title: str) -> Book | None:
        """
        Get book by title.

        Returns:
            Book model or None if not found
        """
        record = self._get_record(title)
        if record is None:
            return None
        return self._to_model(record)

    def save(self, book: Book) -> None:
        """
        Insert or update the row for ``book.title``.

        Raises:
            DirectoryError: If the write fails
        """
        record = self._get_record(book.title)
        if record is None:
            record = BookRecord(title=book.title, copies=book.copies)
            self.session.add(record)
            operation = "create book"
        else:
            record.copies = book.copies
            operation = "update book"

        safe_commit(self.session, operation)
        logger.debug("Saved '%s' with %d copies", book.title, book.copies)

    def list_all(self) -> list[Book]:
        """Return every book in insertion order."""
        query = select(BookRecord).order_by(BookRecord.id)
        records = safe_query(
            self.session,
            lambda s: s.execute(query).scalars().all(),
            "Failed to list books",
        )
        return [self._to_model(record) for record in records]
