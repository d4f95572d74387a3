"""In-memory book directory."""

import logging
from collections.abc import Iterable

from .models.book import Book

logger = logging.getLogger(__name__)


class InMemoryBookDirectory:
    """
    Book directory backed by a dict keyed by title.

    Books are listed in the order their titles were first saved. ``save``
    stores the instance it is given, so the object returned by ``find`` is
    the stored record itself.
    """

    def __init__(self, books: Iterable[Book] = ()):
        self._books: dict[str, Book] = {}
        for book in books:
            self._books[book.title] = book

    def find(self, title: str) -> Book | None:
        return self._books.get(title)

    def save(self, book: Book) -> None:
        self._books[book.title] = book
        logger.debug("Stored '%s' with %d copies", book.title, book.copies)

    def list_all(self) -> list[Book]:
        return list(self._books.values())

    def __len__(self) -> int:
        return len(self._books)
