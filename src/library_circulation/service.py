"""
Circulation service for the library.

This is the only part of the package with decision logic. It enforces how
copy counts change and who may borrow, and delegates everything else to
three injected collaborators:

1. **BookDirectory**: look up, persist and list book records
2. **MemberValidator**: decide whether a member may borrow
3. **Notifier**: deliver borrow and return events

The service keeps no state of its own and takes no locks. Each operation is
a find/mutate/save sequence against the directory; callers that allow
concurrent access to one title must serialize it themselves.
"""

import logging

from .exceptions import InvalidArgumentError, InvalidOperationError
from .interfaces import BookDirectory, MemberValidator, Notifier
from .models.book import Book
from .observability import trace_operation

logger = logging.getLogger(__name__)


class CirculationService:
    """
    Adds books, lends and takes back copies, and lists what is available.

    Outcomes that are valid but unsuccessful (unknown title, no copies left)
    are reported as ``False``. Malformed requests and invalid members raise.
    Collaborator exceptions propagate unchanged.
    """

    def __init__(
        self,
        directory: BookDirectory,
        validator: MemberValidator,
        notifier: Notifier,
    ):
        self.directory = directory
        self.validator = validator
        self.notifier = notifier

    def add_book(self, title: str, copies: int) -> None:
        """
        Add ``copies`` copies of ``title`` to the catalogue.

        A new title creates a record; a known title has its count increased
        and the same record saved back.

        Raises:
            InvalidArgumentError: If the title is blank or copies is not a
                positive integer
        """
        if not isinstance(title, str) or not title.strip():
            raise InvalidArgumentError("Title required.")
        if isinstance(copies, bool) or not isinstance(copies, int) or copies <= 0:
            raise InvalidArgumentError("Copies must be positive.")

        with trace_operation("add_book", title=title, copies=copies):
            existing = self.directory.find(title)
            if existing is None:
                self.directory.save(Book(title=title, copies=copies))
                logger.info("Catalogued new title '%s' with %d copies", title, copies)
            else:
                existing.copies += copies
                self.directory.save(existing)
                logger.info(
                    "Added %d copies of '%s' (now %d)", copies, title, existing.copies
                )

    def borrow_book(self, member_id: int, title: str) -> bool:
        """
        Lend one copy of ``title`` to ``member_id``.

        The member is checked before the directory is touched. The updated
        record is saved before the borrow notification is sent.

        Returns:
            True if a copy was lent, False if the title is unknown or has no
            copies available

        Raises:
            InvalidOperationError: If the member is not valid
        """
        with trace_operation("borrow_book", member_id=member_id, title=title) as span:
            if not self.validator.is_valid(member_id):
                logger.warning("Borrow rejected - member %s is not valid", member_id)
                raise InvalidOperationError("Invalid member.")

            book = self.directory.find(title)
            if book is None or book.copies <= 0:
                logger.info("Borrow of '%s' by member %s refused - no copies", title, member_id)
                span.set_attribute("operation.success", False)
                return False

            book.copies -= 1
            self.directory.save(book)
            self.notifier.notify_borrow(member_id, title)

            logger.info("Member %s borrowed '%s' (%d left)", member_id, title, book.copies)
            span.set_attribute("operation.success", True)
            return True

    def return_book(self, member_id: int, title: str) -> bool:
        """
        Take back one copy of ``title`` from ``member_id``.

        Membership is not checked and no upper bound is applied to the copy
        count.

        Returns:
            True if the return was recorded, False if the title is unknown
        """
        with trace_operation("return_book", member_id=member_id, title=title) as span:
            book = self.directory.find(title)
            if book is None:
                logger.info("Return of unknown title '%s' by member %s", title, member_id)
                span.set_attribute("operation.success", False)
                return False

            book.copies += 1
            self.directory.save(book)
            self.notifier.notify_return(member_id, title)

            logger.info("Member %s returned '%s' (%d available)", member_id, title, book.copies)
            span.set_attribute("operation.success", True)
            return True

    def get_available_books(self) -> list[Book]:
        """Return a new list of books with copies available, in directory order."""
        with trace_operation("get_available_books") as span:
            available = [book for book in self.directory.list_all() if book.copies > 0]
            span.set_attribute("result.item_count", len(available))
            return available
