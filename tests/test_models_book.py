"""
Tests for the Book and NotificationEvent models.

These tests verify that the models:
1. Validate field types on construction and on assignment
2. Leave the copy-count invariant to the circulation service
3. Serialize to and from JSON
"""

import pytest
from pydantic import ValidationError

from library_circulation.models import Book, NotificationEvent, NotificationKind


class TestBookModel:
    """Test suite for the Book model."""

    def test_create_valid_book(self):
        book = Book(title="Dune", copies=2)

        assert book.title == "Dune"
        assert book.copies == 2
        assert book.is_available is True

    def test_zero_copies_is_not_available(self):
        assert Book(title="Dune", copies=0).is_available is False

    def test_empty_title_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Book(title="", copies=1)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("title",) for error in errors)

    def test_missing_fields_are_rejected(self):
        with pytest.raises(ValidationError):
            Book(title="Dune")

    def test_negative_copies_are_representable(self):
        """The entity does not police the count; the service does."""
        book = Book(title="Dune", copies=-1)
        assert book.copies == -1
        assert book.is_available is False

    def test_in_place_mutation(self):
        book = Book(title="Dune", copies=1)
        book.copies += 2
        assert book.copies == 3

    def test_assignment_is_validated(self):
        book = Book(title="Dune", copies=1)

        with pytest.raises(ValidationError):
            book.copies = "many"

    def test_json_serialization(self):
        book = Book(title="Dune", copies=2)

        data = book.model_dump()
        assert data == {"title": "Dune", "copies": 2}

        restored = Book.model_validate_json(book.model_dump_json())
        assert restored == book

    def test_schema_example(self):
        schema = Book.model_json_schema()
        assert schema["example"] == {"title": "Dune", "copies": 2}


class TestNotificationEvent:
    """Test suite for notification event records."""

    def test_create_event(self):
        event = NotificationEvent(kind="borrow", member_id=1, title="Dune")

        assert event.kind is NotificationKind.BORROW
        assert event.member_id == 1
        assert event.title == "Dune"
        assert event.occurred_at is not None

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(ValidationError):
            NotificationEvent(kind="renew", member_id=1, title="Dune")
