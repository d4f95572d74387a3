"""Tests for Logfire tracing helpers."""

from unittest.mock import MagicMock, patch

import pytest

from library_circulation.observability import (
    initialize_observability,
    record_circulation_event,
    trace_operation,
)


@pytest.fixture
def mock_logfire():
    with patch("library_circulation.observability.logfire") as logfire:
        span = MagicMock()
        logfire.span.return_value.__enter__.return_value = span
        logfire.span.return_value.__exit__.return_value = False
        yield logfire, span


class TestTraceOperation:
    def test_opens_named_span(self, mock_logfire):
        logfire, span = mock_logfire

        with trace_operation("borrow_book", title="Dune") as active:
            assert active is span

        logfire.span.assert_called_once_with(
            "circulation.borrow_book", operation="borrow_book", title="Dune"
        )

    def test_records_error_and_reraises(self, mock_logfire):
        _, span = mock_logfire
        error = ValueError("boom")

        with pytest.raises(ValueError) as exc_info, trace_operation("add_book"):
            raise error

        assert exc_info.value is error
        span.set_attribute.assert_called_once_with("operation.error", "boom")


class TestInitializeObservability:
    def test_configures_logfire_from_config(self, test_config, mock_logfire):
        logfire, _ = mock_logfire

        initialize_observability(test_config)

        logfire.configure.assert_called_once_with(
            token=None,
            service_name="test-circulation",
            service_version="0.0.1-test",
            environment="development",
            send_to_logfire=False,
            console=False,
        )

    def test_console_output_uses_logfire_default(self, test_config, mock_logfire):
        logfire, _ = mock_logfire
        config = test_config.model_copy(update={"console_output": True})

        initialize_observability(config)

        assert logfire.configure.call_args.kwargs["console"] is None


def test_record_circulation_event():
    with patch("library_circulation.observability.books_circulation") as counter:
        record_circulation_event("borrow")

    counter.add.assert_called_once_with(1, {"event_type": "borrow"})
