"""Logfire tracing and metrics for circulation operations."""

import logging
from collections.abc import Generator
from contextlib import contextmanager

import logfire

from .config import CirculationConfig

logger = logging.getLogger(__name__)

# Library Business Metrics
books_circulation = logfire.metric_counter(
    "library.books.circulation", description="Book circulation events (borrow/return)"
)


def initialize_observability(config: CirculationConfig) -> None:
    """Configure Logfire from the service configuration."""
    logfire.configure(
        token=config.logfire_token,
        service_name=config.service_name,
        service_version=config.service_version,
        environment=config.environment,
        send_to_logfire=config.send_to_logfire,
        console=None if config.console_output else False,
    )
    logger.debug(
        "Logfire configured (environment=%s, send_to_logfire=%s)",
        config.environment,
        config.send_to_logfire,
    )


@contextmanager
def trace_operation(operation: str, **attributes) -> Generator[logfire.LogfireSpan, None, None]:
    """Open a span around one circulation operation."""
    with logfire.span(f"circulation.{operation}", operation=operation, **attributes) as span:
        try:
            yield span
        except Exception as e:
            span.set_attribute("operation.error", str(e))
            raise


def record_circulation_event(event_type: str) -> None:
    """Record a borrow or return event."""
    books_circulation.add(1, {"event_type": event_type})
