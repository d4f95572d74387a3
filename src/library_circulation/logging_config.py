"""Logging setup for applications embedding the circulation service."""

import logging
import sys

from .config import CirculationConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: CirculationConfig) -> None:
    """Send log records to stderr at the configured level."""
    level = getattr(logging, config.effective_log_level)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # basicConfig is a no-op once handlers exist; the level must still apply
    logging.getLogger().setLevel(level)

    # SQL echo only in debug mode
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if config.debug else logging.WARNING
    )
