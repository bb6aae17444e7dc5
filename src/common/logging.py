"""Central logging configuration for header-tool."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int = logging.WARNING) -> Logger:
    """Configure the root logger on stderr and return the project logger."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logger = logging.getLogger("headertool")
    logger.setLevel(level)
    return logger
