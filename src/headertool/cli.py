"""Command-line interface for header-tool.

Usage: ``header-tool [text]``. The first argument is the banner text, taken verbatim
whatever it looks like (``-h``, ``--``, ``-x`` included); without one the banner reads
``PERFORM UPKEEP``. Every run exits 0.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Sequence

from common import Settings, configure_logging
from .banner import choose_text, print_banner


logger = logging.getLogger(__name__)


def run_cli(argv: Sequence[str] | None = None, *, env_files: Iterable[str] | None = None) -> int:
    """Entry point for handling CLI execution."""
    args = list(sys.argv[1:] if argv is None else argv)

    settings = Settings.from_env(env_files=env_files)
    level = settings.resolved_log_level()
    configure_logging(level if level is not None else logging.WARNING)
    if level is None:
        logger.warning("Unknown log level %r; using WARNING", settings.log_level)
    logger.debug("Running in %s environment", settings.environment)

    text = choose_text(args)
    if len(args) > 1:
        logger.debug("Ignoring surplus arguments: %r", args[1:])

    print_banner(text)
    return 0
