"""Logging setup for applications embedding annosql."""

from __future__ import annotations

import logging
import os

#: Root logger name shared by every annosql module.
LOGGER_NAME = "annosql"


def configure_logging(level: str | None = None) -> None:
    """Attach a stream handler to the ``annosql`` logger.

    The library itself only installs a ``NullHandler``; call this from
    scripts or tests that want to see parser diagnostics.

    Args:
        level: Log level name; falls back to ``ANNOSQL_LOG_LEVEL``, then
            ``WARNING``.
    """
    log_level = (level or os.getenv("ANNOSQL_LOG_LEVEL") or "WARNING").upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
        logger.addHandler(handler)
