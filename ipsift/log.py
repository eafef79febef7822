"""Logging setup — route log records through a Rich handler on stderr."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import LOG_LEVEL_ENV


def setup_logging(level: str | None = None) -> None:
    """Configure the ``ipsift`` logger.

    *level* falls back to $IPSIFT_LOG_LEVEL, then WARNING.
    """
    log_level = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").upper()

    logger = logging.getLogger("ipsift")
    logger.setLevel(getattr(logging, log_level, logging.WARNING))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True), show_path=False, rich_tracebacks=True
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("pdfminer").setLevel(logging.WARNING)
