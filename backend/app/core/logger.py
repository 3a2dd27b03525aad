"""
Application logger

Every module either imports the shared ``logger`` from here or asks for a
child logger with ``logging.getLogger(__name__)``; both end up on the same
stream handler configured below.
"""
import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a single stream handler to the root logger (idempotent)."""
    root = logging.getLogger()
    resolved = getattr(logging, (level or settings.LOG_LEVEL), logging.INFO)
    root.setLevel(resolved)

    if not any(getattr(h, "_casemadad", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._casemadad = True
        root.addHandler(handler)

    return logging.getLogger("casemadad")


logger = configure_logging()
