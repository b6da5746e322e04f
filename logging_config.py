"""Logging setup for the hospital dashboards.

Modules take ``logging.getLogger(__name__)``; this module attaches a single
console handler to the root logger.
"""

import logging
from typing import Optional

from config import LOG_FORMAT, LOG_LEVEL

_logging_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure console logging. Safe to call more than once."""
    global _logging_configured

    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO))

    if _logging_configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    _logging_configured = True
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(root.level))
