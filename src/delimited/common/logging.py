"""Process-wide logging setup for the command-line front-end.

Library modules only create loggers; handlers are installed here, once.
"""

from __future__ import annotations

import logging

_LOGGING_CONFIGURED = False

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Install the root handler on first call and set the root level."""

    global _LOGGING_CONFIGURED
    if not _LOGGING_CONFIGURED:
        logging.basicConfig(format=LOG_FORMAT)
        _LOGGING_CONFIGURED = True
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.WARNING))
