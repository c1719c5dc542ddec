"""
utils/logger.py
---------------
Logging setup for the catalog CLI.

Modules take a logger with `get_logger(__name__)` at import time; `main`
calls `configure_logging()` once at startup. Until then records at WARNING
and above still reach stderr through logging's last-resort handler.
Logs never go to stdout, which belongs to the interactive menu.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "WARNING") -> None:
    """
    Attach a stderr handler to the root logger. A no-op when the root
    logger already has handlers.

    Args:
        level: Level name such as ``"INFO"``; unknown names fall back to WARNING.
    """
    logging.basicConfig(
        stream=sys.stderr,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        level=getattr(logging, level.upper(), logging.WARNING),
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
