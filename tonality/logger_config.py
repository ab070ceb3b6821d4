"""Logging setup for applications using tonality.

The library only logs through ``logging.getLogger(__name__)`` loggers under
the ``tonality`` namespace and installs a NullHandler, so nothing is printed
unless the application configures logging. ``configure_logging`` is a
shortcut for scripts and notebooks.
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "tonality"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it again only updates the level.

    Args:
        level: Logging level for the package logger and its handler
        stream: Output stream (default: stderr)

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    handler = next(
        (h for h in logger.handlers if isinstance(h, logging.StreamHandler)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(level)
    logger.setLevel(level)
    return logger
