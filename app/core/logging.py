"""
Logging setup for the events API.

All module loggers live under the "calendar_api" tree, e.g.
"calendar_api.routers.events". configure_logging() attaches a single
console handler to the root of that tree.

Log Format:
==========
    [2019-12-15 12:00:00] INFO [calendar_api.routers.events] message
"""

import logging
import sys


ROOT_LOGGER_NAME = "calendar_api"

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the "calendar_api" logger tree.

    Safe to call more than once (e.g. one app per test): the handler
    is only added the first time, the level is always updated.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...)

    Returns:
        The root "calendar_api" logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())

    # Create console handler if not exists
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
