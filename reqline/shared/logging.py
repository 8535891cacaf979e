"""Logging configuration for the reqline service."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
ACCESS_LOGGER = "aiohttp.access"


def setup_logging(level: int | str = logging.INFO, access_level: int | str | None = None) -> None:
    """
    Configure logging for the service and the aiohttp server.

    Args:
        level: Root logging level (default: INFO)
        access_level: Level of the aiohttp access log; follows ``level``
            when omitted
    """
    if isinstance(level, str):
        level = level.upper()
    if isinstance(access_level, str):
        access_level = access_level.upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(console_handler)

    # One line per served /reqline call; quieten it without touching the service loggers
    logging.getLogger(ACCESS_LOGGER).setLevel(access_level if access_level is not None else level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance, typically for ``__name__``."""
    return logging.getLogger(name)
