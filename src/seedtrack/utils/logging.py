"""Logging helpers for library users and examples."""

from __future__ import annotations

import logging

PACKAGE_LOGGER_NAME = "seedtrack"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: int = logging.INFO, package_level: int | None = None) -> None:
    """Configure console logging for examples and scripts.

    Args:
        level: Root logger level.
        package_level: Level for the ``seedtrack`` loggers. Set it to
            ``logging.DEBUG`` to trace generation stages and cache evictions
            without enabling debug output from plotting libraries. Defaults
            to ``level``.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level if package_level is None else package_level)
