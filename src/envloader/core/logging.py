"""Logging for the envloader command line."""

from __future__ import annotations

import logging
import sys

from envloader.core.config import CliSettings

PACKAGE_LOGGER = "envloader"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(settings: CliSettings) -> logging.Logger:
    """Send ``envloader`` log records to stderr at the configured level.

    Only the package logger is configured, so handlers installed on the
    root logger by a host application are left alone. Calling this again
    replaces the handler from the previous call.

    Args:
        settings: Validated CLI settings; ``log_level`` is one of LOG_LEVELS

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(settings.log_level)
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)

    package_logger.debug("Logging configured: level=%s", settings.log_level)
    return package_logger
