"""Shared logging utilities for consistent client observability.

Usage example:
    from companies_house_client.observability.logging import get_logger

    logger = get_logger("companies_house_client.client")
    logger.debug("Fetching registered address for company: %s", company_number)

Client loggers log at INFO until ``set_log_level`` raises or lowers them, which
the CLI does for ``--verbose``.
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

_configured_loggers: dict[str, logging.Logger] = {}


def get_logger(name: str) -> logging.Logger:
    """Return a standard logger configured for UTC timestamps.

    Args:
        name: Logger name (use a stable module-qualified name).

    Returns:
        A logger with a single stream handler and a consistent UTC format.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    _configured_loggers[name] = logger
    return logger


def set_log_level(level: int) -> None:
    """Apply a level to every logger handed out by ``get_logger``."""
    for logger in _configured_loggers.values():
        logger.setLevel(level)
