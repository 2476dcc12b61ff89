"""Logging configuration for the check.

Log records go to stderr; stdout carries only the status line read by
the monitoring system.
"""

from __future__ import annotations

import logging
import os
import sys

_LOGGING_CONFIGURED = False

PACKAGE_LOGGER = "check_es_aggregation"
TRANSPORT_LOGGERS = ("elastic_transport", "elasticsearch")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure stderr logging; --debug also traces HTTP requests."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    root = logging.getLogger()
    root.setLevel(log_level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)

    if verbose or debug:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)
    if debug:
        for name in TRANSPORT_LOGGERS:
            logging.getLogger(name).setLevel(logging.DEBUG)

    _LOGGING_CONFIGURED = True


def reset_logging() -> None:
    """Reset logging configuration for tests."""
    global _LOGGING_CONFIGURED
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for name in (PACKAGE_LOGGER,) + TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
    _LOGGING_CONFIGURED = False
