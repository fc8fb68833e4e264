"""Logging setup shared by the UI entry point and scripts."""

from __future__ import annotations

import logging
import sys

from .settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "listing_assistant"


def setup_logging(level: str | int = LOG_LEVEL) -> logging.Logger:
    """Attach a single stdout handler to the root logger (safe to call on every rerun)."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return root_logger

    console = logging.StreamHandler(sys.stdout)
    console.set_name(_HANDLER_NAME)
    console.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console)
    return root_logger
