"""Centralized logging configuration for the touchcal package."""

from __future__ import annotations

import logging
import os
import sys
from typing import Final

# Allow environment override without touching handlers
_LEVEL_NAME: Final[str] = os.getenv("TOUCHCAL_LOG_LEVEL", "INFO").upper()
_PACKAGE_LOGGER_LEVEL: Final[int] = getattr(logging, _LEVEL_NAME, logging.INFO)

PACKAGE_LOGGER_NAME: Final[str] = "touchcal"


def get_logger(name: str) -> logging.Logger:
    """Return a module-level logger without altering global handlers.

    Library modules must not install handlers; the entry point does that.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_PACKAGE_LOGGER_LEVEL)
    return logger


def configure_cli_logging(level: int | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Stdout is reserved for calibration output, so log records go to stderr.
    Calling this more than once replaces the previous handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level if level is not None else _PACKAGE_LOGGER_LEVEL)

    for handler in list(logger.handlers):
        if getattr(handler, "_touchcal_cli", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"),
    )
    handler._touchcal_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
