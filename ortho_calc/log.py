"""Logging helpers for the ortho_calc package."""

from __future__ import annotations

import logging
import os
from typing import Final

_LEVEL_NAME: Final[str] = os.getenv("ORTHO_CALC_LOG_LEVEL", "INFO").upper()
_PACKAGE_LOGGER_LEVEL: Final[int] = getattr(logging, _LEVEL_NAME, logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Return a module-level logger without touching global handlers.

    Handlers are configured by the application entry point only.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_PACKAGE_LOGGER_LEVEL)
    return logger


def configure_logging(level: int | str | None = None) -> None:
    """Install a basic stderr handler; called from ``main()``."""
    logging.basicConfig(
        level=level if level is not None else _PACKAGE_LOGGER_LEVEL,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
