"""Logging utilities tailored for word placement."""

from __future__ import annotations

import logging
from typing import Optional

LOGGER_NAME = "crossgrid"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream=None) -> None:
    """Attach a single stream handler to the ``crossgrid`` logger tree.

    A placement run tries many candidate positions, so per-candidate detail is
    kept at DEBUG while run summaries go out at INFO. The root logger is left
    alone so embedding applications keep their own configuration.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``crossgrid`` namespace, configuring defaults if needed."""

    if not logging.getLogger(LOGGER_NAME).handlers:
        configure_logging()
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
