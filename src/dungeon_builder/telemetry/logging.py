"""Structured logging setup for the dungeon builder package."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_PACKAGE_LOGGER = "dungeon_builder"


def configure_logging(level: str = "WARNING", *, rich: bool = True) -> logging.Logger:
    """Attach a single handler to the package logger and set its level."""
    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if rich:
        handler: logging.Handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
