"""Logging setup for svg-shape2path.

Library code only logs through module loggers and may set the package
logger's level; handlers are attached by the CLI via ``setup_logging``.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "svg_shape2path"

_handler: logging.Handler | None = None


def _resolve_level(level: str | int) -> int:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    return level


def set_package_level(level: str | int) -> logging.Logger:
    """Set the package logger's level without touching handlers."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(level))
    return logger


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a console handler to the package logger.

    The handler is installed once; later calls only change the level.
    """
    global _handler

    level = _resolve_level(level)
    logger = set_package_level(level)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(_handler)

    _handler.setLevel(level)
    return logger
