"""Logging setup for the command line interface and embedding applications."""

from __future__ import annotations

import logging
from typing import Optional

from xeus_cling_setup.env import get_log_level

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"
_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the package logger, or one of its children."""
    if name is None or name == __package__:
        return logging.getLogger(__package__)
    if name.startswith(f"{__package__}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{__package__}.{name}")


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    Calling this again only changes the level; the handler is installed once.

    Parameters
    ----------
    level : Optional[str]
        One of DEBUG, INFO, WARNING or ERROR. Defaults to ``XEUS_CLING_SETUP_LOG_LEVEL``,
        or INFO if that is not set.

    Returns
    -------
    logging.Logger
        The package logger.
    """
    global _handler

    level = (level or get_log_level()).upper()
    if level not in _VALID_LEVELS:
        raise ValueError(f"Invalid log_level: {level}")

    logger = get_logger()
    logger.setLevel(getattr(logging, level))
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(_handler)
    return logger
