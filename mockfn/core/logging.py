"""
Logging helpers for mockfn.

All package loggers live under the ``mockfn`` namespace so they can be tuned
from a single place.
"""

import logging

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "mockfn"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: int | str = logging.WARNING, rich: bool = True) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level name or number
        rich: Use a ``RichHandler`` instead of a plain stream handler

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if rich:
        handler: logging.Handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    logger.addHandler(handler)
    logger.propagate = False
    return logger
