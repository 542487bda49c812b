"""
Logging setup for the carteira driver layer.

The valuation engine (clients, investment, portfolio) never logs; only the
layers that build portfolios from configuration and drive them
(serialization, cli) do.

Example
-------
>>> from carteira.logger import setup_logger
>>> logger = setup_logger("carteira", level="DEBUG")
>>> logger.debug("loaded 3 investments")
"""

from __future__ import annotations

import logging
import sys
from typing import Union

__all__ = [
    "LOG_FORMAT",
    "DATE_FORMAT",
    "setup_logger",
    "get_logger",
]


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str = "carteira", level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Configure and return a logger writing to stderr.

    Calling it again for the same name replaces the handler instead of
    stacking duplicates.

    Args:
        name: Logger name, usually the package root "carteira"
        level: Minimum level, as an int or a name such as "INFO"

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger under the package hierarchy (no handler attached)."""
    return logging.getLogger(name)
