"""Minimal logging utilities for stonelex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from stonelex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenized line %d", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "stonelex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'stonelex.mymodule'
    """
    if not (name == "stonelex" or name.startswith("stonelex.")):
        name = f"stonelex.{name}"
    return logging.getLogger(name)
