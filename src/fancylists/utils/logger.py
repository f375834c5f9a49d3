"""Minimal logging utilities for fancylists.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from fancylists.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Opening list block")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "fancylists." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("rule")
        >>> logger.name
        'fancylists.rule'
    """
    if not (name == "fancylists" or name.startswith("fancylists.")):
        name = f"fancylists.{name}"
    return logging.getLogger(name)
