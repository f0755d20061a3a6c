"""Minimal logging utilities for bytelex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from bytelex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning %d bytes", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "bytelex." prefix.
    The library never installs handlers; applications (or the bundled
    CLI) decide where records go.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'bytelex.mymodule'
    """
    if not (name == "bytelex" or name.startswith("bytelex.")):
        name = f"bytelex.{name}"
    return logging.getLogger(name)
