"""Minimal logging utilities for Tejat.

Example:
    >>> from tejat.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsed %d lines", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``tejat``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("lexer").name
        'tejat.lexer'
    """
    if not (name == "tejat" or name.startswith("tejat.")):
        name = f"tejat.{name}"
    return logging.getLogger(name)
