"""Logging helper for symscan.

Example:
    >>> from symscan.log import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("scanning")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger under the ``symscan.`` namespace.

    Example:
        >>> get_logger("printer").name
        'symscan.printer'
    """
    if not (name == "symscan" or name.startswith("symscan.")):
        name = f"symscan.{name}"
    return logging.getLogger(name)
