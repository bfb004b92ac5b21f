"""Minimal logging utilities for tweetlink.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure output.

Example:
    >>> from tweetlink.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Linked %d hashtag(s)", 2)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tweetlink." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("autolink")
        >>> logger.name
        'tweetlink.autolink'
    """
    if not (name == "tweetlink" or name.startswith("tweetlink.")):
        name = f"tweetlink.{name}"
    return logging.getLogger(name)
