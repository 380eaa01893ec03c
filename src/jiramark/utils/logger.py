"""Minimal logging utilities for jiramark.

Provides a get_logger function that wraps the standard library logging and
keeps every logger under the ``jiramark`` namespace. The library never
installs handlers; applications decide where records go.

Example:
    >>> from jiramark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering table with %d rows", 3)
"""

from __future__ import annotations

import logging

_NAMESPACE = "jiramark"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance under the "jiramark." prefix

    Example:
        >>> get_logger("tables").name
        'jiramark.tables'
    """
    if not (name == _NAMESPACE or name.startswith(f"{_NAMESPACE}.")):
        name = f"{_NAMESPACE}.{name}"
    return logging.getLogger(name)
