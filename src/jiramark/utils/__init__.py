"""Utility modules for jiramark.

Provides:
- logger: get_logger for namespaced logging
"""

from jiramark.utils.logger import get_logger

__all__ = ["get_logger"]
