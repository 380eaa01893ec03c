"""Exception classes for jiramark.

Rendering itself never raises: malformed attributes degrade to empty values
and unknown node types go through the fallback reporter. The only errors are
configuration mistakes, which surface before any rendering happens.
"""

from __future__ import annotations


class JiramarkError(Exception):
    """Base exception for all jiramark errors."""

    pass


class ConfigError(JiramarkError):
    """Invalid render configuration.

    Raised when a RenderConfig option is given a value outside its
    accepted set (e.g. an unknown block quote style).
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending RenderConfig field
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")
