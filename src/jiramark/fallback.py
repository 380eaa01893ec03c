"""Graceful degradation for node types the renderer does not know.

A conversion must never abort because the host produced a node type that
has no Jira rendering. Instead the reporter writes one warning line naming
the type to the diagnostic stream and hands back a function that renders
anything as the empty string.

Example:
    >>> render_fn = FallbackReporter().report("Figure")
    WARNING: Undefined function 'Figure'     (on stderr)
    >>> render_fn("ignored", attr={})
    ''
"""

import sys
from collections.abc import Callable
from typing import TextIO

from jiramark.utils.logger import get_logger

logger = get_logger(__name__)


def render_nothing(*args: object, **kwargs: object) -> str:
    """Substitute rendering for unknown node types."""
    return ""


class FallbackReporter:
    """Report lookups of undefined rendering functions.

    Each report writes exactly one line, so the diagnostic count always
    matches the number of unknown lookups. The warning goes straight to the
    stream instead of through logging so it is shown once regardless of how
    the application configured its handlers.

    """

    __slots__ = ("_stream",)

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            stream: Diagnostic stream; None means whatever ``sys.stderr`` is
                at report time
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def report(self, name: str) -> Callable[..., str]:
        """Warn about ``name`` and return the empty-string renderer."""
        self.stream.write(f"WARNING: Undefined function '{name}'\n")
        logger.debug("No Jira rendering for %r, substituting empty output", name)
        return render_nothing


default_reporter = FallbackReporter()
