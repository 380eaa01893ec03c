"""Literal-text escaping for Jira markup.

Jira reads ``{`` as the start of a macro (``{code}``, ``{quote}``,
``{color:red}``...). Literal text that contains a brace is escaped with a
backslash so it shows up as typed.

Escaping is idempotent: a brace that is already escaped is left alone, so
text can pass through more than one escaping position (a Str inside a Link,
for example) without piling up backslashes.

The cost is that a backslash typed before a brace in the source text also
counts as an escape. ``C:\\{dir}`` passes through unchanged, Jira consumes
the backslash, and a literal ``\\{`` cannot be expressed.

Example:
    >>> escape("use {braces}")
    'use \\\\{braces}'
    >>> escape("use {braces}", braces=False)
    'use {braces}'
"""

import re

_UNESCAPED_BRACE = re.compile(r"(?<!\\)\{")


def escape(text: str, *, braces: bool = True) -> str:
    """Escape literal text for embedding in Jira markup.

    Args:
        text: Literal text
        braces: Escape unescaped ``{``; when False, text is returned unchanged

    Returns:
        Text safe to embed; no character other than ``{`` is touched
    """
    if not braces or "{" not in text:
        return text
    return _UNESCAPED_BRACE.sub(r"\\{", text)
