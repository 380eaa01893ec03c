"""Jira wiki markup renderer.

Renders document nodes whose children arrive already rendered (the host
walks its tree post-order). Every rule is a direct mapping from one node to
one string; the renderer performs no traversal of its own and keeps no state
between calls.

Example:
    >>> renderer = JiraRenderer()
    >>> renderer.render(Header(2, "Overview"))
    'h2. Overview'
    >>> renderer.render(BulletList(("one", "two")))
    '* one\\n* two'

Unknown Nodes:
Anything that is not one of the node classes in ``jiramark.nodes`` falls
through to the default arm, which reports it via FallbackReporter and
renders as the empty string.

Thread Safety:
JiraRenderer holds only its optional config and reporter. Without an explicit
config it reads the ContextVar config on every call, so one instance can be
shared across threads and contexts.

"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from jiramark.config import RenderConfig, get_render_config
from jiramark.escape import escape
from jiramark.fallback import FallbackReporter, default_reporter
from jiramark.nodes import (
    Attr,
    BlockQuote,
    BulletList,
    CaptionedImage,
    Cite,
    Code,
    CodeBlock,
    DefinitionList,
    DisplayMath,
    Div,
    Doc,
    Emph,
    Header,
    HorizontalRule,
    Image,
    InlineMath,
    LineBlock,
    LineBreak,
    Link,
    Node,
    Note,
    OrderedList,
    Para,
    Plain,
    RawBlock,
    RawInline,
    SmallCaps,
    SoftBreak,
    Space,
    Span,
    Str,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
)

# Format tag whose raw content is passed through verbatim
JIRA_FORMAT = "jira"

# Separator between top-level blocks
BLOCKSEP = "\n\n"

# A line that is itself a list item rendered by a nested list
_NESTED_ITEM = re.compile(r"^[*#]+ ")

# Opening fence of a code or noformat block; its content is verbatim
_FENCE_OPEN = re.compile(r"^\{(code|noformat)(?::[^}]*)?\}")


def _fence_after(line: str, fence: str | None) -> str | None:
    """Name of the fence still open after ``line``, or None."""
    if fence is not None:
        return None if f"{{{fence}}}" in line else fence
    match = _FENCE_OPEN.match(line)
    if match is None:
        return None
    name = match.group(1)
    # Opened and closed on the same line
    return None if f"{{{name}}}" in line[match.end():] else name


class JiraRenderer:
    """Render document nodes to Jira wiki markup.

    Usage:
        >>> JiraRenderer().render(Link("docs", "https://example.com"))
        '[docs|https://example.com]'

        >>> JiraRenderer(RenderConfig.original()).render(BlockQuote(" hi "))
        'bq. hi'

    """

    __slots__ = ("_config", "_reporter")

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        reporter: FallbackReporter | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            config: Fixed configuration; None reads the context config per call
            reporter: Reporter for unknown node types (defaults to stderr)
        """
        self._config = config
        self._reporter = reporter or default_reporter

    @property
    def config(self) -> RenderConfig:
        return self._config if self._config is not None else get_render_config()

    @property
    def reporter(self) -> FallbackReporter:
        return self._reporter

    def render(self, node: Node) -> str:
        """Render one node whose children are already rendered."""
        config = self.config
        match node:
            # Inline
            case Str():
                return self._escape(node.text, config)
            case Space():
                return " "
            case SoftBreak():
                return "\n"
            case LineBreak():
                return "\n\n"
            case Emph():
                return f"_{node.content}_"
            case Strong():
                return f"*{node.content}*"
            case Subscript():
                return f"~{node.content}~"
            case Superscript():
                return f"^{node.content}^"
            case SmallCaps():
                return node.content
            case Strikeout():
                return f"-{node.content}-"
            case Code():
                return f"{{{{{node.text}}}}}"
            case InlineMath() | DisplayMath():
                return self._render_math(node.text, config)
            case Cite():
                return f"??{self._escape(node.content, config)}??"
            case Note():
                return self._escape(node.content, config)
            case Link():
                return f"[{self._escape(node.content, config)}|{node.target}]"
            case Image():
                return self._render_image(node.alt, node.src, config)
            case Span():
                return node.content
            case RawInline() | RawBlock():
                return node.text if node.format == JIRA_FORMAT else ""
            # Block
            case Plain():
                return node.content
            case Para() | Div():
                return self._render_paragraph(node.content, config)
            case Header():
                return f"h{node.level}. {node.content}"
            case BlockQuote():
                return self._render_blockquote(node.content, config)
            case HorizontalRule():
                return "----"
            case LineBlock():
                return "\n".join(node.lines)
            case CodeBlock():
                return self._render_code_block(node.content, node.attr, config)
            case BulletList() | DefinitionList():
                return self._render_list("*", node.items)
            case OrderedList():
                return self._render_list("#", node.items)
            case CaptionedImage():
                return self._render_image(node.caption, node.src, config)
            case Table():
                return self._render_table(node.headers, node.rows)
            # Document
            case Doc():
                return self.doc(node.body, node.metadata, node.variables)
            case _:
                return self._reporter.report(type(node).__name__)(node)

    # =========================================================================
    # Document assembly
    # =========================================================================

    def blocksep(self) -> str:
        """Separator placed between top-level blocks."""
        return BLOCKSEP

    def doc(
        self,
        body: str,
        metadata: Mapping[str, Any] | None = None,
        variables: Mapping[str, Any] | None = None,
    ) -> str:
        """Whole-document pass.

        Metadata and variables are left to the host's template step; the
        body is returned as is.
        """
        return body

    # =========================================================================
    # Helpers
    # =========================================================================

    def _escape(self, text: str, config: RenderConfig) -> str:
        return escape(text, braces=config.escape_braces)

    def _render_math(self, text: str, config: RenderConfig) -> str:
        escaped = self._escape(text, config)
        if config.math_delimiters:
            return f"//( {escaped} //)"
        return escaped

    def _render_image(self, alt: str, src: str, config: RenderConfig) -> str:
        return f"!{self._escape(alt, config)}|{src}!"

    def _render_paragraph(self, content: str, config: RenderConfig) -> str:
        if config.paragraph_newlines:
            return f"\n{content}\n"
        return content

    def _render_blockquote(self, content: str, config: RenderConfig) -> str:
        if config.quote_style == "line":
            return f"bq. {content.strip()}"
        return f"{{quote}}\n{content}\n{{quote}}"

    def _render_code_block(self, content: str, attr: Attr, config: RenderConfig) -> str:
        """Render a code block, tagging the fence with its language if known."""
        lang = attr.language if config.code_language else None
        fence = f"{{code:{lang}}}" if lang else "{code}"
        return f"{fence}\n{content}\n{{code}}"

    def _render_list(self, marker: str, items: Iterable[str]) -> str:
        """Render list items, deepening any nested list lines by one level.

        A nested list arrives pre-rendered inside its parent item
        (``"a\\n* b"``). Jira expresses depth by the marker run, so nested
        item lines get the parent marker prepended (``"* a\\n** b"``).

        Lines inside a ``{code}`` or ``{noformat}`` block are verbatim and
        never deepened, even when they start with ``#`` or ``*``.
        """
        lines: list[str] = []
        for item in items:
            first, *rest = item.split("\n")
            lines.append(f"{marker} {first}")
            fence = _fence_after(first, None)
            for line in rest:
                if fence is None and _NESTED_ITEM.match(line):
                    lines.append(marker + line)
                else:
                    lines.append(line)
                fence = _fence_after(line, fence)
        return "\n".join(lines)

    def _render_table(
        self, headers: Iterable[str], rows: Iterable[Iterable[str]]
    ) -> str:
        """Render a table.

        The header row is dropped when every header cell is empty. Caption,
        alignment and width hints have no Jira syntax and are not used.
        """
        lines: list[str] = []
        header_cells = list(headers)
        if any(cell != "" for cell in header_cells):
            lines.append("||" + "||".join(header_cells) + "||")
        for row in rows:
            lines.append("|" + "|".join(row) + "|")
        return "\n".join(lines)
