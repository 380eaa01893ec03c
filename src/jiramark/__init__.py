"""
jiramark — Jira wiki markup writer for document-conversion pipelines

A host pipeline parses its source format into a document tree, walks it
bottom-up, and hands each node to jiramark with the children already
rendered. jiramark turns every node into Jira markup and assembles the
top-level blocks into the final text. Zero runtime dependencies.

Quick Start:
    >>> from jiramark import Header, Para, Strong, render, render_document
    >>> render(Strong("bold"))
    '*bold*'
    >>> render_document([Header(1, "Title"), Para("Body")]).text
    'h1. Title\\n\\nBody'

Name-based hosts:
    >>> from jiramark import JiraWriter
    >>> writer = JiraWriter()
    >>> writer["Link"]("docs", "https://example.com", "", {})
    '[docs|https://example.com]'

Variants:
    >>> from jiramark import RenderConfig, render_config_context
    >>> with render_config_context(RenderConfig.original()):
    ...     render(BlockQuote("  quoted  "))
    'bq. quoted'
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from jiramark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from jiramark.errors import ConfigError, JiramarkError
from jiramark.escape import escape
from jiramark.fallback import FallbackReporter
from jiramark.nodes import (
    Attr,
    Block,
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
    Inline,
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
from jiramark.protocol import NodeRenderer
from jiramark.renderer import BLOCKSEP, JIRA_FORMAT, JiraRenderer
from jiramark.writer import WRITER_FUNCTIONS, JiraWriter, get_function

__version__ = "0.1.0"


@dataclass(frozen=True, slots=True)
class RenderedDocument:
    """Assembled Jira text plus the untouched document context.

    ``metadata`` and ``variables`` are returned for the host's template
    step; they are never substituted into ``text``.

    """

    text: str
    metadata: Mapping[str, Any] = field(default_factory=dict)
    variables: Mapping[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.text


def render(node: Node, *, config: RenderConfig | None = None) -> str:
    """Render a single node to Jira markup.

    Args:
        node: Node whose children are already rendered
        config: Render config (uses the context config if None)

    Returns:
        Jira markup for the node

    Example:
        >>> render(CodeBlock("x=1", Attr(classes=("python",))))
        '{code:python}\\nx=1\\n{code}'
    """
    return JiraRenderer(config).render(node)


def render_document(
    blocks: Iterable[Node | str],
    metadata: Mapping[str, Any] | None = None,
    variables: Mapping[str, Any] | None = None,
    *,
    config: RenderConfig | None = None,
    renderer: NodeRenderer | None = None,
) -> RenderedDocument:
    """Assemble top-level blocks into a Jira document.

    Blocks are joined with a blank line; nodes are rendered first, strings
    are taken as already rendered. The joined body then goes through the
    document pass.

    Args:
        blocks: Top-level blocks in document order
        metadata: Document metadata, passed through for templating
        variables: Template variables, passed through for templating
        config: Render config (ignored when ``renderer`` is given)
        renderer: Renderer to use for nodes (JiraRenderer if None)

    Returns:
        RenderedDocument with the body and the untouched mappings
    """
    node_renderer = renderer or JiraRenderer(config)
    body = BLOCKSEP.join(
        block if isinstance(block, str) else node_renderer.render(block) for block in blocks
    )
    metadata = metadata or {}
    variables = variables or {}
    text = node_renderer.render(Doc(body, metadata, variables))
    return RenderedDocument(text=text, metadata=metadata, variables=variables)


__all__ = [
    # Main API
    "render",
    "render_document",
    "RenderedDocument",
    "JiraRenderer",
    "JiraWriter",
    "NodeRenderer",
    "WRITER_FUNCTIONS",
    "get_function",
    "escape",
    "FallbackReporter",
    "BLOCKSEP",
    "JIRA_FORMAT",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "JiramarkError",
    "ConfigError",
    # Nodes
    "Node",
    "Inline",
    "Block",
    "Attr",
    "Str",
    "Space",
    "SoftBreak",
    "LineBreak",
    "Emph",
    "Strong",
    "Subscript",
    "Superscript",
    "SmallCaps",
    "Strikeout",
    "Code",
    "InlineMath",
    "DisplayMath",
    "Cite",
    "Note",
    "Link",
    "Image",
    "Span",
    "RawInline",
    "Plain",
    "Para",
    "Header",
    "BlockQuote",
    "HorizontalRule",
    "LineBlock",
    "CodeBlock",
    "BulletList",
    "OrderedList",
    "DefinitionList",
    "RawBlock",
    "Div",
    "CaptionedImage",
    "Table",
    "Doc",
]
