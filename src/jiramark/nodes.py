"""Document nodes consumed by the Jira renderer.

The host pipeline walks its own document tree post-order and hands each node
to jiramark with its children already rendered. Every node here therefore
carries strings, never child nodes: ``Emph("hi")`` means "an emphasis whose
content renders as ``hi``".

All nodes are frozen dataclasses with slots, so they work naturally with
``match`` statements and are safe to share.

Node Hierarchy:
Node (base)
├── Inline
│   ├── Str, Space, SoftBreak, LineBreak
│   ├── Emph, Strong, Subscript, Superscript, SmallCaps, Strikeout
│   ├── Code, InlineMath, DisplayMath
│   ├── Cite, Note
│   ├── Link, Image, Span
│   └── RawInline
├── Block
│   ├── Plain, Para, Header, BlockQuote, HorizontalRule, LineBlock
│   ├── CodeBlock, RawBlock, Div, CaptionedImage
│   ├── BulletList, OrderedList, DefinitionList
│   └── Table
└── Doc (document assembly)

"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# First alphabetic run of the class attribute names the code language
_LANGUAGE_PATTERN = re.compile(r"[A-Za-z]+")


# =============================================================================
# Attributes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Attr:
    """Identifier, classes and key/value pairs attached to a node.

    Jira has no attribute syntax, so the renderer only ever reads the
    code-block language out of these.

    """

    identifier: str = ""
    classes: tuple[str, ...] = ()
    attributes: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "Attr":
        """Build an Attr from the host's mapping form.

        ``{"id": "x", "class": "python numberLines", "startFrom": "3"}``
        becomes ``Attr("x", ("python", "numberLines"), (("startFrom", "3"),))``.
        The ``class`` entry may also be a sequence of class names. Missing or
        empty mappings give an empty Attr.
        """
        if not mapping:
            return cls()
        identifier = str(mapping.get("id") or "")
        raw_classes = mapping.get("class") or ""
        if isinstance(raw_classes, str):
            classes = tuple(raw_classes.split())
        else:
            classes = tuple(str(c) for c in raw_classes)
        attributes = tuple(
            (str(key), str(value))
            for key, value in mapping.items()
            if key not in ("id", "class")
        )
        return cls(identifier=identifier, classes=classes, attributes=attributes)

    @property
    def language(self) -> str | None:
        """First alphabetic token of the class attribute, if any."""
        match = _LANGUAGE_PATTERN.search(" ".join(self.classes))
        return match.group(0) if match else None


def as_attr(attr: Attr | Mapping[str, Any] | None) -> Attr:
    """Coerce whatever the host passed as attributes into an Attr."""
    if isinstance(attr, Attr):
        return attr
    return Attr.from_mapping(attr)


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all document nodes."""


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Str(Node):
    """Literal text."""

    text: str


@dataclass(frozen=True, slots=True)
class Space(Node):
    """Inter-word space."""


@dataclass(frozen=True, slots=True)
class SoftBreak(Node):
    """Soft line break (newline inside a paragraph)."""


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Hard line break."""


@dataclass(frozen=True, slots=True)
class Emph(Node):
    """Emphasized text. Jira: _text_"""

    content: str


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong text. Jira: *text*"""

    content: str


@dataclass(frozen=True, slots=True)
class Subscript(Node):
    """Subscript. Jira: ~text~"""

    content: str


@dataclass(frozen=True, slots=True)
class Superscript(Node):
    """Superscript. Jira: ^text^"""

    content: str


@dataclass(frozen=True, slots=True)
class SmallCaps(Node):
    """Small caps. Jira has no equivalent; content passes through."""

    content: str


@dataclass(frozen=True, slots=True)
class Strikeout(Node):
    """Struck-out text. Jira: -text-"""

    content: str


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Inline code. Jira: {{code}}"""

    text: str
    attr: Attr = Attr()


@dataclass(frozen=True, slots=True)
class InlineMath(Node):
    """Inline TeX math."""

    text: str


@dataclass(frozen=True, slots=True)
class DisplayMath(Node):
    """Display TeX math."""

    text: str


@dataclass(frozen=True, slots=True)
class Cite(Node):
    """Citation. Jira: ??source??

    ``citations`` holds the citation ids; Jira cannot express them.

    """

    content: str
    citations: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Note(Node):
    """Footnote content. Jira has no footnotes, so it renders inline."""

    content: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink. Jira: [text|target]"""

    content: str
    target: str
    title: str = ""
    attr: Attr = Attr()


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image. Jira: !alt|src!"""

    alt: str
    src: str
    title: str = ""
    attr: Attr = Attr()


@dataclass(frozen=True, slots=True)
class Span(Node):
    """Generic inline container; attributes are dropped."""

    content: str
    attr: Attr = Attr()


@dataclass(frozen=True, slots=True)
class RawInline(Node):
    """Inline content in a named output format."""

    format: str
    text: str


type Inline = (
    Str
    | Space
    | SoftBreak
    | LineBreak
    | Emph
    | Strong
    | Subscript
    | Superscript
    | SmallCaps
    | Strikeout
    | Code
    | InlineMath
    | DisplayMath
    | Cite
    | Note
    | Link
    | Image
    | Span
    | RawInline
)


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Plain(Node):
    """Inline content not wrapped in a paragraph (e.g. tight list items)."""

    content: str


@dataclass(frozen=True, slots=True)
class Para(Node):
    """Paragraph."""

    content: str


@dataclass(frozen=True, slots=True)
class Header(Node):
    """Heading. Jira: h<level>. text"""

    level: int
    content: str
    attr: Attr = Attr()


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote; form depends on RenderConfig.quote_style."""

    content: str


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Horizontal rule. Jira: ----"""


@dataclass(frozen=True, slots=True)
class LineBlock(Node):
    """Sequence of lines whose breaks are significant."""

    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Code block. Jira: {code[:lang]}...{code}"""

    content: str
    attr: Attr = Attr()


@dataclass(frozen=True, slots=True)
class BulletList(Node):
    """Unordered list of rendered items."""

    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class OrderedList(Node):
    """Ordered list of rendered items."""

    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class DefinitionList(Node):
    """Definition list; Jira has no dedicated syntax so it renders as bullets."""

    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class RawBlock(Node):
    """Block content in a named output format."""

    format: str
    text: str


@dataclass(frozen=True, slots=True)
class Div(Node):
    """Generic block container; rendered as a paragraph."""

    content: str
    attr: Attr = Attr()


@dataclass(frozen=True, slots=True)
class CaptionedImage(Node):
    """Figure: an image whose caption becomes the alt text."""

    src: str
    title: str
    caption: str
    attr: Attr = Attr()


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Table of rendered cells.

    ``caption``, ``aligns`` and ``widths`` are kept for completeness; Jira
    tables have no way to express them.

    """

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    caption: str = ""
    aligns: tuple[str, ...] = ()
    widths: tuple[float, ...] = ()


type Block = (
    Plain
    | Para
    | Header
    | BlockQuote
    | HorizontalRule
    | LineBlock
    | CodeBlock
    | BulletList
    | OrderedList
    | DefinitionList
    | RawBlock
    | Div
    | CaptionedImage
    | Table
)


# =============================================================================
# Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Doc(Node):
    """Whole-document pass.

    ``body`` is the already joined block output. ``metadata`` and
    ``variables`` are carried for the host's template step and never
    substituted into the body.

    """

    body: str
    metadata: Mapping[str, Any] = field(default_factory=dict)
    variables: Mapping[str, Any] = field(default_factory=dict)
