"""Name-indexed writer functions for host pipelines.

Document converters that drive custom writers call one function per node
type, by name, with the node's pre-rendered pieces as positional arguments:
``Str(s)``, ``Link(s, src, title, attr)``, ``Table(caption, aligns, widths,
headers, rows)`` and so on. JiraWriter exposes that surface on top of
JiraRenderer.

WRITER_FUNCTIONS maps node-type names to builders that turn the host's
positional arguments into ``jiramark.nodes`` instances. Lookups of names not
in the table go through FallbackReporter.

Example:
    >>> writer = JiraWriter()
    >>> writer["Emph"]("hi")
    '_hi_'
    >>> writer.Header(1, "Title", {})
    'h1. Title'
    >>> writer["Figure"]("x")             # unknown: warns on stderr
    ''

"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from jiramark.config import RenderConfig
from jiramark.fallback import FallbackReporter
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
    as_attr,
)
from jiramark.renderer import JiraRenderer

type AttrLike = Attr | Mapping[str, Any] | None


def _code(s: str, attr: AttrLike = None) -> Code:
    return Code(s, as_attr(attr))


def _cite(s: str, cs: Iterable[Any] = ()) -> Cite:
    return Cite(s, tuple(str(c) for c in cs))


def _link(s: str, src: str, tit: str = "", attr: AttrLike = None) -> Link:
    return Link(s, src, tit or "", as_attr(attr))


def _image(s: str, src: str, tit: str = "", attr: AttrLike = None) -> Image:
    return Image(s, src, tit or "", as_attr(attr))


def _span(s: str, attr: AttrLike = None) -> Span:
    return Span(s, as_attr(attr))


def _header(lev: int, s: str, attr: AttrLike = None) -> Header:
    return Header(lev, s, as_attr(attr))


def _line_block(ls: Iterable[str]) -> LineBlock:
    return LineBlock(tuple(ls))


def _code_block(s: str, attr: AttrLike = None) -> CodeBlock:
    return CodeBlock(s, as_attr(attr))


def _bullet_list(items: Iterable[str]) -> BulletList:
    return BulletList(tuple(items))


def _ordered_list(items: Iterable[str]) -> OrderedList:
    return OrderedList(tuple(items))


def _definition_list(items: Iterable[str]) -> DefinitionList:
    return DefinitionList(tuple(items))


def _div(s: str, attr: AttrLike = None) -> Div:
    return Div(s, as_attr(attr))


def _captioned_image(src: str, tit: str, caption: str, attr: AttrLike = None) -> CaptionedImage:
    return CaptionedImage(src, tit or "", caption, as_attr(attr))


def _table(
    caption: str,
    aligns: Iterable[str],
    widths: Iterable[float],
    headers: Iterable[str],
    rows: Iterable[Iterable[str]],
) -> Table:
    return Table(
        headers=tuple(headers or ()),
        rows=tuple(tuple(row) for row in rows or ()),
        caption=caption or "",
        aligns=tuple(aligns or ()),
        widths=tuple(widths or ()),
    )


def _doc(
    body: str,
    metadata: Mapping[str, Any] | None = None,
    variables: Mapping[str, Any] | None = None,
) -> Doc:
    return Doc(body, metadata or {}, variables or {})


WRITER_FUNCTIONS: dict[str, Callable[..., Node]] = {
    "Str": Str,
    "Space": Space,
    "SoftBreak": SoftBreak,
    "LineBreak": LineBreak,
    "Emph": Emph,
    "Strong": Strong,
    "Subscript": Subscript,
    "Superscript": Superscript,
    "SmallCaps": SmallCaps,
    "Strikeout": Strikeout,
    "Link": _link,
    "Image": _image,
    "Code": _code,
    "InlineMath": InlineMath,
    "DisplayMath": DisplayMath,
    "Note": Note,
    "Span": _span,
    "RawInline": RawInline,
    "Cite": _cite,
    "Plain": Plain,
    "Para": Para,
    "Header": _header,
    "BlockQuote": BlockQuote,
    "HorizontalRule": HorizontalRule,
    "LineBlock": _line_block,
    "CodeBlock": _code_block,
    "BulletList": _bullet_list,
    "OrderedList": _ordered_list,
    "DefinitionList": _definition_list,
    "CaptionedImage": _captioned_image,
    "Table": _table,
    "RawBlock": RawBlock,
    "Div": _div,
    "Doc": _doc,
}


class JiraWriter:
    """Custom-writer surface: one rendering function per node-type name.

    ``writer[name]`` and ``writer.<name>`` both return a function taking the
    host's positional arguments and returning Jira text. ``Blocksep`` is
    also available. Unknown names are reported once per lookup and yield a
    function returning ``""``.

    """

    __slots__ = ("_renderer", "_reporter")

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        reporter: FallbackReporter | None = None,
        renderer: JiraRenderer | None = None,
    ) -> None:
        """Initialize writer.

        Args:
            config: Fixed configuration; None follows the context config
            reporter: Reporter for unknown names
            renderer: Renderer to delegate to (built from config if None)
        """
        self._renderer = renderer or JiraRenderer(config, reporter=reporter)
        self._reporter = reporter or self._renderer.reporter

    @property
    def renderer(self) -> JiraRenderer:
        return self._renderer

    def __contains__(self, name: object) -> bool:
        return name == "Blocksep" or name in WRITER_FUNCTIONS

    def __getitem__(self, name: str) -> Callable[..., str]:
        if name == "Blocksep":
            return self._renderer.blocksep
        builder = WRITER_FUNCTIONS.get(name)
        if builder is None:
            return self._reporter.report(name)

        def write(*args: Any) -> str:
            return self._renderer.render(builder(*args))

        write.__name__ = name
        return write

    def __getattr__(self, name: str) -> Callable[..., str]:
        # Private and dunder probes (copy, pickle, hasattr) are not node types
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]


def get_function(name: str, config: RenderConfig | None = None) -> Callable[..., str]:
    """Look up the writer function for ``name``, falling back to ``""``."""
    return JiraWriter(config)[name]
