"""Tests for the package-level render API."""

from jiramark import (
    BulletList,
    Header,
    HorizontalRule,
    JiraRenderer,
    Para,
    RawBlock,
    RenderConfig,
    RenderedDocument,
    Str,
    Strong,
    render,
    render_config_context,
    render_document,
)
from jiramark.nodes import Node


class TestRender:
    def test_render_node(self) -> None:
        assert render(Strong("bold")) == "*bold*"

    def test_render_with_config(self) -> None:
        assert render(Str("{"), config=RenderConfig.original()) == "{"

    def test_render_follows_context(self) -> None:
        with render_config_context(RenderConfig.original()):
            assert render(Str("{")) == "{"


class TestRenderDocument:
    def test_blocks_joined_with_blank_line(self) -> None:
        result = render_document([Header(1, "Title"), Para("Body"), BulletList(("a", "b"))])
        assert result.text == "h1. Title\n\nBody\n\n* a\n* b"

    def test_prerendered_strings(self) -> None:
        result = render_document(["already rendered", HorizontalRule()])
        assert result.text == "already rendered\n\n----"

    def test_empty_document(self) -> None:
        assert render_document([]).text == ""

    def test_metadata_passed_through(self) -> None:
        metadata = {"title": "Release notes", "author": ["A. Writer"]}
        variables = {"toc": True}
        result = render_document([Para("Body")], metadata, variables)
        assert result.text == "Body"
        assert result.metadata is metadata
        assert result.variables is variables
        assert "Release notes" not in result.text

    def test_missing_mappings_default_empty(self) -> None:
        result = render_document([Para("Body")])
        assert result.metadata == {}
        assert result.variables == {}

    def test_str(self) -> None:
        assert str(RenderedDocument(text="x")) == "x"

    def test_dropped_block_leaves_separator(self) -> None:
        result = render_document([Para("a"), RawBlock("html", "<hr>"), Para("b")])
        assert result.text == "a\n\n\n\nb"

    def test_original_variant(self) -> None:
        result = render_document([Para("a"), Para("b")], config=RenderConfig.original())
        assert result.text == "\na\n\n\n\nb\n"

    def test_custom_renderer(self) -> None:
        class Shouting:
            def __init__(self) -> None:
                self._inner = JiraRenderer(RenderConfig())

            def render(self, node: Node) -> str:
                return self._inner.render(node).upper()

        result = render_document([Para("quiet")], renderer=Shouting())
        assert result.text == "QUIET"
