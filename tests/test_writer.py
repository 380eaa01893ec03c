"""Tests for the name-indexed writer surface."""

import io

import pytest

from jiramark.config import RenderConfig
from jiramark.fallback import FallbackReporter
from jiramark.writer import WRITER_FUNCTIONS, JiraWriter, get_function


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def writer(stream: io.StringIO) -> JiraWriter:
    return JiraWriter(RenderConfig(), reporter=FallbackReporter(stream))


class TestInlineFunctions:
    def test_str(self, writer: JiraWriter) -> None:
        assert writer["Str"]("a{b") == r"a\{b"

    def test_attribute_access(self, writer: JiraWriter) -> None:
        assert writer.Emph("x") == "_x_"
        assert writer.Strong("x") == "*x*"

    def test_no_argument_nodes(self, writer: JiraWriter) -> None:
        assert writer.Space() == " "
        assert writer.SoftBreak() == "\n"
        assert writer.LineBreak() == "\n\n"
        assert writer.HorizontalRule() == "----"

    def test_link_and_image(self, writer: JiraWriter) -> None:
        assert writer.Link("docs", "https://x.io", "title", {"id": "l"}) == "[docs|https://x.io]"
        assert writer.Image("alt", "a.png", "", {}) == "!alt|a.png!"

    def test_optional_trailing_arguments(self, writer: JiraWriter) -> None:
        assert writer.Link("docs", "https://x.io") == "[docs|https://x.io]"
        assert writer.Code("x") == "{{x}}"

    def test_cite(self, writer: JiraWriter) -> None:
        assert writer.Cite("Doe", [{"citationId": "doe"}]) == "??Doe??"

    def test_raw_inline(self, writer: JiraWriter) -> None:
        assert writer.RawInline("jira", "{anchor:x}") == "{anchor:x}"
        assert writer.RawInline("html", "<br>") == ""


class TestBlockFunctions:
    def test_header(self, writer: JiraWriter) -> None:
        assert writer.Header(3, "Title", {"id": "title"}) == "h3. Title"

    def test_code_block_language_from_mapping(self, writer: JiraWriter) -> None:
        assert writer.CodeBlock("x=1", {"class": "python foo"}) == "{code:python}\nx=1\n{code}"

    def test_code_block_without_attr(self, writer: JiraWriter) -> None:
        assert writer.CodeBlock("x=1", None) == "{code}\nx=1\n{code}"

    def test_lists_accept_any_iterable(self, writer: JiraWriter) -> None:
        assert writer.BulletList(["a", "b"]) == "* a\n* b"
        assert writer.OrderedList(iter(["a", "b"])) == "# a\n# b"
        assert writer.DefinitionList(["a"]) == "* a"

    def test_line_block(self, writer: JiraWriter) -> None:
        assert writer.LineBlock(["x", "y"]) == "x\ny"

    def test_table(self, writer: JiraWriter) -> None:
        result = writer.Table(
            "Caption",
            ["AlignLeft", "AlignDefault"],
            [0.0, 0.0],
            ["A", "B"],
            [["1", "2"], ["3", "4"]],
        )
        assert result == "||A||B||\n|1|2|\n|3|4|"

    def test_table_empty_headers(self, writer: JiraWriter) -> None:
        assert writer.Table("", [], [], ["", ""], [["1", "2"]]) == "|1|2|"

    def test_table_missing_headers_and_rows(self, writer: JiraWriter) -> None:
        assert writer.Table(None, None, None, None, None) == ""
        assert writer.Table("", [], [], None, [["1"]]) == "|1|"
        assert writer.Table("", [], [], ["A"], None) == "||A||"

    def test_captioned_image(self, writer: JiraWriter) -> None:
        assert writer.CaptionedImage("a.png", "fig:", "A caption", {}) == "!A caption|a.png!"

    def test_div(self, writer: JiraWriter) -> None:
        assert writer.Div("inner", {"class": "warning"}) == "inner"

    def test_blocksep_and_doc(self, writer: JiraWriter) -> None:
        assert writer.Blocksep() == "\n\n"
        assert writer.Doc("body", {"title": "T"}, {}) == "body"


class TestUnknownNames:
    def test_unknown_name_returns_empty_function(
        self, writer: JiraWriter, stream: io.StringIO
    ) -> None:
        fn = writer["Figure"]
        assert stream.getvalue() == "WARNING: Undefined function 'Figure'\n"
        assert fn("anything", 1, 2) == ""
        assert stream.getvalue().count("\n") == 1

    def test_each_lookup_reports(self, writer: JiraWriter, stream: io.StringIO) -> None:
        writer.Figure
        writer.Figure
        assert stream.getvalue().splitlines() == ["WARNING: Undefined function 'Figure'"] * 2

    def test_private_names_raise(self, writer: JiraWriter, stream: io.StringIO) -> None:
        assert not hasattr(writer, "_missing")
        assert stream.getvalue() == ""

    def test_contains(self, writer: JiraWriter, stream: io.StringIO) -> None:
        assert "Str" in writer
        assert "Blocksep" in writer
        assert "Figure" not in writer
        assert stream.getvalue() == ""


SAMPLE_ARGS: dict[str, tuple] = {
    "Str": ("s",),
    "Space": (),
    "SoftBreak": (),
    "LineBreak": (),
    "Emph": ("s",),
    "Strong": ("s",),
    "Subscript": ("s",),
    "Superscript": ("s",),
    "SmallCaps": ("s",),
    "Strikeout": ("s",),
    "Link": ("s", "u", "t", {}),
    "Image": ("s", "u", "t", {}),
    "Code": ("s", {}),
    "InlineMath": ("s",),
    "DisplayMath": ("s",),
    "Note": ("s",),
    "Span": ("s", {}),
    "RawInline": ("jira", "s"),
    "Cite": ("s", []),
    "Plain": ("s",),
    "Para": ("s",),
    "Header": (1, "s", {}),
    "BlockQuote": ("s",),
    "HorizontalRule": (),
    "LineBlock": (["s"],),
    "CodeBlock": ("s", {}),
    "BulletList": (["s"],),
    "OrderedList": (["s"],),
    "DefinitionList": (["s"],),
    "CaptionedImage": ("u", "t", "s", {}),
    "Table": ("", [], [], ["s"], [["s"]]),
    "RawBlock": ("jira", "s"),
    "Div": ("s", {}),
    "Doc": ("s", {}, {}),
}


class TestWriterTable:
    def test_samples_cover_table(self) -> None:
        assert set(SAMPLE_ARGS) == set(WRITER_FUNCTIONS)

    @pytest.mark.parametrize("name", sorted(SAMPLE_ARGS))
    def test_every_entry_renders(self, writer: JiraWriter, stream: io.StringIO, name: str) -> None:
        """No table entry falls through to the fallback."""
        result = writer[name](*SAMPLE_ARGS[name])
        assert isinstance(result, str)
        assert stream.getvalue() == ""

    def test_get_function(self) -> None:
        assert get_function("Emph")("x") == "_x_"
        assert get_function("Str", RenderConfig.original())("{") == "{"
