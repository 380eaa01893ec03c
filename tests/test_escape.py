"""Tests for literal-text escaping."""

import re

from hypothesis import given
from hypothesis import strategies as st

from jiramark.escape import escape

_UNESCAPED_BRACE = re.compile(r"(?<!\\)\{")


class TestEscape:
    def test_brace_is_escaped(self) -> None:
        assert escape("use {braces}") == r"use \{braces}"

    def test_every_brace_is_escaped(self) -> None:
        assert escape("{{x}}") == r"\{\{x}}"

    def test_closing_brace_untouched(self) -> None:
        assert escape("a}b") == "a}b"

    def test_already_escaped_brace_untouched(self) -> None:
        assert escape(r"\{code}") == r"\{code}"

    def test_typed_backslash_counts_as_escape(self) -> None:
        assert escape(r"C:\{dir}") == r"C:\{dir}"

    def test_text_without_brace_unchanged(self) -> None:
        assert escape("plain *text* [x]") == "plain *text* [x]"

    def test_empty(self) -> None:
        assert escape("") == ""

    def test_disabled(self) -> None:
        assert escape("{code}", braces=False) == "{code}"


class TestEscapeProperties:
    """Escaping invariants for arbitrary text."""

    @given(text=st.text())
    def test_no_unescaped_brace_remains(self, text: str) -> None:
        assert _UNESCAPED_BRACE.search(escape(text)) is None

    @given(text=st.text())
    def test_idempotent(self, text: str) -> None:
        once = escape(text)
        assert escape(once) == once

    @given(text=st.text())
    def test_other_characters_preserved(self, text: str) -> None:
        escaped = escape(text)
        assert [c for c in escaped if c not in "{\\"] == [c for c in text if c not in "{\\"]
        assert escaped.count("{") == text.count("{")

    @given(text=st.text())
    def test_disabled_is_identity(self, text: str) -> None:
        assert escape(text, braces=False) == text
