"""Tests for the brace parser.

Covers tree shape, literal slot invariants, source locations and
unmatched-brace errors.
"""

from __future__ import annotations

import pytest

from brace import Segment, UnmatchedBraceError, parse

from .helpers import unparse


class TestTreeShape:
    """Parse tree structure."""

    def test_plain_text(self):
        """Text without braces is a single literal slot."""
        assert parse("hello world") == ["hello world"]

    def test_empty_source(self):
        assert parse("") == [""]

    def test_nested_example(self):
        """Nested groups alternate with their trailing literal slots."""
        tree = parse("{example {foo {bar}} {bla}}")
        assert tree == [
            "",
            ["example ", ["foo ", ["bar"], ""], " ", ["bla"], ""],
            "",
        ]

    def test_literal_slots_never_omitted(self):
        """Adjacent groups still get an (empty) literal slot between them."""
        tree = parse("{a}{b}")
        assert tree == ["", ["a"], "", ["b"], ""]

    def test_text_around_groups(self):
        tree = parse("<ul>{each items <li>{. name}</li>}</ul>")
        assert tree == [
            "<ul>",
            ["each items <li>", [". name"], "</li>"],
            "</ul>",
        ]

    def test_nodes_are_segments(self):
        tree = parse("a{b{c}}")
        assert isinstance(tree, Segment)
        assert isinstance(tree[1], Segment)
        assert isinstance(tree[1][1], Segment)

    def test_literal_between_siblings(self):
        tree = parse("{a} x {b}")
        assert tree == ["", ["a"], " x ", ["b"], ""]

    def test_deep_nesting(self):
        source = "{" * 200 + "x" + "}" * 200
        tree = parse(source)
        assert unparse(tree) == source


class TestLocations:
    """Segments record where their opening brace is."""

    def test_first_line(self):
        tree = parse("ab {. x}")
        assert tree[1].lineno == 1
        assert tree[1].col_offset == 3

    def test_later_line(self):
        tree = parse("line one\n  line two {. x}\n")
        node = tree[1]
        assert node.lineno == 2
        assert node.col_offset == 11

    def test_nested_location(self):
        tree = parse("{each items\n    {. name}}")
        inner = tree[1][1]
        assert inner.lineno == 2
        assert inner.col_offset == 4


class TestUnmatchedBraces:
    """Unbalanced input raises UnmatchedBraceError."""

    def test_unclosed(self):
        with pytest.raises(UnmatchedBraceError) as exc_info:
            parse("{. name")
        assert exc_info.value.lineno == 1
        assert exc_info.value.col_offset == 0

    def test_unclosed_reports_innermost(self):
        with pytest.raises(UnmatchedBraceError) as exc_info:
            parse("{a}\n  {b {c}")
        assert exc_info.value.lineno == 2
        assert exc_info.value.col_offset == 2

    def test_stray_close(self):
        with pytest.raises(UnmatchedBraceError) as exc_info:
            parse("abc}")
        assert exc_info.value.lineno == 1
        assert exc_info.value.col_offset == 3

    def test_message_includes_file(self):
        with pytest.raises(UnmatchedBraceError) as exc_info:
            parse("{oops", filename="pages/index.tpl")
        message = str(exc_info.value)
        assert "pages/index.tpl" in message
        assert "Unmatched brace" in message

    def test_message_shows_source_line(self):
        with pytest.raises(UnmatchedBraceError) as exc_info:
            parse("first\nsecond {oops\nthird")
        message = str(exc_info.value)
        assert "second {oops" in message
        assert "^" in message


class TestEscapedBraces:
    """Doubled braces are literal only when escape_braces is enabled."""

    def test_disabled_by_default(self):
        assert parse("{{a}}") == ["", ["", ["a"], ""], ""]

    def test_doubled_braces_are_literal(self):
        assert parse("a {{b}} c", escape_braces=True) == ["a {b} c"]

    def test_mixed_with_groups(self):
        tree = parse("{{x}} {. y}", escape_braces=True)
        assert tree == ["{x} ", [". y"], ""]

    def test_single_braces_unchanged(self):
        source = "{each items {. name}}"
        assert parse(source, escape_braces=True) == parse(source)
