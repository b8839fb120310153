"""Parse tree node for brace templates.

A template parses into nested ``Segment`` nodes. Each segment is a list
whose first slot is the raw argument text of its macro, followed by
alternating child segments and literal strings:

    '{example {foo {bar}} {bla}}'

    ['', ['example ', ['foo ', ['bar'], ''], ' ', ['bla'], ''], '']

Literal slots are never omitted, even when empty, so every child segment
is followed by exactly one string.

Segments are mutable on purpose: macros claim their own argument by
trimming slot 0 in place (see ``brace.compiler.helpers.parse_arg``).
"""

from __future__ import annotations

from collections.abc import Iterable


class Segment(list):
    """One macro invocation in the parse tree.

    Behaves exactly like a ``list`` (and compares equal to plain nested
    lists) but also remembers where its opening brace sits in the source.

    Attributes:
        lineno: 1-based line of the opening brace
        col_offset: 0-based column of the opening brace
    """

    __slots__ = ("col_offset", "lineno")

    def __init__(
        self,
        slots: Iterable[object] = ("",),
        lineno: int = 1,
        col_offset: int = 0,
    ):
        super().__init__(slots)
        self.lineno = lineno
        self.col_offset = col_offset

    def __repr__(self) -> str:
        return f"Segment({list.__repr__(self)}, lineno={self.lineno}, col_offset={self.col_offset})"
