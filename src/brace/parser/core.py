"""Brace parser: template source → nested Segment tree.

Single left-to-right pass over the brace characters of the source,
keeping a stack of the segments still open:

- ``{`` pushes the current segment and starts a new one (``['']``)
- ``}`` appends the finished segment to its parent, followed by a
  fresh empty literal slot, and makes the parent current again
- anything else accumulates in the current segment's last string slot

Text between braces is sliced out in one piece rather than appended
character by character, so parsing is O(n) in the source length.

Example:
    >>> parse("{example {foo {bar}} {bla}}")
    ['', ['example ', ['foo ', ['bar'], ''], ' ', ['bla'], ''], '']

"""

from __future__ import annotations

import re

from brace.environment.exceptions import UnmatchedBraceError
from brace.nodes import Segment

_BRACE_RE = re.compile(r"[{}]")
# Doubled braces are literal when escape_braces is enabled
_ESCAPED_BRACE_RE = re.compile(r"\{\{|\}\}|[{}]")


def parse(
    source: str,
    *,
    filename: str | None = None,
    escape_braces: bool = False,
) -> Segment:
    """Parse template source into a Segment tree.

    Args:
        source: Raw template text
        filename: Source file name, used only in error messages
        escape_braces: Treat ``{{`` and ``}}`` as literal ``{`` and ``}``

    Returns:
        Root segment; its slot 0 holds the text before the first brace

    Raises:
        UnmatchedBraceError: A ``{`` is never closed or a ``}`` has no
            matching ``{``
    """
    root = Segment()
    current = root
    stack: list[Segment] = []

    pattern = _ESCAPED_BRACE_RE if escape_braces else _BRACE_RE
    lineno = 1
    line_start = 0
    pos = 0

    for match in pattern.finditer(source):
        start = match.start()
        text = source[pos:start]
        if text:
            current[-1] += text
            newlines = text.count("\n")
            if newlines:
                lineno += newlines
                line_start = pos + text.rindex("\n") + 1
        pos = match.end()

        brace = match.group()
        if len(brace) == 2:
            current[-1] += brace[0]
        elif brace == "{":
            stack.append(current)
            current = Segment(lineno=lineno, col_offset=start - line_start)
        else:
            if not stack:
                raise UnmatchedBraceError(
                    "Unmatched brace: '}' closes nothing",
                    lineno=lineno,
                    col_offset=start - line_start,
                    filename=filename,
                    source=source,
                )
            parent = stack.pop()
            parent.append(current)
            parent.append("")
            current = parent

    if stack:
        raise UnmatchedBraceError(
            "Unmatched brace: '{' is never closed",
            lineno=current.lineno,
            col_offset=current.col_offset,
            filename=filename,
            source=source,
        )

    current[-1] += source[pos:]
    return root
