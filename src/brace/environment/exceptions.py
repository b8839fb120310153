"""Exceptions for brace templates.

Exception Hierarchy:
TemplateError (base)
├── TemplateSyntaxError        # Compile-time error with source location
│   ├── UnmatchedBraceError    # `{` never closed, or stray `}`
│   ├── UnknownMacroError      # Macro name not registered
│   └── InvalidFragmentError   # Macro produced unusable code
└── TemplateRuntimeError       # Unexpected failure inside a render function

Missing data is never an error: a path that does not resolve renders as
empty text, is false for ``has`` and iterates zero times for ``each``.

Example:
    ```
    Syntax Error: Unmatched brace: '{' is never closed
      --> page.tpl:3:4
        |
    > 3 | <li>{. name</li>
        |     ^
        |
    ```

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

class ErrorCode(Enum):
    """Searchable error codes for brace errors.

    Format: B-{CATEGORY}-{NUMBER}
    Categories: PAR (parser), CMP (compiler), RUN (runtime)
    """

    # Parser errors (B-PAR-xxx)
    UNMATCHED_BRACE = "B-PAR-001"

    # Compiler errors (B-CMP-xxx)
    UNKNOWN_MACRO = "B-CMP-001"
    INVALID_FRAGMENT = "B-CMP-002"

    # Runtime errors (B-RUN-xxx)
    RUNTIME_ERROR = "B-RUN-001"

    @property
    def category(self) -> str:
        """Error category (e.g., 'parser', 'compiler', 'runtime')."""
        prefix = self.value.split("-")[1]
        return {
            "PAR": "parser",
            "CMP": "compiler",
            "RUN": "runtime",
        }.get(prefix, "unknown")


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Template source context around an error line.

    Attributes:
        lines: Tuple of (line_number, line_content) pairs around the error.
        error_line: The 1-based line number where the error occurred.
        column: Optional column offset for caret pointer.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        """Format snippet with line numbers and a caret under the error column."""
        parts: list[str] = ["    |"]
        for lineno, content in self.lines:
            marker = ">" if lineno == self.error_line else " "
            parts.append(f"{marker}{lineno:>2} | {content}")
            if lineno == self.error_line and self.column is not None:
                parts.append(f"    | {' ' * self.column}^")
        parts.append("    |")
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 1,
    column: int | None = None,
) -> SourceSnippet:
    """Build a SourceSnippet from template source.

    Args:
        source: Full template source text.
        error_line: 1-based line number of the error.
        context_lines: Number of lines to show before/after the error line.
        column: Optional column offset for caret pointer.
    """
    all_lines = source.splitlines()
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


class TemplateError(Exception):
    """Base exception for all brace template errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a one-line summary prefixed with its code."""
        lines = str(self).splitlines()
        summary = lines[0] if lines else type(self).__name__
        if self.code:
            summary = f"{self.code.value}: {summary}"
        return summary


class TemplateSyntaxError(TemplateError):
    """Compile-time error in template source.

    When ``source`` and ``lineno`` are provided, the message includes a
    snippet of the offending line, with a caret at ``col_offset``.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        filename: str | None = None,
        source: str | None = None,
    ):
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.filename = filename
        self.source = source
        super().__init__(self._format_message())

    @property
    def location(self) -> str:
        location = self.filename or "<template>"
        if self.lineno:
            location += f":{self.lineno}"
            if self.col_offset is not None:
                location += f":{self.col_offset}"
        return location

    def format_compact(self) -> str:
        return f"{super().format_compact()} at {self.location}"

    def _format_message(self) -> str:
        header = f"Syntax Error: {self.message}\n  --> {self.location}"
        if self.source and self.lineno:
            snippet = build_source_snippet(
                self.source, self.lineno, context_lines=0, column=self.col_offset
            )
            if snippet.lines:
                return f"{header}\n{snippet.format()}"
        return header


class UnmatchedBraceError(TemplateSyntaxError):
    """A `{` was never closed, or a `}` closes nothing."""

    code: ErrorCode | None = ErrorCode.UNMATCHED_BRACE


class UnknownMacroError(TemplateSyntaxError):
    """A node names a macro that is neither caller-supplied nor built in.

    Attributes:
        macro_name: The unresolved macro name (may be empty for ``{}``)
    """

    code: ErrorCode | None = ErrorCode.UNKNOWN_MACRO

    def __init__(self, macro_name: str, **kwargs):
        self.macro_name = macro_name
        super().__init__(f'Not a macro: "{macro_name}"', **kwargs)


class InvalidFragmentError(TemplateSyntaxError):
    """A macro returned something that is not Python code."""

    code: ErrorCode | None = ErrorCode.INVALID_FRAGMENT


class TemplateRuntimeError(TemplateError):
    """Unexpected failure while executing a compiled render function.

    Missing data never raises; this wraps genuine defects such as a
    custom macro emitting code that fails on the given data.

    Attributes:
        message: Error description
        template_name: File name given at compile time, if any
    """

    code: ErrorCode | None = ErrorCode.RUNTIME_ERROR

    def __init__(self, message: str, *, template_name: str | None = None):
        self.message = message
        self.template_name = template_name
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [f"Runtime Error: {self.message}"]
        parts.append(f"  Location: {self.template_name or '<template>'}")
        return "\n".join(parts)
