"""Brace environment: compile configuration, macro registry and errors."""

from brace.environment.core import Environment
from brace.environment.exceptions import (
    ErrorCode,
    InvalidFragmentError,
    SourceSnippet,
    TemplateError,
    TemplateRuntimeError,
    TemplateSyntaxError,
    UnknownMacroError,
    UnmatchedBraceError,
    build_source_snippet,
)
from brace.environment.registry import MacroRegistry

__all__ = [
    "Environment",
    "ErrorCode",
    "InvalidFragmentError",
    "MacroRegistry",
    "SourceSnippet",
    "TemplateError",
    "TemplateRuntimeError",
    "TemplateSyntaxError",
    "UnknownMacroError",
    "UnmatchedBraceError",
    "build_source_snippet",
]
