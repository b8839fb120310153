"""Brace — macro-extensible template compiler.

Compiles brace-delimited templates into reusable render functions.
Every ``{...}`` is a macro call; the first word names the macro.

Quickstart:
    >>> import brace
    >>> brace.render("<h1>{. title}</h1>", {"title": "Hello"})
    '<h1>Hello</h1>'

    >>> page = brace.compile("<ul>{each items <li>{. name}</li>}</ul>")
    >>> page({"items": [{"name": "a"}, {"name": "b"}]})
    '<ul><li>a</li><li>b</li></ul>'

Built-in macros:
- ``{. path}``: output the value at ``path`` (``{.}`` is the current value)
- ``{-> path ...}``: render the body relative to ``path``
- ``{has path ...}``: render the body only if ``path`` resolves
- ``{each path ...}``: render the body once per list item / mapping entry
- ``{path path}``: output the path string itself (``items.0``)

Custom macros:
A macro is ``macro(node, transform) -> fragment``. It claims its
argument with ``brace.helpers.parse_arg``/``parse_path`` and compiles
nested nodes through ``transform``. The fragment is a list of ``ast``
statements or a string of Python source:

    >>> def shout(node, transform):
    ...     word = brace.helpers.parse_arg(node)
    ...     return f'_append("{brace.helpers.escape(word.upper())}")'
    >>> brace.render("{shout hey}", macros={"shout": shout})
    'HEY'

Architecture:
Template Source → Parser → Segment tree → Compiler (macros) → Python AST → exec()

Pipeline stages:
1. **Parser**: Builds the nested Segment tree from braces
2. **Compiler**: Dispatches each node to its macro, collecting ``ast`` statements
3. **Wrapper**: Wraps the statements in ``def render(data=None)``
4. **Template**: Compiles and exposes ``render()``

Missing data never raises: an unresolved path renders as empty text, is
false for ``has`` and iterates zero times for ``each``. Falsy values such
as ``0`` and ``""`` are present and render normally.

Thread-Safety:
- Compilation is idempotent (same input → same output)
- Rendering uses only per-call state (output list, path stack)

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from brace.compiler import helpers
from brace.compiler.helpers import Macro
from brace.environment import (
    Environment,
    ErrorCode,
    InvalidFragmentError,
    MacroRegistry,
    TemplateError,
    TemplateRuntimeError,
    TemplateSyntaxError,
    UnknownMacroError,
    UnmatchedBraceError,
)
from brace.nodes import Segment
from brace.parser import parse
from brace.template import UNDEFINED, Template

__version__ = "0.1.0"


def compile(
    source: str,
    *,
    macros: Mapping[str, Macro] | None = None,
    file: str | None = None,
    include_runtime: bool = True,
) -> Template:
    """Compile template source into a reusable render function.

    Args:
        source: Template text
        macros: Caller macros by name, overriding built-ins of the same name
        file: Source file name, used only in error messages
        include_runtime: Embed runtime support in the generated module

    Returns:
        Template; call it (or its ``render``) with the data to render
    """
    env = Environment(macros, include_runtime=include_runtime)
    return env.from_string(source, file=file)


def render(
    source: str,
    data: Any = None,
    *,
    macros: Mapping[str, Macro] | None = None,
    file: str | None = None,
    include_runtime: bool = True,
) -> str:
    """Compile ``source`` and render it against ``data`` in one step."""
    return compile(source, macros=macros, file=file, include_runtime=include_runtime)(data)


__all__ = [
    "UNDEFINED",
    "Environment",
    "ErrorCode",
    "InvalidFragmentError",
    "Macro",
    "MacroRegistry",
    "Segment",
    "Template",
    "TemplateError",
    "TemplateRuntimeError",
    "TemplateSyntaxError",
    "UnknownMacroError",
    "UnmatchedBraceError",
    "__version__",
    "compile",
    "helpers",
    "parse",
    "render",
]
