"""Output macros: ``out``, ``.`` and ``path``.

``out`` is the synthetic root of every template; the other two append a
single value to the output.
"""

from __future__ import annotations

import ast
from typing import Any

from brace.compiler.helpers import (
    Transform,
    emit,
    parse_path,
    path_expr,
    resolve_expr,
    transform_children,
)


def out_macro(node: list[Any], transform: Transform) -> list[ast.stmt]:
    """Pass children and literal text through unchanged."""
    return transform_children(node, transform)


def value_macro(node: list[Any], transform: Transform) -> list[ast.stmt]:
    """Output the value at a path.

    ``{. title}`` → ``_append(to_text(resolve(data, join_path(_paths[-1], 'title'))))``

    A missing value renders as empty text. ``{.}`` renders the ambient
    value itself.
    """
    value = resolve_expr(parse_path(node))
    text = ast.Call(func=ast.Name(id="to_text", ctx=ast.Load()), args=[value], keywords=[])
    return [emit(text), *transform_children(node, transform)]


def path_macro(node: list[Any], transform: Transform) -> list[ast.stmt]:
    """Output the path itself (dotted), not its value.

    ``{each items {path}}`` → ``items.0 items.1``
    """
    text = ast.Call(
        func=ast.Name(id="format_path", ctx=ast.Load()),
        args=[path_expr(parse_path(node))],
        keywords=[],
    )
    return [emit(text), *transform_children(node, transform)]
