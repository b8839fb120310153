"""Control flow macros: ``has`` and ``each``."""

from __future__ import annotations

import ast
from typing import Any

from brace.compiler.helpers import (
    Transform,
    current_path,
    parse_path,
    path_expr,
    resolve_expr,
    scoped,
    transform_children,
)

VISITOR = "_visit"


def has_macro(node: list[Any], transform: Transform) -> list[ast.stmt]:
    """Render children only when the path resolves.

    Generates:
        if resolve(data, join_path(_paths[-1], 'title')) is not UNDEFINED:
            ... children ...

    Present-but-falsy values (``0``, ``""``, ``False``) count as present.
    """
    path = parse_path(node)
    body = transform_children(node, transform)
    return [
        ast.If(
            test=ast.Compare(
                left=resolve_expr(path),
                ops=[ast.IsNot()],
                comparators=[ast.Name(id="UNDEFINED", ctx=ast.Load())],
            ),
            body=body or [ast.Pass()],
            orelse=[],
        )
    ]


def each_macro(node: list[Any], transform: Transform) -> list[ast.stmt]:
    """Render children once per entry of a list or mapping.

    Generates:
        _paths.append(join_path(_paths[-1], 'items'))
        def _visit(_key):
            _paths.append(join_path(_paths[-1], _key))
            ... children ...
            _paths.pop()
        iterate(resolve(data, _paths[-1]), _visit)
        _paths.pop()

    The body is a nested function driven by ``iterate``, so ``each``
    nests to any depth (Python allows at most 20 statically nested loops
    in one function). Lists iterate in index order, mappings in
    insertion order. Inside the body the ambient path is the entry's own
    path, extended by the real key (``"index.html"`` stays one segment).
    """
    path = parse_path(node)
    body = transform_children(node, transform)
    visitor = ast.FunctionDef(
        name=VISITOR,
        args=ast.arguments(
            posonlyargs=[],
            args=[ast.arg(arg="_key")],
            vararg=None,
            kwonlyargs=[],
            kw_defaults=[],
            kwarg=None,
            defaults=[],
        ),
        body=scoped(path_expr(ast.Name(id="_key", ctx=ast.Load())), body),
        decorator_list=[],
        returns=None,
    )
    visit = ast.Expr(
        value=ast.Call(
            func=ast.Name(id="iterate", ctx=ast.Load()),
            args=[
                ast.Call(
                    func=ast.Name(id="resolve", ctx=ast.Load()),
                    args=[ast.Name(id="data", ctx=ast.Load()), current_path()],
                    keywords=[],
                ),
                ast.Name(id=VISITOR, ctx=ast.Load()),
            ],
            keywords=[],
        )
    )
    return scoped(path_expr(path), [visitor, visit])
