"""Wrap transformed statements into a render function.

The generated module looks like:

    ```python
    # runtime support (only with include_runtime=True)
    def resolve(data, path): ...
    ...

    def render(data=None):
        if data is None:
            data = {}
        _out = []
        _append = _out.append
        _paths = [()]
        ... statements from the macros ...
        return ''.join(_out)
    ```

With ``include_runtime=False`` the runtime names are supplied by the
execution namespace instead (see ``brace.template.core.Template``).
Output is identical either way.
"""

from __future__ import annotations

import ast
import inspect
from collections.abc import Sequence
from functools import cache

from brace.template import runtime
from brace.template.core import Template

RENDER_FUNCTION = "render"


@cache
def _runtime_source() -> str:
    return inspect.getsource(runtime)


def runtime_statements() -> list[ast.stmt]:
    """Fresh AST for the runtime module, without its docstring."""
    body = ast.parse(_runtime_source()).body
    if body and isinstance(body[0], ast.Expr) and isinstance(body[0].value, ast.Constant):
        body = body[1:]
    return body


def _assign(name: str, value: ast.expr) -> ast.stmt:
    return ast.Assign(targets=[ast.Name(id=name, ctx=ast.Store())], value=value)


def build_module(body: Sequence[ast.stmt], *, include_runtime: bool = True) -> ast.Module:
    """Assemble the module defining ``render(data=None)``."""
    setup: list[ast.stmt] = [
        # if data is None: data = {}
        ast.If(
            test=ast.Compare(
                left=ast.Name(id="data", ctx=ast.Load()),
                ops=[ast.Is()],
                comparators=[ast.Constant(value=None)],
            ),
            body=[_assign("data", ast.Dict(keys=[], values=[]))],
            orelse=[],
        ),
        # _out = []
        _assign("_out", ast.List(elts=[], ctx=ast.Load())),
        # _append = _out.append
        _assign(
            "_append",
            ast.Attribute(value=ast.Name(id="_out", ctx=ast.Load()), attr="append", ctx=ast.Load()),
        ),
        # _paths = [()]
        _assign("_paths", ast.List(elts=[ast.Tuple(elts=[], ctx=ast.Load())], ctx=ast.Load())),
    ]
    # return ''.join(_out)
    result = ast.Return(
        value=ast.Call(
            func=ast.Attribute(value=ast.Constant(value=""), attr="join", ctx=ast.Load()),
            args=[ast.Name(id="_out", ctx=ast.Load())],
            keywords=[],
        )
    )
    render_func = ast.FunctionDef(
        name=RENDER_FUNCTION,
        args=ast.arguments(
            posonlyargs=[],
            args=[ast.arg(arg="data")],
            vararg=None,
            kwonlyargs=[],
            kw_defaults=[],
            kwarg=None,
            defaults=[ast.Constant(value=None)],
        ),
        body=[*setup, *body, result],
        decorator_list=[],
        returns=None,
    )

    module_body: list[ast.stmt] = runtime_statements() if include_runtime else []
    module_body.append(render_func)
    return ast.fix_missing_locations(ast.Module(body=module_body, type_ignores=[]))


def wrap(
    body: Sequence[ast.stmt],
    *,
    include_runtime: bool = True,
    filename: str | None = None,
) -> Template:
    """Turn transformed statements into a callable Template."""
    module = build_module(body, include_runtime=include_runtime)
    return Template(module, filename=filename, include_runtime=include_runtime)
