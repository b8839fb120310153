"""Helpers for writing macros.

Two groups of functions live here:

**Argument parsing** — ``parse_arg`` and ``parse_path`` let a macro claim
its own argument from slot 0 of its segment. Whatever follows the
argument stays in slot 0 and is emitted as ordinary literal text.

**Code building** — small constructors for the Python AST statements a
render function is made of. Generated code sees these names:

    data        the value being rendered
    _append     appends one string to the output buffer
    _paths      stack of path frames; ``_paths[-1]`` is the ambient path,
                a tuple of segments
    resolve, join_path, format_path, iterate, to_text, UNDEFINED   (runtime)

Example (a macro that upper-cases a value):
    >>> def upper(node, transform):
    ...     value = resolve_expr(parse_path(node))
    ...     text = ast.Call(func=ast.Name(id="to_text", ctx=ast.Load()), args=[value], keywords=[])
    ...     upper_call = ast.Call(
    ...         func=ast.Attribute(value=text, attr="upper", ctx=ast.Load()),
    ...         args=[],
    ...         keywords=[],
    ...     )
    ...     return [emit(upper_call), *transform_children(node, transform)]

"""

from __future__ import annotations

import ast
import re
from collections.abc import Callable, Sequence
from typing import Any, TypeAlias

Fragment: TypeAlias = "list[ast.stmt] | ast.stmt | str"
Transform: TypeAlias = Callable[[list[Any]], list[ast.stmt]]
Macro: TypeAlias = Callable[[list[Any], Transform], Fragment]

_ARG_RE = re.compile(r"^\S+")
# a[3] / a["k"] / a['k'] → a.3 / a.k
_INDEX_RE = re.compile(r"""\[["']?|["']?\]""")

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
}
_ESCAPE_TABLE = str.maketrans(_ESCAPES)


# ─────────────────────────────────────────────────────────────────────────────
# Argument parsing
# ─────────────────────────────────────────────────────────────────────────────


def parse_arg(node: list[Any]) -> str:
    """Claim the first whitespace-delimited token of the node's slot 0.

    The token and the whitespace after it are removed from slot 0 in
    place. Call exactly once per node before transforming its children.

    Returns:
        The token, or ``""`` when slot 0 is empty or starts with whitespace.
    """
    head = node[0]
    match = _ARG_RE.match(head)
    arg = match.group() if match else ""
    node[0] = head[len(arg):].lstrip()
    return arg


def parse_path(node: list[Any]) -> str:
    """Claim the node's argument as a dotted path.

    Bracket indexing is rewritten to dots and leading/trailing dots are
    dropped, so ``.pages[3].title``, ``pages.3.title`` and
    ``pages["3"].title`` all give ``pages.3.title``. ``.`` gives ``""``.
    """
    path = _INDEX_RE.sub(".", parse_arg(node))
    return ".".join(part for part in path.split(".") if part)


def escape(text: str) -> str:
    """Escape text for use inside a quoted Python string literal."""
    return str(text).translate(_ESCAPE_TABLE)


# ─────────────────────────────────────────────────────────────────────────────
# Code building
# ─────────────────────────────────────────────────────────────────────────────


def _name(name: str) -> ast.Name:
    return ast.Name(id=name, ctx=ast.Load())


def _call(func: ast.expr, *args: ast.expr) -> ast.Call:
    return ast.Call(func=func, args=list(args), keywords=[])


def emit(value_expr: ast.expr) -> ast.stmt:
    """Append ``value_expr`` (which must evaluate to ``str``) to the output."""
    return ast.Expr(value=_call(_name("_append"), value_expr))


def output(text: str) -> list[ast.stmt]:
    """Emit literal text. Empty text emits nothing."""
    if text == "":
        return []
    return [emit(ast.Constant(value=text))]


def current_path() -> ast.expr:
    """Expression for the ambient path: ``_paths[-1]``."""
    return ast.Subscript(
        value=_name("_paths"),
        slice=ast.UnaryOp(op=ast.USub(), operand=ast.Constant(value=1)),
        ctx=ast.Load(),
    )


def path_expr(path: str | ast.expr) -> ast.expr:
    """Expression for the ambient path extended by ``path``.

    A dotted string becomes one segment per piece
    (``join_path(_paths[-1], 'a', 'b')``); an expression is a single
    segment, such as the key ``each`` is visiting.
    """
    if isinstance(path, str):
        parts = [ast.Constant(value=part) for part in path.split(".") if part]
        if not parts:
            return current_path()
        return _call(_name("join_path"), current_path(), *parts)
    return _call(_name("join_path"), current_path(), path)


def resolve_expr(path: str | ast.expr) -> ast.expr:
    """Expression resolving the ambient path + ``path`` against ``data``."""
    return _call(_name("resolve"), _name("data"), path_expr(path))


def scoped(new_path: ast.expr, body: Sequence[ast.stmt]) -> list[ast.stmt]:
    """Run ``body`` with ``new_path`` as the ambient path.

    Generates:
        _paths.append(new_path)
        ... body ...
        _paths.pop()
    """
    paths = _name("_paths")
    return [
        ast.Expr(value=_call(ast.Attribute(value=paths, attr="append", ctx=ast.Load()), new_path)),
        *body,
        ast.Expr(value=_call(ast.Attribute(value=_name("_paths"), attr="pop", ctx=ast.Load()))),
    ]


def transform_children(node: list[Any], transform: Transform) -> list[ast.stmt]:
    """Emit a node's literal slots and transform its child nodes, in order."""
    stmts: list[ast.stmt] = []
    for item in node:
        if isinstance(item, str):
            stmts.extend(output(item))
        else:
            stmts.extend(transform(item))
    return stmts


def to_source(stmts: Sequence[ast.stmt]) -> str:
    """Render transformed statements back to Python source.

    Lets a macro that builds its code as text embed its children:

        f"if {ast.unparse(resolve_expr('x'))} is not UNDEFINED:\\n{indent(to_source(body), '    ')}"
    """
    if not stmts:
        return "pass"
    module = ast.Module(body=list(stmts), type_ignores=[])
    return ast.unparse(ast.fix_missing_locations(module))
