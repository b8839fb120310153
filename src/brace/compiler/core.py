"""Brace Compiler Core — macro dispatch over the Segment tree.

The Compiler walks the parse tree and turns every node into Python AST
statements by handing it to the macro its name resolves to:

    Segment tree → transform(root) → list[ast.stmt] → wrap() → code object

Dispatch:
    ``transform(node)`` claims the node's macro name with ``parse_arg``,
    looks it up (caller macros first, then built-ins) and calls
    ``macro(node, transform)``. Macros recurse into their own children
    through the ``transform`` callback they are given, so they never need
    to know how other macros are implemented.

Deciding *what* each node means (the macros) is kept apart from turning
the result into a callable (``brace.compiler.wrapper``).

Example:
    >>> from brace.parser import parse
    >>> tree = parse("Hello {. name}!")
    >>> stmts = Compiler().transform_root(tree)
    >>> print(ast.unparse(ast.fix_missing_locations(ast.Module(stmts, []))))
    _append('Hello ')
    _append(to_text(resolve(data, join_path(_paths[-1], 'name'))))
    _append('!')

"""

from __future__ import annotations

import ast
import logging
import textwrap
from collections import ChainMap
from collections.abc import Mapping
from typing import Any

from brace.compiler.helpers import Macro, parse_arg
from brace.compiler.macros import BUILTIN_MACROS
from brace.environment.exceptions import InvalidFragmentError, UnknownMacroError

logger = logging.getLogger(__name__)

# Synthetic root macro: the whole document is one `out` node
ROOT_MACRO = "out"


class Compiler:
    """Transform a Segment tree into Python statements.

    Attributes:
        _macros: Name → macro lookup (caller macros layered over built-ins)
        _filename: Source file name for error messages
        _source: Template source for error snippets

    The mapping is captured once at construction; later changes to the
    caller's registry do not affect a compilation in progress.
    """

    __slots__ = ("_filename", "_macros", "_source")

    def __init__(
        self,
        macros: Mapping[str, Macro] | None = None,
        *,
        filename: str | None = None,
        source: str | None = None,
    ):
        user_macros = dict(macros or {})
        overridden = sorted(set(user_macros) & set(BUILTIN_MACROS))
        if overridden:
            logger.debug(f"Caller macros override built-ins: {', '.join(overridden)}")
        self._macros: Mapping[str, Macro] = ChainMap(user_macros, dict(BUILTIN_MACROS))
        self._filename = filename
        self._source = source

    def lookup(self, name: str) -> Macro | None:
        """Return the macro registered under ``name``, or None."""
        return self._macros.get(name)

    def transform(self, node: list[Any]) -> list[ast.stmt]:
        """Compile one node (and, through its macro, its subtree).

        Raises:
            UnknownMacroError: The node's name is not a registered macro
            InvalidFragmentError: The macro returned unusable code
        """
        name = parse_arg(node)
        macro = self.lookup(name)
        if macro is None:
            raise UnknownMacroError(name, **self._location(node))
        return self._as_statements(name, node, macro(node, self.transform))

    def transform_root(self, tree: list[Any]) -> list[ast.stmt]:
        """Compile the document node.

        The document is an implicit ``out`` node. Its slot 0 is the text
        before the first brace, so it is dispatched without claiming a
        name (which would also strip the document's leading whitespace).
        A caller macro named ``out`` replaces the root handling too.
        """
        macro = self.lookup(ROOT_MACRO)
        if macro is None:
            raise UnknownMacroError(ROOT_MACRO, **self._location(tree))
        return self._as_statements(ROOT_MACRO, tree, macro(tree, self.transform))

    def _as_statements(self, name: str, node: list[Any], fragment: Any) -> list[ast.stmt]:
        """Normalize a macro's return value to a list of statements.

        Accepts a list of statements, a single statement, or Python source.
        """
        if isinstance(fragment, str):
            if not fragment.strip():
                return []
            try:
                return ast.parse(textwrap.dedent(fragment)).body
            except SyntaxError as e:
                raise InvalidFragmentError(
                    f"Macro {name!r} produced invalid Python: {e.msg}",
                    **self._location(node),
                ) from e
        if isinstance(fragment, ast.stmt):
            return [fragment]
        if isinstance(fragment, (list, tuple)) and all(
            isinstance(stmt, ast.stmt) for stmt in fragment
        ):
            return list(fragment)
        raise InvalidFragmentError(
            f"Macro {name!r} returned {type(fragment).__name__}, "
            f"expected a list of ast statements or Python source",
            **self._location(node),
        )

    def _location(self, node: list[Any]) -> dict[str, Any]:
        return {
            "lineno": getattr(node, "lineno", None),
            "col_offset": getattr(node, "col_offset", None),
            "filename": self._filename,
            "source": self._source,
        }
