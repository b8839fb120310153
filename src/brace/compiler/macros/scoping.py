"""Scoping macro: ``->``.

``{-> person {. name} ({path})}`` renders ``person.name`` relative to
``person`` and restores the outer path afterwards.
"""

from __future__ import annotations

import ast
from typing import Any

from brace.compiler.helpers import Transform, parse_path, path_expr, scoped, transform_children


def descend_macro(node: list[Any], transform: Transform) -> list[ast.stmt]:
    """Render children with the ambient path extended by the argument."""
    path = parse_path(node)
    return scoped(path_expr(path), transform_children(node, transform))
