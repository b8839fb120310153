"""Built-in macros.

Every macro has the shape ``macro(node, transform) -> fragment``: it
claims its argument with ``parse_arg``/``parse_path`` and calls
``transform`` (directly or via ``transform_children``) for nested nodes.

Caller-supplied macros take precedence over these by name.
"""

from __future__ import annotations

from types import MappingProxyType

from brace.compiler.macros.basic import out_macro, path_macro, value_macro
from brace.compiler.macros.control_flow import each_macro, has_macro
from brace.compiler.macros.scoping import descend_macro

BUILTIN_MACROS = MappingProxyType(
    {
        "out": out_macro,
        ".": value_macro,
        "->": descend_macro,
        "has": has_macro,
        "each": each_macro,
        "path": path_macro,
    }
)

__all__ = [
    "BUILTIN_MACROS",
    "descend_macro",
    "each_macro",
    "has_macro",
    "out_macro",
    "path_macro",
    "value_macro",
]
