"""Test helpers shared across brace test modules."""

from __future__ import annotations


def unparse(node: list) -> str:
    """Rebuild template source from a parse tree (inverse of parse)."""
    parts: list[str] = []
    for slot in node:
        if isinstance(slot, str):
            parts.append(slot)
        else:
            parts.append("{" + unparse(slot) + "}")
    return "".join(parts)
