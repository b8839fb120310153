"""Brace parser package.

Turns template source into a tree of ``Segment`` nodes.
"""

from brace.parser.core import parse

__all__ = ["parse"]
