"""Brace compiler: Segment tree → Python AST → render function."""

from brace.compiler.core import Compiler
from brace.compiler.macros import BUILTIN_MACROS
from brace.compiler.wrapper import build_module, wrap

__all__ = ["BUILTIN_MACROS", "Compiler", "build_module", "wrap"]
