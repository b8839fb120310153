"""Brace Environment — shared compile options.

An Environment holds the caller macros and packaging options that every
template compiled through it uses:

    >>> from brace import Environment
    >>> env = Environment(include_runtime=False)
    >>> @env.macros.register("shout")
    ... def shout(node, transform):
    ...     return '_append("!")'
    >>> env.render("{shout}{. name}", {"name": "hi"})
    '!hi'

The module-level ``brace.compile`` and ``brace.render`` are shortcuts that
build a throwaway Environment per call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from brace.compiler.helpers import Macro
from brace.environment.registry import MacroRegistry
from brace.template.core import Template

logger = logging.getLogger(__name__)


class Environment:
    """Compile configuration shared by a set of templates.

    Args:
        macros: Caller macros by name; they take precedence over built-ins
        include_runtime: Embed the runtime support in each generated module
            (self-contained) instead of sharing ``brace.template.runtime``
        escape_braces: Read ``{{`` and ``}}`` as literal braces

    Thread-Safety:
        Compilation reads the macro mapping once, and registry updates are
        copy-on-write, so compiling while another thread registers macros
        never sees a half-updated mapping.
    """

    def __init__(
        self,
        macros: Mapping[str, Macro] | None = None,
        *,
        include_runtime: bool = True,
        escape_braces: bool = False,
    ):
        self._macros: dict[str, Macro] = dict(macros or {})
        self.include_runtime = include_runtime
        self.escape_braces = escape_braces

    @property
    def macros(self) -> MacroRegistry:
        """Caller macros (dict-like, copy-on-write)."""
        return MacroRegistry(self, "_macros")

    def from_string(self, source: str, *, file: str | None = None) -> Template:
        """Compile template source into a Template.

        Args:
            source: Template text
            file: Source file name, used only in error messages

        Raises:
            UnmatchedBraceError: Braces do not balance
            UnknownMacroError: A node names an unregistered macro
            InvalidFragmentError: A macro produced unusable code
        """
        from brace.compiler.core import Compiler
        from brace.compiler.wrapper import wrap
        from brace.parser import parse

        tree = parse(source, filename=file, escape_braces=self.escape_braces)
        compiler = Compiler(self._macros, filename=file, source=source)
        body = compiler.transform_root(tree)
        logger.debug(
            f"Compiled template {file or '(inline)'}: {len(body)} statements, "
            f"include_runtime={self.include_runtime}"
        )
        return wrap(body, include_runtime=self.include_runtime, filename=file)

    def render(self, source: str, data: Any = None, *, file: str | None = None) -> str:
        """Compile and render in one step."""
        return self.from_string(source, file=file).render(data)
