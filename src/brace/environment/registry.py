"""Macro registry for brace environments.

Dict-like view over an Environment's caller macros.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from brace.compiler.helpers import Macro

if TYPE_CHECKING:
    from brace.environment.core import Environment

logger = logging.getLogger(__name__)


class MacroRegistry:
    """Dict-like interface over the macros an Environment compiles with.

    Supports:
        - env.macros['name'] = macro
        - env.macros.update({'name': macro})
        - macro = env.macros['name']
        - 'name' in env.macros
        - @env.macros.register('name')

    All mutations use copy-on-write: a compilation that already took the
    current mapping keeps seeing it unchanged.
    """

    __slots__ = ("_attr", "_env")

    def __init__(self, env: Environment, attr: str = "_macros"):
        self._env = env
        self._attr = attr

    def _get_dict(self) -> dict[str, Macro]:
        return getattr(self._env, self._attr)

    def _set_dict(self, d: dict[str, Macro]) -> None:
        setattr(self._env, self._attr, d)

    def __getitem__(self, name: str) -> Macro:
        return self._get_dict()[name]

    def __setitem__(self, name: str, macro: Macro) -> None:
        new = self._get_dict().copy()
        new[name] = macro
        self._set_dict(new)
        logger.debug(f"Registered macro: {name!r}")

    def __delitem__(self, name: str) -> None:
        new = self._get_dict().copy()
        del new[name]
        self._set_dict(new)

    def __contains__(self, name: object) -> bool:
        return name in self._get_dict()

    def __iter__(self):
        return iter(self._get_dict())

    def __len__(self) -> int:
        return len(self._get_dict())

    def get(self, name: str, default: Macro | None = None) -> Macro | None:
        return self._get_dict().get(name, default)

    def update(self, mapping: dict[str, Macro]) -> None:
        """Batch register macros."""
        new = self._get_dict().copy()
        new.update(mapping)
        self._set_dict(new)
        logger.debug(f"Registered macros: {', '.join(map(repr, mapping))}")

    def register(self, name: str) -> Callable[[Macro], Macro]:
        """Decorator that registers a function as a macro.

        Usage::

            @env.macros.register("upper")
            def upper(node, transform):
                ...
        """

        def decorator(macro: Macro) -> Macro:
            self[name] = macro
            return macro

        return decorator

    def copy(self) -> dict[str, Macro]:
        """Return a copy of the underlying dict."""
        return self._get_dict().copy()

    def keys(self):
        return self._get_dict().keys()

    def items(self):
        return self._get_dict().items()
