"""Brace Template — compiled render function.

The Template wraps the code object produced from the generated module
and exposes it as ``render(data=None)``. Calling the template directly
is the same as calling ``render``.

Architecture:
    ```
    Template
    ├── _module: ast.Module        # Generated module (kept for .source)
    ├── _code: code object         # Compiled bytecode
    ├── _render_func: callable     # The module's render(data=None)
    └── _filename                  # For error messages
    ```

StringBuilder Pattern:
Generated code appends to a per-call list and joins once at the end:
    ```python
    def render(data=None):
        ...
        _out = []
        _append = _out.append
        _append('Hello, ')
        _append(to_text(resolve(data, join_path(_paths[-1], 'name'))))
        return ''.join(_out)
    ```

Thread-Safety:
- Templates are immutable after construction
- ``render()`` creates only local state (output list, path stack)
- Multiple threads can call ``render()`` concurrently

"""

from __future__ import annotations

import ast
from typing import Any

from brace.template import runtime


class Template:
    """Compiled template ready for rendering.

    Attributes:
        filename: Source file name given at compile time (for error messages)
        source: Generated Python module as source text
        include_runtime: Whether the runtime is embedded in the module

    Example:
            >>> import brace
            >>> t = brace.compile("Hello, {. name}!")
            >>> t({"name": "World"})
            'Hello, World!'

    """

    __slots__ = (
        "_code",
        "_filename",
        "_include_runtime",
        "_module",
        "_render_func",
    )

    def __init__(
        self,
        module: ast.Module,
        *,
        filename: str | None = None,
        include_runtime: bool = True,
    ):
        self._module = module
        self._filename = filename
        self._include_runtime = include_runtime
        try:
            self._code = compile(module, filename or "<template>", "exec")
        except (SyntaxError, ValueError, TypeError, RecursionError) as e:
            from brace.environment.exceptions import InvalidFragmentError

            raise InvalidFragmentError(
                f"Generated code does not compile: {type(e).__name__}: {e}",
                filename=filename,
            ) from e

        if include_runtime:
            namespace: dict[str, Any] = {}
        else:
            # Shared runtime: same functions for every template
            namespace = {name: getattr(runtime, name) for name in runtime.RUNTIME_NAMES}
        exec(self._code, namespace)
        self._render_func = namespace["render"]

    @property
    def filename(self) -> str | None:
        """Source filename."""
        return self._filename

    @property
    def include_runtime(self) -> bool:
        return self._include_runtime

    @property
    def source(self) -> str:
        """The generated module as Python source.

        With ``include_runtime=True`` this is a standalone module that can
        be written to disk and imported on its own.
        """
        return ast.unparse(self._module)

    def render(self, data: Any = None) -> str:
        """Render the template against ``data``.

        Args:
            data: Value paths resolve against; None means ``{}``

        Returns:
            Rendered text

        Raises:
            TemplateRuntimeError: Generated code failed unexpectedly (missing
                data never raises)
        """
        from brace.environment.exceptions import TemplateRuntimeError

        try:
            result: str = self._render_func(data)
            return result
        except TemplateRuntimeError:
            raise
        except Exception as e:
            error_str = str(e).strip() or type(e).__name__
            raise TemplateRuntimeError(
                f"{type(e).__name__}: {error_str}", template_name=self._filename
            ) from e

    __call__ = render

    def __repr__(self) -> str:
        return f"<Template {self._filename or '(inline)'}>"
