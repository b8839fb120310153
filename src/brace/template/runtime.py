"""Runtime support called by compiled render functions.

Everything here is pure: each function uses only its arguments, so the
module can be shared by every template (``include_runtime=False``) or
copied verbatim into a template's generated module (``include_runtime=True``).
Keep it self-contained: standard library imports only, no brace imports.

A path is a tuple of segments, one per step: ``("items", 0, "name")``.
Segments taken from template text are strings; segments added by ``each``
are the entry's real key or index, so a mapping key such as ``"index.html"``
or ``""`` stays a single step. ``format_path`` gives the dotted display
form (``items.0.name``). Missing data is never an error; lookups that fail
return ``UNDEFINED``.

Thread-Safety:
All functions are stateless and safe for concurrent use.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any

Path = tuple[Any, ...]


class _Undefined:
    """Marker for a path that does not resolve. Always falsy."""

    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _as_index(part: Any) -> int | None:
    if isinstance(part, bool):
        return None
    if isinstance(part, int):
        return part if part >= 0 else None
    if isinstance(part, str) and part.isdecimal():
        return int(part)
    return None


def split_path(path: str) -> Path:
    """``"a.b.0"`` → ``("a", "b", "0")``; empty pieces are dropped."""
    return tuple(part for part in path.split(".") if part)


def join_path(base: Path | str, *parts: Any) -> Path:
    """Extend ``base`` by ``parts``, each one segment."""
    if isinstance(base, str):
        base = split_path(base)
    return (*base, *parts)


def format_path(path: Path | str) -> str:
    """Dotted display form of a path: ``("items", 0)`` → ``items.0``."""
    if isinstance(path, str):
        return path
    return ".".join(str(part) for part in path)


def resolve(data: Any, path: Path | str) -> Any:
    """Look up a path in ``data``.

    Mappings are indexed by key (an all-digit text segment also matches an
    integer key), lists and tuples by non-negative index. Anything else
    (strings, numbers, None) has no children. A text path is split on dots
    first.

    Returns:
        The value, or UNDEFINED when any step is missing or the final
        value is None. Falsy values such as ``0`` or ``""`` are returned
        as-is.
    """
    if isinstance(path, str):
        path = split_path(path)
    value = data
    for part in path:
        if isinstance(value, Mapping):
            if part in value:
                value = value[part]
            elif isinstance(part, str) and part.isdecimal() and int(part) in value:
                value = value[int(part)]
            else:
                return UNDEFINED
        elif _is_sequence(value):
            index = _as_index(part)
            if index is None or index >= len(value):
                return UNDEFINED
            value = value[index]
        else:
            return UNDEFINED
    if value is None:
        return UNDEFINED
    return value


def iter_keys(value: Any) -> Iterator[Any]:
    """Yield the keys ``each`` visits: indices for lists, keys for mappings.

    Missing or falsy values, strings and scalars yield nothing.
    """
    if not value:
        return
    if isinstance(value, Mapping):
        yield from list(value)
    elif _is_sequence(value):
        yield from range(len(value))


def iterate(value: Any, visitor: Callable[[Any], object]) -> None:
    """Call ``visitor(key)`` for every key ``iter_keys`` yields."""
    for key in iter_keys(value):
        visitor(key)


def to_text(value: Any) -> str:
    """Text for ``{. path}``: empty for UNDEFINED, ``str()`` otherwise."""
    if value is UNDEFINED:
        return ""
    return str(value)


RUNTIME_NAMES = (
    "UNDEFINED",
    "format_path",
    "iter_keys",
    "iterate",
    "join_path",
    "resolve",
    "split_path",
    "to_text",
)
