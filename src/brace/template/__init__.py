"""Brace Template package — compiled templates and their runtime support."""

from brace.template.core import Template
from brace.template.runtime import (
    UNDEFINED,
    format_path,
    iter_keys,
    iterate,
    join_path,
    resolve,
    split_path,
    to_text,
)

__all__ = [
    "UNDEFINED",
    "Template",
    "format_path",
    "iter_keys",
    "iterate",
    "join_path",
    "resolve",
    "split_path",
    "to_text",
]
