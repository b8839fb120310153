"""Tests for the runtime support functions used by generated code."""

from __future__ import annotations

from collections import OrderedDict

import pytest
from hypothesis import given, settings

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

from .strategies import json_like


class TestPaths:
    @pytest.mark.parametrize(
        ("base", "parts", "expected"),
        [
            ((), (), ()),
            ((), ("items",), ("items",)),
            (("items",), (), ("items",)),
            (("items",), (0,), ("items", 0)),
            (("items", 0), ("name",), ("items", 0, "name")),
            (("files",), ("index.html",), ("files", "index.html")),
            (("m",), ("",), ("m", "")),
            ("items.0", ("name",), ("items", "0", "name")),
        ],
    )
    def test_join(self, base, parts, expected):
        assert join_path(base, *parts) == expected

    @pytest.mark.parametrize(
        ("path", "expected"),
        [("", ()), ("a", ("a",)), (".a..b.", ("a", "b")), ("items.0", ("items", "0"))],
    )
    def test_split(self, path, expected):
        assert split_path(path) == expected

    @pytest.mark.parametrize(
        ("path", "expected"),
        [((), ""), (("items", 0), "items.0"), (("files", "index.html"), "files.index.html")],
    )
    def test_format(self, path, expected):
        assert format_path(path) == expected


class TestResolve:
    """resolve never raises; missing data is UNDEFINED."""

    DATA = {
        "title": "Hello",
        "zero": 0,
        "empty": "",
        "off": False,
        "nothing": None,
        "items": [{"name": "a"}, {"name": "b"}],
        "numbered": {1: "one"},
        "nested": {"deep": {"value": 42}},
    }

    def test_empty_path_is_root(self):
        assert resolve(self.DATA, "") is self.DATA

    def test_key(self):
        assert resolve(self.DATA, "title") == "Hello"

    def test_nested(self):
        assert resolve(self.DATA, "nested.deep.value") == 42

    def test_index(self):
        assert resolve(self.DATA, "items.1.name") == "b"

    @pytest.mark.parametrize(("path", "expected"), [("zero", 0), ("empty", ""), ("off", False)])
    def test_falsy_values_are_present(self, path, expected):
        value = resolve(self.DATA, path)
        assert value is not UNDEFINED
        assert value == expected

    @pytest.mark.parametrize(
        "path",
        [
            "missing",
            "title.length",
            "items.5",
            "items.-1",
            "items.name",
            "zero.real",
            "nothing",
            "nothing.deeper",
            "nested.deep.value.more",
        ],
    )
    def test_missing_is_undefined(self, path):
        assert resolve(self.DATA, path) is UNDEFINED

    def test_integer_mapping_key(self):
        assert resolve(self.DATA, "numbered.1") == "one"

    def test_none_base(self):
        assert resolve(None, "anything") is UNDEFINED

    def test_ignores_empty_segments(self):
        assert resolve(self.DATA, ".nested..deep.") == {"value": 42}

    def test_segment_tuple(self):
        assert resolve(self.DATA, ("items", 1, "name")) == "b"
        assert resolve(self.DATA, ("items", "1", "name")) == "b"

    def test_segment_with_dot_is_one_key(self):
        data = {"files": {"index.html": "page"}, "a": {"b": "nested"}, "a.b": "flat"}
        assert resolve(data, ("files", "index.html")) == "page"
        assert resolve(data, ("a.b",)) == "flat"
        assert resolve(data, "a.b") == "nested"

    def test_empty_key_segment(self):
        assert resolve({"": {"n": "v"}}, ("", "n")) == "v"

    @pytest.mark.parametrize("part", [-1, True, 2.0, "x"])
    def test_non_index_segments_on_sequence(self, part):
        assert resolve(["a", "b", "c"], (part,)) is UNDEFINED

    @given(data=json_like)
    @settings(max_examples=200)
    def test_never_raises(self, data) -> None:
        for path in ("", "a", "0", "a.0.b", "x.y.z"):
            resolve(data, path)


class TestIteration:
    def test_list_keys_in_index_order(self):
        assert list(iter_keys(["a", "b", "c"])) == [0, 1, 2]

    def test_tuple_keys(self):
        assert list(iter_keys(("a", "b"))) == [0, 1]

    def test_mapping_keys_in_insertion_order(self):
        assert list(iter_keys({"b": 1, "a": 2, "c": 3})) == ["b", "a", "c"]
        assert list(iter_keys(OrderedDict([("z", 1), ("y", 2)]))) == ["z", "y"]

    @pytest.mark.parametrize("value", [UNDEFINED, None, 0, "", [], {}, False])
    def test_absent_or_falsy_yields_nothing(self, value):
        assert list(iter_keys(value)) == []

    @pytest.mark.parametrize("value", ["abc", 42, 3.5, True])
    def test_scalars_yield_nothing(self, value):
        assert list(iter_keys(value)) == []

    def test_iterate_calls_visitor(self):
        visited: list = []
        iterate(["x", "y"], visited.append)
        assert visited == [0, 1]

    def test_iterate_absent(self):
        visited: list = []
        iterate(UNDEFINED, visited.append)
        assert visited == []


class TestToText:
    def test_undefined_is_empty(self):
        assert to_text(UNDEFINED) == ""

    @pytest.mark.parametrize(("value", "expected"), [(0, "0"), ("", ""), (False, "False"), (1.5, "1.5")])
    def test_present_values(self, value, expected):
        assert to_text(value) == expected

    def test_undefined_is_falsy(self):
        assert not UNDEFINED
        assert repr(UNDEFINED) == "UNDEFINED"
