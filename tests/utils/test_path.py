"""Tests for issue path rendering."""

from __future__ import annotations

import pytest

from issue_explainer.types import Symbol
from issue_explainer.utils.path import is_identifier, join_path


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ((), ""),
        (("a",), "a"),
        ((0,), "0"),
        (("",), '""'),
        ((Symbol("sym"),), "sym"),
        (("./*",), "./*"),
    ],
)
def test_join_path_single_or_empty(path: tuple, expected: str) -> None:
    assert join_path(path) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (("a", 0, "b", "c", 1, 2), "a[0].b.c[1][2]"),
        (("exports", "./*"), 'exports["./*"]'),
        (("a", "b", '"'), 'a.b["\\""]'),
        (("a", "b", "你好"), "a.b.你好"),
        (("a", "$b", "_c"), "a.$b._c"),
        (("a", "1b"), 'a["1b"]'),
        (("a", ""), 'a[""]'),
        (("a", Symbol("x y")), 'a["x y"]'),
        (("a", Symbol()), 'a[""]'),
        (("./*", "a"), '["./*"].a'),
        ((0, "a"), "[0].a"),
        (("a", "b\u200cc"), "a.b\u200cc"),
    ],
)
def test_join_path_multiple_elements(path: tuple, expected: str) -> None:
    assert join_path(path) == expected


def test_join_path_quotes_emoji_keys() -> None:
    """Emoji are not identifier characters, so they are bracketed and quoted.

    Quoting is intentional even though an emoji would read fine after a dot.
    """
    assert join_path(("a", "b", "💩")) == 'a.b["💩"]'


@pytest.mark.parametrize("key", ["a", "_a", "$a", "a1", "a$", "ünïcödé", "你好"])
def test_is_identifier_accepts(key: str) -> None:
    assert is_identifier(key)


@pytest.mark.parametrize("key", ["", "1a", "a-b", "a b", "./*", "💩", "\u200ca"])
def test_is_identifier_rejects(key: str) -> None:
    assert not is_identifier(key)


@pytest.mark.parametrize(
    "keys",
    [
        ("a", "b"),
        ("user", "address", "street"),
        ("x", "y1", "z_2", "$w"),
    ],
)
def test_identifier_keys_round_trip_through_dots(keys: tuple[str, ...]) -> None:
    assert tuple(join_path(keys).split(".")) == keys
