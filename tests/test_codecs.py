"""Unit tests for the built-in codec functions."""

from __future__ import annotations

import pytest

from typed_settings.codecs import identity, json_decode, json_encode, stringify_non_string


def test_json_decode_absent_returns_none():
    """None を渡すと None を返す。"""

    assert json_decode(None) is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('"hello"', "hello"),
        ("42", 42),
        ("1.5", 1.5),
        ("true", True),
        ("[1,2,3]", [1, 2, 3]),
        ('{"stringProp":"x"}', {"stringProp": "x"}),
    ],
)
def test_json_decode_valid_json(raw, expected):
    """正しいJSONはデコードされる。"""

    assert json_decode(raw) == expected


@pytest.mark.parametrize("raw", ["hello", "", "not: json", "[1,2", "{'a': 1}"])
def test_json_decode_falls_back_to_raw_string(raw):
    """JSONとして不正な文字列はそのまま返る。"""

    assert json_decode(raw) == raw


def test_json_decode_deeply_nested_falls_back_to_raw_string():
    """再帰の深すぎるJSONでも例外を送出せず、生の文字列を返す。"""

    raw = "[" * 100000

    assert json_decode(raw) == raw


def test_json_encode_quotes_strings():
    """文字列もJSONとして引用符付きで出力される。"""

    assert json_encode("hello") == '"hello"'
    assert json_encode("42") == '"42"'


def test_json_encode_is_compact():
    """区切り文字の空白を含まないコンパクトなJSONを出力する。"""

    assert json_encode([1, 2, 3, 4]) == "[1,2,3,4]"
    assert json_encode({"a": [1, {"b": True}]}) == '{"a":[1,{"b":true}]}'


def test_json_encode_keeps_non_ascii():
    """非ASCII文字はエスケープしない。"""

    assert json_encode("設定") == '"設定"'


@pytest.mark.parametrize(
    "value",
    ["hello", "42", "", 0, -3.25, False, [], ["a", 1, None], {"nested": {"list": [1, 2]}}],
)
def test_default_codec_round_trip(value):
    """encode -> decode で元の値に戻る。"""

    assert json_decode(json_encode(value)) == value


def test_fallback_string_is_quoted_on_reencode():
    """フォールバックした文字列は再エンコードで引用符付きになり、以後は往復可能。"""

    decoded = json_decode("plain text")
    encoded = json_encode(decoded)

    assert encoded == '"plain text"'
    assert json_decode(encoded) == "plain text"


def test_stringify_non_string():
    """文字列はそのまま、それ以外はJSONになる。"""

    assert stringify_non_string("hello") == "hello"
    assert stringify_non_string(42) == "42"
    assert stringify_non_string(["a"]) == '["a"]'


def test_identity():
    """恒等関数は同じオブジェクトを返す。"""

    value = {"a": 1}
    assert identity(value) is value
    assert identity(None) is None
