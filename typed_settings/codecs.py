"""Built-in encode/decode functions used by the codec policy."""

from __future__ import annotations

import json
from typing import Any


def json_decode(raw: str | None) -> Any:
    """JSONとして解釈し、失敗した場合は文字列をそのまま返す。

    Args:
        raw: ホストストアの文字列（存在しない場合は None）

    Returns:
        デコード済みの値。raw が None の場合は None
    """
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        return raw


def json_encode(value: Any) -> str:
    """値を常にコンパクトなJSON文字列へ変換する（文字列も引用符付き）。"""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def stringify_non_string(value: Any) -> str:
    """文字列はそのまま、それ以外はJSONとして返す。"""
    return value if isinstance(value, str) else json_encode(value)


def identity(value: Any) -> Any:
    return value
