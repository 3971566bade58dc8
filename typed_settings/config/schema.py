"""コーデック設定の薄い定義。

キーごとの上書き設定とグローバル既定設定は同じ形 ``{encode?, decode?}`` を持つ。
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from typed_settings.codecs import identity, json_decode

Encoder = Callable[[Any], str]
Decoder = Callable[[str | None], Any]

_OPTION_KEYS = ("encode", "decode")


@dataclass(frozen=True, slots=True)
class Codec:
    """エンコード/デコード関数の組。

    Attributes:
        encode: 値 -> 文字列。None の場合は既定のエンコーダを使う
        decode: 文字列または None -> 値。キー単位で指定した場合は初期化子も兼ねる
    """

    encode: Encoder | None = None
    decode: Decoder | None = None

    def __post_init__(self) -> None:
        for name in _OPTION_KEYS:
            fn = getattr(self, name)
            if fn is not None and not callable(fn):
                raise TypeError(f"コーデックの '{name}' は呼び出し可能である必要があります: {fn!r}")

    @classmethod
    def coerce(cls, option: Codec | Mapping[str, Any]) -> Codec:
        """Codec もしくは ``{"encode": ..., "decode": ...}`` 形式の辞書を Codec に変換する。

        Raises:
            ValueError: 未知の設定キーが含まれる場合
            TypeError: 設定が辞書でも Codec でもない場合
        """
        if isinstance(option, Codec):
            return option
        if not isinstance(option, Mapping):
            raise TypeError(f"コーデック設定は Codec または辞書である必要があります: {option!r}")

        unknown = set(option) - set(_OPTION_KEYS)
        if unknown:
            raise ValueError(f"サポートされないコーデック設定キー: {', '.join(sorted(unknown))}")
        return cls(encode=option.get("encode"), decode=option.get("decode"))

    @classmethod
    def plain(cls) -> Codec:
        """常に素の文字列として扱うキー向けのコーデック。

        デコードは恒等、エンコードは str() で文字列以外の値も文字列として保存する。
        """
        return cls(encode=str, decode=identity)

    @classmethod
    def json_with_default(cls, default: Any) -> Codec:
        """JSONデコードを行い、値が存在しない場合は default を初期値として返すコーデック。

        可変な既定値が共有されないよう、初期化のたびに deepcopy する。
        """

        def decode(raw: str | None) -> Any:
            if raw is None:
                return copy.deepcopy(default)
            return json_decode(raw)

        return cls(decode=decode)
