"""キー単位/グローバル/組み込みの三段階でコーデックを解決するリゾルバ。"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from typed_settings.codecs import json_decode, json_encode
from typed_settings.config.schema import Codec

if TYPE_CHECKING:
    from collections.abc import Mapping

    from typed_settings.config.schema import Decoder, Encoder


class CodecResolver:
    """キーごとに有効なエンコーダ/デコーダを決定する。

    解決順: キー単位の上書き -> グローバル既定の上書き -> 組み込み既定(JSON)。
    エンコードとデコードはそれぞれ独立に解決される。構築後は不変。
    """

    def __init__(
        self,
        codecs: Mapping[str, Codec | Mapping[str, Any]] | None = None,
        default: Codec | Mapping[str, Any] | None = None,
    ):
        """CodecResolverを初期化する

        Args:
            codecs: キー単位のコーデック設定
            default: 全キー共通の既定コーデック設定

        Raises:
            ValueError: 未知の設定キーが含まれる場合
            TypeError: 設定値が不正な場合
        """
        per_key = {key: Codec.coerce(option) for key, option in (codecs or {}).items()}
        self._codecs: Mapping[str, Codec] = MappingProxyType(per_key)

        fallback = Codec.coerce(default) if default is not None else Codec()
        self._default_encode: Encoder = fallback.encode or json_encode
        self._default_decode: Decoder = fallback.decode or json_decode

    def decoder_for(self, key: str) -> Decoder:
        codec = self._codecs.get(key)
        if codec is not None and codec.decode is not None:
            return codec.decode
        return self._default_decode

    def encoder_for(self, key: str) -> Encoder:
        codec = self._codecs.get(key)
        if codec is not None and codec.encode is not None:
            return codec.encode
        return self._default_encode

    def initializers(self) -> dict[str, Decoder]:
        """初期化子を兼ねるキー単位のデコーダを返す。

        グローバル既定のデコーダは初期化子として扱わない。
        """
        return {key: codec.decode for key, codec in self._codecs.items() if codec.decode is not None}
