"""Typed settings proxy over a string-keyed host store."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from typed_settings.config.resolver import CodecResolver
from typed_settings.core.markers import ASIS

if TYPE_CHECKING:
    from typed_settings.config.schema import Codec
    from typed_settings.core.interfaces import SettingsStorage

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Mapping[str, object])


class TrackedSettingsView(Mapping[str, Any]):
    """読み取りを追跡する設定ビュー。

    存在するキーを ``view[key]`` / ``view.get(key)`` / ``view.key`` で読むと、
    そのキーは dirty として記録され、値は参照のまま返される。
    ``in`` / ``len()`` / キーの列挙では記録しない。
    """

    __slots__ = ("_values", "_dirty")

    def __init__(self, values: dict[str, Any], dirty: set[str]):
        self._values = values
        self._dirty = dirty

    def __getitem__(self, key: str) -> Any:
        value = self._values[key]
        self._dirty.add(key)
        return value

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={list(self._values)!r})"


class TypedSettings(Generic[T]):
    """ホストストアの文字列を型付きの値として扱うプロキシ

    構築時にホストストアの全エントリを一度だけ読み込んでデコードし、以後は
    メモリ上の値を正とする。``update()`` は即座に、``get_to_update()`` 経由の
    変更は ``commit()`` 時にホストストアへ書き戻す。

    デコード結果が None のエントリ（JSON の ``null`` など）は未設定として扱われ、
    ``get()`` には現れない。ただしホストストア側のエントリは削除されず、
    そのキーが次に書き込まれるまで残る。

    Attributes:
        storage: ホストストア
        resolver: キーごとのコーデックを決めるリゾルバ
    """

    def __init__(
        self,
        storage: SettingsStorage,
        codecs: Mapping[str, Codec | Mapping[str, Any]] | None = None,
        default_codec: Codec | Mapping[str, Any] | None = None,
    ):
        """TypedSettingsを初期化し、ホストストアの内容を読み込む

        Args:
            storage: ホストストア（entries / set_item / remove_item を持つ）
            codecs: キー単位のコーデック設定。decode は初期化子も兼ねる
            default_codec: 全キー共通の既定コーデック設定

        Raises:
            ValueError: コーデック設定に未知のキーが含まれる場合
            TypeError: コーデック設定が不正な場合
        """
        self.storage = storage
        self.resolver = CodecResolver(codecs, default_codec)
        self._values: dict[str, Any] = {}
        self._dirty: set[str] = set()
        self._tracked = TrackedSettingsView(self._values, self._dirty)
        self._load()

    def _load(self) -> None:
        entries = self.storage.entries()
        for key, raw in entries.items():
            value = self.resolver.decoder_for(key)(raw)
            if value is not None:
                self._values[key] = value

        initialized = 0
        for key, decode in self.resolver.initializers().items():
            if key in entries:
                continue
            value = decode(None)
            if value is not None:
                self._values[key] = value
                initialized += 1

        logger.debug(f"設定を読み込みました: {len(entries)}件（初期化 {initialized}件）")

    def get(self) -> T:
        """現在の型付き設定を読み取り専用ビューとして返す（コピーではない）。"""
        return cast(T, MappingProxyType(self._values))

    def update(self, values: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        """設定を部分的に更新し、即座にホストストアへ永続化する

        値に ``ASIS`` を渡すと、メモリ上の現在値を変更せずにそのまま永続化する。
        値に None を渡すとキーを削除する。

        Args:
            values: 更新するキーと値
            **kwargs: values と同様（キーワード引数形式）
        """
        pending = dict(values or {})
        pending.update(kwargs)

        for key, value in pending.items():
            if value is ASIS:
                value = self._values.get(key)
            elif value is None:
                self._values.pop(key, None)
            else:
                self._values[key] = value
            self._persist(key, value)

    def get_to_update(self) -> T:
        """読み取りを追跡するビューを返す

        このビュー経由で読んだキーは変更されたものとみなされ、次の ``commit()`` で永続化される。
        """
        return cast(T, self._tracked)

    def commit(self) -> int:
        """get_to_update() 経由で読まれたキーをホストストアへ書き戻す

        Returns:
            書き戻したキーの数
        """
        flushed = 0
        for key in list(self._dirty):
            self._persist(key, self._values.get(key))
            flushed += 1
        self._dirty.clear()

        if flushed:
            logger.debug(f"変更をコミットしました: {flushed}件")
        return flushed

    @property
    def dirty_keys(self) -> frozenset[str]:
        return frozenset(self._dirty)

    def _persist(self, key: str, value: Any) -> None:
        if value is None:
            self.storage.remove_item(key)
            logger.debug(f"設定を削除しました: {key}")
            return

        encoded = self.resolver.encoder_for(key)(value)
        self.storage.set_item(key, encoded)
        logger.debug(f"設定を保存しました: {key} = {encoded}")
