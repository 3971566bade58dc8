"""ポートインターフェース定義。

プロキシはここで定義されるProtocolにのみ依存し、具体的なホストストアは storage 層へ分離する。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class SettingsStorage(Protocol):
    """文字列キー/文字列値のホストストアポート。"""

    def entries(self) -> Mapping[str, str]:
        """現在の全エントリを返す。プロキシは構築時に一度だけ呼び出す。"""

    def get_item(self, key: str) -> str | None:
        """単一エントリを返す。存在しない場合は None。"""

    def set_item(self, key: str, value: str) -> None:
        """単一エントリを書き込む。"""

    def remove_item(self, key: str) -> None:
        """単一エントリを削除する。存在しない場合は何もしない。"""
