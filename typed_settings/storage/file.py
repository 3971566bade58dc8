"""YAML/JSON file-backed host store."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from typed_settings.config.loader import SUPPORTED_SUFFIXES, load_settings_file

logger = logging.getLogger(__name__)


class FileStorage:
    """平坦な「キー -> 文字列」辞書を保持する設定ファイルをホストストアとして扱うクラス

    書き込みのたびにファイル全体を書き直す。

    Attributes:
        path: 設定ファイルのパス
    """

    def __init__(self, path: str | Path):
        """FileStorageを初期化する

        Args:
            path: 設定ファイルのパス（.yaml / .yml / .json）

        Raises:
            ValueError: サポートされない拡張子、またはファイル内容が不正な場合
        """
        self.path = Path(path)
        self._format = self.path.suffix.lower()
        if self._format not in SUPPORTED_SUFFIXES:
            raise ValueError(f"サポートされていないファイル形式: {self._format}")
        self._data = self._load()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            logger.warning(f"設定ファイル '{self.path}' が見つかりません。空のストアとして扱います。")
            return {}

        data = load_settings_file(self.path)
        logger.info(f"設定ファイル '{self.path}' を読み込みました。")
        return data

    def entries(self) -> dict[str, str]:
        return dict(self._data)

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value
        self.save()

    def remove_item(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self.save()

    def save(self) -> None:
        """現在の内容をファイルに保存する"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                if self._format == ".json":
                    json.dump(self._data, f, indent=2, ensure_ascii=False)
                else:
                    yaml.safe_dump(self._data, f, default_flow_style=False, allow_unicode=True)
            logger.debug(f"設定ファイルを保存しました: {self.path}")
        except Exception as e:
            logger.error(f"設定ファイルの保存に失敗しました: {e}")
            raise
