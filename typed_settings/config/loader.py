"""設定ファイルの読み込み専用モジュール。"""

from __future__ import annotations

import json
from pathlib import Path

import yaml

SUPPORTED_SUFFIXES = {".yaml", ".yml", ".json"}


def load_settings_file(path: str | Path) -> dict[str, str]:
    """YAML/JSON設定を「キー -> 文字列」の辞書として読み込む。

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        ValueError: 形式が不正、またはトップレベルが辞書でない、値が文字列でない場合
    """
    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"設定ファイルが見つかりません: {settings_path}")

    suffix = settings_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"サポートされない設定形式です: {suffix}")

    with settings_path.open(encoding="utf-8") as f:
        try:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"YAML解析エラー: {e}") from e
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON解析エラー: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("設定ファイルは辞書形式である必要があります")

    for key, value in data.items():
        if not isinstance(value, str):
            raise ValueError(f"設定 '{key}' の値は文字列である必要があります: {value!r}")
    return {str(key): value for key, value in data.items()}
