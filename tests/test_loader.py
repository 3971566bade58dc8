"""Unit tests for the settings file loader."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from typed_settings.config import load_settings_file

if TYPE_CHECKING:
    from pathlib import Path


def test_load_yaml_file(tmp_path: Path):
    """YAMLファイルを読み込める。"""

    path = tmp_path / "settings.yaml"
    path.write_text("theme: '\"dark\"'\ncount: '3'\n", encoding="utf-8")

    assert load_settings_file(path) == {"theme": '"dark"', "count": "3"}


def test_load_json_file(tmp_path: Path):
    """JSONファイルを読み込める。"""

    path = tmp_path / "settings.json"
    path.write_text('{"items": "[1,2]"}', encoding="utf-8")

    assert load_settings_file(str(path)) == {"items": "[1,2]"}


def test_load_empty_yaml_file(tmp_path: Path):
    """空のYAMLファイルは空の辞書になる。"""

    path = tmp_path / "settings.yml"
    path.write_text("", encoding="utf-8")

    assert load_settings_file(path) == {}


def test_load_missing_file(tmp_path: Path):
    """存在しないファイルでは FileNotFoundError が発生する。"""

    with pytest.raises(FileNotFoundError):
        load_settings_file(tmp_path / "missing.yaml")


def test_load_unsupported_suffix(tmp_path: Path):
    """サポートされない拡張子では ValueError が発生する。"""

    path = tmp_path / "settings.toml"
    path.write_text("a = 1", encoding="utf-8")

    with pytest.raises(ValueError, match="サポートされない設定形式"):
        load_settings_file(path)


def test_load_invalid_yaml(tmp_path: Path):
    """不正なYAML形式では ValueError が発生する。"""

    path = tmp_path / "settings.yaml"
    path.write_text("invalid: yaml: content: [", encoding="utf-8")

    with pytest.raises(ValueError, match="YAML解析エラー"):
        load_settings_file(path)


def test_load_invalid_json(tmp_path: Path):
    """不正なJSON形式では ValueError が発生する。"""

    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="JSON解析エラー"):
        load_settings_file(path)


def test_load_non_mapping(tmp_path: Path):
    """トップレベルが辞書でない場合は ValueError が発生する。"""

    path = tmp_path / "settings.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError, match="辞書形式"):
        load_settings_file(path)


def test_load_non_string_value(tmp_path: Path):
    """文字列でない値が含まれる場合は ValueError が発生する。"""

    path = tmp_path / "settings.yaml"
    path.write_text("count: 3\n", encoding="utf-8")

    with pytest.raises(ValueError, match="count"):
        load_settings_file(path)
