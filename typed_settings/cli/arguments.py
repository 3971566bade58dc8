"""Command-line argument parsing."""

from __future__ import annotations

import argparse
import os

STORE_ENV_VAR = "TYPED_SETTINGS_STORE"


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """コマンドライン引数をパースする

    Args:
        argv: 引数リスト（None の場合は sys.argv を使用）

    Returns:
        パース済み引数
    """
    parser = argparse.ArgumentParser(description="型付き設定ストア - 設定ファイルの表示と更新")

    parser.add_argument(
        "--store",
        type=str,
        default=os.environ.get(STORE_ENV_VAR, "settings.yaml"),
        help=f"設定ファイルのパス（デフォルト: ${STORE_ENV_VAR} または settings.yaml）",
    )

    parser.add_argument(
        "--set",
        dest="set_items",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="設定値を更新する（VALUEはJSONとして解釈し、失敗した場合は文字列）",
    )

    parser.add_argument("--unset", action="append", default=[], metavar="KEY", help="設定を削除する")

    parser.add_argument(
        "--append",
        dest="append_items",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="リスト型の設定に要素を追加する",
    )

    parser.add_argument(
        "--plain",
        action="append",
        default=[],
        metavar="KEY",
        help="JSONを介さず素の文字列として保存するキー",
    )

    parser.add_argument("--debug", action="store_true", help="デバッグモードで実行（詳細ログ）")

    return parser.parse_args(argv)


def split_assignment(item: str) -> tuple[str, str]:
    """``KEY=VALUE`` 形式の文字列を分解する

    Raises:
        ValueError: 形式が不正な場合
    """
    key, sep, value = item.partition("=")
    if not sep or not key:
        raise ValueError(f"KEY=VALUE 形式である必要があります: {item!r}")
    return key, value
