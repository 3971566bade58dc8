#!/usr/bin/env python
"""
型付き設定ストア - メインエントリーポイント

YAML/JSON の設定ファイルをホストストアとして TypedSettings で読み込み、
コマンドラインから指定された更新を適用して、型付きの設定値を表示します。
"""

from __future__ import annotations

import json
import logging
import sys

from typed_settings import Codec, FileStorage, TypedSettings, json_decode
from typed_settings.cli import parse_arguments, split_assignment
from typed_settings.utils import setup_logging


def main(argv: list[str] | None = None) -> int:
    """メイン処理"""
    args = parse_arguments(argv)

    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    try:
        storage = FileStorage(args.store)
        settings = TypedSettings(storage, codecs={key: Codec.plain() for key in args.plain})

        # --set / --unset は即時に永続化
        updates = {}
        for item in args.set_items:
            key, raw = split_assignment(item)
            updates[key] = raw if key in args.plain else json_decode(raw)
        for key in args.unset:
            updates[key] = None
        if updates:
            settings.update(updates)
            logger.info(f"設定を更新しました: {', '.join(updates)}")

        # --append は追跡ビュー経由で変更し、最後にコミット
        if args.append_items:
            tracked = settings.get_to_update()
            for item in args.append_items:
                key, raw = split_assignment(item)
                current = tracked.get(key)
                if current is None:
                    settings.update({key: []})
                    current = tracked[key]
                if not isinstance(current, list):
                    raise ValueError(f"設定 '{key}' はリストではありません: {current!r}")
                current.append(json_decode(raw))
            flushed = settings.commit()
            logger.info(f"リスト型の設定を更新しました: {flushed}件")

        print(json.dumps(dict(settings.get()), indent=2, ensure_ascii=False))
        return 0

    except FileNotFoundError as e:
        logger.error(f"ファイルが見つかりません: {e}")
        return 1
    except ValueError as e:
        logger.error(f"設定エラー: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("処理が中断されました")
        return 130
    except Exception as e:
        logger.error(f"予期しないエラーが発生しました: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
