"""Environment-variable-backed host store."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import MutableMapping

DEFAULT_PREFIX = "TYPED_SETTINGS_"


class EnvironmentStorage:
    """接頭辞付きの環境変数をホストストアとして扱う。

    キー ``theme`` は環境変数 ``TYPED_SETTINGS_theme`` に対応する（大文字小文字は変換しない）。
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX, environ: MutableMapping[str, str] | None = None):
        if not prefix:
            raise ValueError("環境変数の接頭辞は空にできません")
        self.prefix = prefix
        self._environ = os.environ if environ is None else environ

    def entries(self) -> dict[str, str]:
        return {
            env_key[len(self.prefix) :]: env_val
            for env_key, env_val in self._environ.items()
            if env_key.startswith(self.prefix) and len(env_key) > len(self.prefix)
        }

    def get_item(self, key: str) -> str | None:
        return self._environ.get(self.prefix + key)

    def set_item(self, key: str, value: str) -> None:
        self._environ[self.prefix + key] = value

    def remove_item(self, key: str) -> None:
        self._environ.pop(self.prefix + key, None)
