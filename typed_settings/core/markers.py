"""update() で使うマーカー定義。"""

from __future__ import annotations

from enum import Enum


class AsIs(Enum):
    """「現在のメモリ上の値をそのまま永続化する」ことを表す単一メンバーの列挙型。"""

    ASIS = "asis"

    def __repr__(self) -> str:
        return "ASIS"


ASIS = AsIs.ASIS
