"""
core/listing/columns.py - 테이블 컬럼 스키마 타입
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Align(str, Enum):
    """컬럼 정렬 (Rich Table justify 값과 동일)"""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class ColumnConfig:
    """테이블 컬럼 설정

    Attributes:
        name: 헤더 이름
        align: 정렬
        width: 고정 너비 (None이면 자동)
    """

    name: str
    align: Align = Align.LEFT
    width: int | None = None

    @property
    def is_auto_width(self) -> bool:
        return self.width is None
