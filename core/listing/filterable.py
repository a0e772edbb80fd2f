"""
core/listing/filterable.py - 실시간 부분 문자열 필터 목록

모든 목록 뷰가 공유하는 필터 투영입니다.
원본 레코드는 건드리지 않고, 표시 행 -> 원본 위치 매핑(filtered indices)만 다시 계산합니다.

불변 조건:
    - 모든 filtered index는 원본 레코드의 유효한 위치
    - 빈 필터는 항상 0..N-1 항등 매핑을 복원
    - filtered_count() <= total_count()

Usage:
    from core.listing import FilterableList

    listing = FilterableList(columns, cell_value)
    listing.load(resources)
    listing.set_filter("rg1")
    for row in listing.rows():
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

from .columns import ColumnConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

CellValueFunc = Callable[[T, int], str]


def contains_ignore_case(value: str, text: str) -> bool:
    """대소문자를 무시한 부분 문자열 포함 여부"""
    if not text:
        return True
    return text.lower() in value.lower()


class FilterableList(Generic[T]):
    """필터 가능한 레코드 목록 (ListProjection)

    Args:
        columns: 컬럼 스키마 (필터는 모든 컬럼 값을 검사)
        cell_value: (레코드, 컬럼 인덱스) -> 표시 문자열
    """

    def __init__(
        self,
        columns: Sequence[ColumnConfig] = (),
        cell_value: CellValueFunc | None = None,
    ):
        self._columns: tuple[ColumnConfig, ...] = tuple(columns)
        self._cell_value: CellValueFunc = cell_value or (lambda _record, _index: "")
        self._records: list[T] = []
        self._filter_text = ""
        self._filtered: list[int] = []

    # -------------------------------------------------------------------------
    # 스키마 / 데이터
    # -------------------------------------------------------------------------

    def configure(self, columns: Sequence[ColumnConfig], cell_value: CellValueFunc) -> None:
        """컬럼 스키마 교체 (현재 필터를 새 스키마로 다시 적용)"""
        self._columns = tuple(columns)
        self._cell_value = cell_value
        self._apply()

    def load(self, records: Sequence[T]) -> None:
        """레코드 전체 교체, 필터 초기화"""
        self._records = list(records)
        self._filter_text = ""
        self._apply()

    @property
    def columns(self) -> tuple[ColumnConfig, ...]:
        return self._columns

    @property
    def records(self) -> tuple[T, ...]:
        return tuple(self._records)

    # -------------------------------------------------------------------------
    # 필터
    # -------------------------------------------------------------------------

    def set_filter(self, text: str) -> None:
        """필터 적용

        빈 문자열이면 전체 표시, 아니면 어느 컬럼이든 text를 포함하는 레코드만
        원래 순서대로 남깁니다.
        """
        self._filter_text = text or ""
        self._apply()
        logger.debug("필터 '%s': %d/%d", self._filter_text, self.filtered_count(), self.total_count())

    def clear_filter(self) -> None:
        """set_filter("")와 동일"""
        self.set_filter("")

    @property
    def filter_text(self) -> str:
        return self._filter_text

    @property
    def has_filter(self) -> bool:
        return bool(self._filter_text)

    def _apply(self) -> None:
        if not self._filter_text:
            self._filtered = list(range(len(self._records)))
            return

        column_count = len(self._columns)
        self._filtered = [
            i
            for i, record in enumerate(self._records)
            if any(contains_ignore_case(self._cell_value(record, col), self._filter_text) for col in range(column_count))
        ]

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    def total_count(self) -> int:
        return len(self._records)

    def filtered_count(self) -> int:
        return len(self._filtered)

    @property
    def filtered_indices(self) -> tuple[int, ...]:
        return tuple(self._filtered)

    def index_at(self, row: int) -> int:
        """표시 행 -> 원본 위치 (범위 밖이면 -1)"""
        if row < 0 or row >= len(self._filtered):
            return -1
        return self._filtered[row]

    def record_at(self, row: int) -> T | None:
        """표시 행의 레코드 (범위 밖이면 None)"""
        index = self.index_at(row)
        if index < 0:
            return None
        return self._records[index]

    def filtered_records(self) -> list[T]:
        return [self._records[i] for i in self._filtered]

    def rows(self) -> list[list[str]]:
        """표시용 셀 문자열 행 목록"""
        column_count = len(self._columns)
        return [[self._cell_value(self._records[i], col) for col in range(column_count)] for i in self._filtered]
