"""
core/listing - 목록 뷰 공통 컴포넌트

Classes:
    - ColumnConfig, Align: 컬럼 스키마
    - FilterableList: 대소문자 무시 부분 문자열 필터 투영
"""

from .columns import Align, ColumnConfig
from .filterable import FilterableList, contains_ignore_case

__all__ = [
    "Align",
    "ColumnConfig",
    "FilterableList",
    "contains_ignore_case",
]
