"""
core/storage - 오브젝트 스토리지 탐색 유틸리티

Functions:
    - project: 평면 키 목록을 한 단계 가상 디렉터리로 투영
    - parent_prefix: 상위 폴더 prefix 계산
"""

from .hierarchy import parent_prefix, project

__all__ = [
    "project",
    "parent_prefix",
]
