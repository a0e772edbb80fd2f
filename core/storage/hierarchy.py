"""
core/storage/hierarchy.py - 평면 키 목록의 가상 디렉터리 투영

오브젝트 스토리지는 "a/b/c.txt" 같은 평면 키만 돌려줍니다.
현재 prefix의 바로 아래 자식(리프 또는 합성 디렉터리)만 골라 한 단계 트리를 만듭니다.

규칙:
    - prefix로 시작하지 않는 키는 건너뜀 (에러 아님)
    - 나머지(R)에 구분자가 없으면 리프
    - R이 구분자로 끝나고 다른 구분자가 없으면 디렉터리 마커 (is_directory=True 리프)
    - 그 외에는 prefix + R[:p+1] 폴더를 한 번만 합성
    - 중복 제거 키는 폴더 키 문자열 (마커/합성 구분 없이 먼저 나온 쪽이 이김)
    - R이 구분자로 시작하는 키는 잘못된 키로 보고 루트 레벨 리프로 강등

Usage:
    from core.storage import project

    nodes = project(entries, prefix="folder1/")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from core.config import settings
from core.exceptions import MalformedKeyError
from core.inventory.types import DirectoryNode, KeyEntry

logger = logging.getLogger(__name__)


def _leaf(entry: KeyEntry, display_name: str, key: str | None = None) -> DirectoryNode:
    return DirectoryNode(
        display_name=display_name,
        key=entry.key if key is None else key,
        is_directory=False,
        size=entry.size or 0,
        content_type=entry.content_type,
        last_modified=entry.last_modified,
        etag=entry.etag,
        metadata=dict(entry.metadata),
    )


def _directory(display_name: str, key: str) -> DirectoryNode:
    return DirectoryNode(display_name=display_name, key=key, is_directory=True)


def project(
    entries: Iterable[KeyEntry],
    prefix: str = "",
    delimiter: str = settings.DEFAULT_DELIMITER,
    on_malformed: Callable[[MalformedKeyError], None] | None = None,
) -> list[DirectoryNode]:
    """prefix의 바로 아래 자식 노드 목록

    Args:
        entries: 평면 키 목록
        prefix: 현재 가상 디렉터리 (빈 문자열이면 루트)
        delimiter: 경로 구분자 (한 글자)
        on_malformed: 잘못된 키를 만났을 때 호출 (기본: DEBUG 로그)

    Returns:
        입력 첫 등장 순서를 따르는 중복 없는 노드 목록
    """
    if not delimiter:
        raise ValueError("delimiter는 빈 문자열일 수 없습니다")

    nodes: list[DirectoryNode] = []
    seen: set[str] = set()

    for entry in entries:
        key = entry.key
        if not key.startswith(prefix):
            continue

        rest = key[len(prefix) :]
        if not rest:
            # prefix 자신을 가리키는 디렉터리 마커
            continue

        pos = rest.find(delimiter)

        if pos == -1:
            if key not in seen:
                seen.add(key)
                nodes.append(_leaf(entry, rest))
            continue

        if pos == 0:
            error = MalformedKeyError(key, "구분자로 시작하는 빈 경로 세그먼트")
            if on_malformed is not None:
                on_malformed(error)
            else:
                logger.debug("%s", error)
            if key not in seen:
                seen.add(key)
                nodes.append(_leaf(entry, key))
            continue

        folder_name = rest[: pos + len(delimiter)]
        folder_key = prefix + folder_name
        if folder_key in seen:
            continue
        seen.add(folder_key)

        if len(folder_name) == len(rest):
            # 명시적 디렉터리 마커: 실제 객체이므로 수정 시각/ETag 유지, 크기는 0
            marker = _directory(folder_name, folder_key)
            marker.last_modified = entry.last_modified
            marker.etag = entry.etag
            nodes.append(marker)
        else:
            nodes.append(_directory(folder_name, folder_key))

    return nodes


def parent_prefix(prefix: str, delimiter: str = settings.DEFAULT_DELIMITER) -> str:
    """prefix에서 마지막 세그먼트를 제거한 상위 prefix

    끝에서 두 번째 글자부터 거꾸로 구분자를 찾습니다.
    "a/b/" -> "a/", "a/" -> "", "" -> ""
    """
    if not prefix:
        return ""
    idx = prefix.rfind(delimiter, 0, len(prefix) - 1)
    if idx < 0:
        return ""
    return prefix[: idx + len(delimiter)]
