"""
core/inventory/types.py - 인벤토리 레코드 데이터클래스

리소스 Provider가 반환하는 레코드 타입을 정의합니다.
모든 레코드는 조회할 때마다 새로 생성되고 다음 내비게이션에서 버려집니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

# 재귀 속성 값: str / int / float / bool / None / 리스트 / 자기 자신의 맵
PropertyValue = str | int | float | bool | None | list["PropertyValue"] | dict[str, "PropertyValue"]


def normalize_property(value: Any) -> PropertyValue:
    """Provider 원본 값을 PropertyValue로 변환

    알 수 없는 타입은 문자열로 변환하므로 어떤 중첩 구조도 거절하지 않습니다.
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): normalize_property(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [normalize_property(v) for v in value]
    return str(value)


def normalize_properties(properties: dict[str, Any] | None) -> dict[str, PropertyValue]:
    """속성 맵 전체를 정규화"""
    if not properties:
        return {}
    return {str(k): normalize_property(v) for k, v in properties.items()}


def strip_provider_prefix(resource_type: str) -> str:
    """리소스 타입에서 Provider 접두사 제거

    "Microsoft.Storage/storageAccounts" -> "storageAccounts"
    """
    idx = resource_type.rfind("/")
    if 0 <= idx < len(resource_type) - 1:
        return resource_type[idx + 1 :]
    return resource_type


# =============================================================================
# 구독 / 리소스 그룹 / 리소스
# =============================================================================


@dataclass
class Subscription:
    """구독 정보"""

    id: str
    name: str
    display_name: str = ""
    state: str = ""
    tenant_id: str = ""

    @property
    def label(self) -> str:
        return self.display_name or self.name


@dataclass
class ResourceGroup:
    """리소스 그룹 정보"""

    name: str
    location: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    subscription_id: str = ""


@dataclass
class Resource:
    """범용 리소스 정보"""

    id: str
    name: str
    type: str
    location: str = ""
    resource_group: str = ""
    tags: dict[str, str] = field(default_factory=dict)
    properties: dict[str, PropertyValue] = field(default_factory=dict)

    @property
    def short_type(self) -> str:
        return strip_provider_prefix(self.type)


@dataclass
class ResourceTypeSummary:
    """리소스 그룹 내 타입별 개수"""

    type: str
    count: int = 0


# =============================================================================
# 스토리지
# =============================================================================


@dataclass
class Container:
    """스토리지 컨테이너 정보"""

    name: str
    last_modified: datetime | None = None
    etag: str = ""
    public_access: str = ""
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def public_access_display(self) -> str:
        return self.public_access or "Private"


@dataclass
class KeyEntry:
    """평면 스토리지 키 (블롭 이름)"""

    key: str
    size: int | None = None
    content_type: str = ""
    last_modified: datetime | None = None
    etag: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    is_directory_marker: bool = False


@dataclass
class DirectoryNode:
    """HierarchyProjector 출력 노드

    display_name은 조회 prefix 기준 상대 이름, key는 전체 키/prefix입니다.
    """

    display_name: str
    key: str
    is_directory: bool = False
    size: int = 0
    content_type: str = ""
    last_modified: datetime | None = None
    etag: str = ""
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class BlobDetail:
    """단일 블롭의 전체 속성"""

    name: str
    size: int = 0
    content_type: str = ""
    last_modified: datetime | None = None
    etag: str = ""
    metadata: dict[str, str] = field(default_factory=dict)


# =============================================================================
# Key Vault
# =============================================================================


@dataclass
class VaultItemBase:
    """Key Vault 항목 공통 속성"""

    name: str
    enabled: bool = True
    created: datetime | None = None
    updated: datetime | None = None
    expires: datetime | None = None
    not_before: datetime | None = None
    version: str = ""
    tags: dict[str, str] = field(default_factory=dict)


@dataclass
class Secret(VaultItemBase):
    """Key Vault 시크릿 (값은 명시적으로 요청할 때만 조회)"""

    content_type: str = ""


@dataclass
class VaultKey(VaultItemBase):
    """Key Vault 키"""

    key_type: str = ""


@dataclass
class Certificate(VaultItemBase):
    """Key Vault 인증서"""

    subject: str = ""
    issuer: str = ""
    thumbprint: str = ""
    content_type: str = ""

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires is None:
            return False
        now = now or datetime.now(self.expires.tzinfo)
        return self.expires < now


@dataclass
class VaultItemKind:
    """Key Vault 탐색기의 항목 종류 행"""

    kind: str
    label: str
    description: str = ""


@dataclass
class UserInfo:
    """현재 로그인한 사용자 정보"""

    name: str = ""
    email: str = ""
    tenant_id: str = ""
