"""
core/resource/details.py - 상세 보기 텍스트 렌더링

Rich 마크업 문자열을 생성합니다. 코어는 출력하지 않고 문자열만 반환합니다.
태그/속성/메타데이터가 비어 있으면 섹션을 생략하지 않고 "None"으로 표시합니다.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from rich.markup import escape

from core.config import settings
from core.inventory.types import (
    BlobDetail,
    Certificate,
    Container,
    PropertyValue,
    ResourceGroup,
    Secret,
    Subscription,
    VaultKey,
)

LABEL_STYLE = "bold cyan"
INDENT = "  "
NONE_TEXT = "None"


def format_datetime(value: datetime | None) -> str:
    """날짜 표시 (없으면 빈 문자열)"""
    if value is None:
        return ""
    return value.strftime(settings.DATETIME_FORMAT)


def format_size(size: int | None) -> str:
    """바이트 크기를 사람이 읽기 쉬운 문자열로 변환

    1023 -> "1023 B", 1536 -> "1.5 KB"
    """
    size = size or 0
    unit = 1024
    if size < unit:
        return f"{size} B"
    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.1f} {'KMGTPE'[exp]}B"


def format_scalar(value: PropertyValue) -> str:
    """스칼라 속성 값 문자열"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_property(value: PropertyValue, depth: int = 1) -> list[str]:
    """속성 값을 들여쓰기 줄 목록으로 변환 (임의 중첩 지원)

    스칼라는 한 줄, 맵/리스트는 하위 줄로 펼칩니다.
    """
    pad = INDENT * depth
    lines: list[str] = []

    if isinstance(value, Mapping):
        if not value:
            return [f"{pad}{{}}"]
        for key, item in value.items():
            if isinstance(item, (Mapping, list)) and item:
                lines.append(f"{pad}[{LABEL_STYLE}]{escape(str(key))}:[/{LABEL_STYLE}]")
                lines.extend(format_property(item, depth + 1))
            else:
                lines.append(f"{pad}[{LABEL_STYLE}]{escape(str(key))}:[/{LABEL_STYLE}] {escape(_inline(item))}")
        return lines

    if isinstance(value, list):
        if not value:
            return [f"{pad}[]"]
        for item in value:
            if isinstance(item, (Mapping, list)) and item:
                lines.append(f"{pad}-")
                lines.extend(format_property(item, depth + 1))
            else:
                lines.append(f"{pad}- {escape(_inline(item))}")
        return lines

    return [f"{pad}{escape(format_scalar(value))}"]


def _inline(value: Any) -> str:
    if isinstance(value, Mapping):
        return "{}"
    if isinstance(value, list):
        return "[]"
    return format_scalar(value)


class DetailBuilder:
    """상세 보기 텍스트 조립기

    Example:
        text = (
            DetailBuilder("Resource Details")
            .field("Name", resource.name)
            .mapping("Tags", resource.tags)
            .build()
        )
    """

    def __init__(self, title: str):
        self._lines: list[str] = [f"[{LABEL_STYLE}]{escape(title)}[/{LABEL_STYLE}]", ""]

    def field(self, label: str, value: Any) -> DetailBuilder:
        text = "" if value is None else str(value)
        self._lines.append(f"[{LABEL_STYLE}]{escape(label)}:[/{LABEL_STYLE}] {escape(text)}")
        return self

    def optional_field(self, label: str, value: Any) -> DetailBuilder:
        """값이 있을 때만 추가"""
        if value:
            self.field(label, value)
        return self

    def mapping(self, label: str, values: Mapping[str, Any] | None) -> DetailBuilder:
        """문자열 맵 섹션 (태그, 메타데이터)"""
        self._lines.append("")
        if not values:
            self._lines.append(f"[{LABEL_STYLE}]{escape(label)}:[/{LABEL_STYLE}] {NONE_TEXT}")
            return self
        self._lines.append(f"[{LABEL_STYLE}]{escape(label)}:[/{LABEL_STYLE}]")
        for key in sorted(values):
            value = values[key]
            text = "" if value is None else str(value)
            self._lines.append(f"{INDENT}[{LABEL_STYLE}]{escape(str(key))}:[/{LABEL_STYLE}] {escape(text)}")
        return self

    def properties(self, label: str, values: Mapping[str, PropertyValue] | None) -> DetailBuilder:
        """재귀 속성 섹션"""
        self._lines.append("")
        if not values:
            self._lines.append(f"[{LABEL_STYLE}]{escape(label)}:[/{LABEL_STYLE}] {NONE_TEXT}")
            return self
        self._lines.append(f"[{LABEL_STYLE}]{escape(label)}:[/{LABEL_STYLE}]")
        self._lines.extend(format_property(dict(values), depth=1))
        return self

    def build(self) -> str:
        return "\n".join(self._lines) + "\n"


# =============================================================================
# 리소스가 아닌 레코드의 상세 보기
# =============================================================================


def render_subscription_detail(sub: Subscription) -> str:
    return (
        DetailBuilder("Subscription Details")
        .field("ID", sub.id)
        .field("Name", sub.name)
        .field("Display Name", sub.display_name)
        .field("State", sub.state)
        .field("Tenant ID", sub.tenant_id)
        .build()
    )


def render_resource_group_detail(rg: ResourceGroup, subscription_id: str) -> str:
    return (
        DetailBuilder("Resource Group Details")
        .field("Name", rg.name)
        .field("Location", rg.location)
        .field("Subscription ID", subscription_id)
        .mapping("Tags", rg.tags)
        .build()
    )


def render_container_detail(container: Container, account: str) -> str:
    return (
        DetailBuilder("Container Details")
        .field("Storage Account", account)
        .field("Name", container.name)
        .field("Public Access", container.public_access_display)
        .field("Last Modified", format_datetime(container.last_modified))
        .field("ETag", container.etag)
        .mapping("Metadata", container.metadata)
        .build()
    )


def render_blob_detail(blob: BlobDetail, account: str, container: str) -> str:
    return (
        DetailBuilder("Blob Details")
        .field("Storage Account", account)
        .field("Container", container)
        .field("Name", blob.name)
        .field("Size", format_size(blob.size))
        .field("Content Type", blob.content_type)
        .field("Last Modified", format_datetime(blob.last_modified))
        .field("ETag", blob.etag)
        .mapping("Metadata", blob.metadata)
        .build()
    )


def _vault_dates(builder: DetailBuilder, item: Secret | VaultKey | Certificate, expired: bool = False) -> None:
    builder.optional_field("Created", format_datetime(item.created))
    builder.optional_field("Updated", format_datetime(item.updated))
    if item.expires is not None:
        expires = format_datetime(item.expires)
        builder.field("Expires", f"{expires} EXPIRED" if expired else expires)
    builder.optional_field("Not Before", format_datetime(item.not_before))


def render_secret_detail(secret: Secret, vault_name: str) -> str:
    builder = (
        DetailBuilder("Secret Details")
        .field("Key Vault", vault_name)
        .field("Name", secret.name)
        .field("Enabled", secret.enabled)
        .optional_field("Content Type", secret.content_type)
    )
    _vault_dates(builder, secret)
    return builder.mapping("Tags", secret.tags).build()


def render_vault_key_detail(key: VaultKey, vault_name: str) -> str:
    builder = (
        DetailBuilder("Key Details")
        .field("Key Vault", vault_name)
        .field("Name", key.name)
        .field("Type", key.key_type)
        .field("Enabled", key.enabled)
        .optional_field("Version", key.version)
    )
    _vault_dates(builder, key)
    return builder.mapping("Tags", key.tags).build()


def render_certificate_detail(cert: Certificate, vault_name: str, now: datetime | None = None) -> str:
    builder = (
        DetailBuilder("Certificate Details")
        .field("Key Vault", vault_name)
        .field("Name", cert.name)
        .field("Enabled", cert.enabled)
        .optional_field("Subject", cert.subject)
        .optional_field("Issuer", cert.issuer)
        .optional_field("Thumbprint", cert.thumbprint)
        .optional_field("Version", cert.version)
    )
    _vault_dates(builder, cert, expired=cert.is_expired(now))
    return builder.mapping("Tags", cert.tags).build()
