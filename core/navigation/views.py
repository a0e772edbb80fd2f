"""
core/navigation/views.py - 뷰별 고정 컬럼 스키마와 표시 규칙

리소스 목록 뷰의 스키마는 레지스트리 핸들러가 제공하고,
나머지 뷰의 스키마는 여기서 정의합니다.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from core.inventory.types import (
    Certificate,
    Container,
    DirectoryNode,
    ResourceGroup,
    ResourceTypeSummary,
    Secret,
    Subscription,
    VaultItemKind,
    VaultKey,
    strip_provider_prefix,
)
from core.listing.columns import Align, ColumnConfig
from core.resource.details import format_datetime, format_size
from core.resource.handler import ResourceHandler

from .state import NavigationState, ViewState

CellValueFunc = Callable[[Any, int], str]

MISSING = "-"
ENABLED_MARK = "✓"
DISABLED_MARK = "✗"
FILE_ICON = "📄"
FOLDER_ICON = "📁"


@dataclass(frozen=True)
class ViewSchema:
    """뷰의 컬럼 스키마 + 셀 값 함수"""

    columns: tuple[ColumnConfig, ...]
    cell_value: CellValueFunc


@dataclass(frozen=True)
class MenuEntry:
    """메뉴 뷰 행"""

    resource_type: str
    display_name: str


VAULT_ITEM_KINDS: tuple[VaultItemKind, ...] = (
    VaultItemKind("secrets", "🔐 Secrets", "Manage secret values and configurations"),
    VaultItemKind("keys", "🔑 Keys", "Manage cryptographic keys"),
    VaultItemKind("certificates", "📜 Certificates", "Manage SSL/TLS certificates"),
)

VAULT_KIND_VIEWS: dict[str, ViewState] = {
    "secrets": ViewState.VAULT_SECRETS,
    "keys": ViewState.VAULT_KEYS,
    "certificates": ViewState.VAULT_CERTIFICATES,
}


def _pick(values: list[str], index: int) -> str:
    if 0 <= index < len(values):
        return values[index]
    return ""


def _date_or_missing(value: datetime | None) -> str:
    return format_datetime(value) if value is not None else MISSING


def _enabled(value: bool) -> str:
    return ENABLED_MARK if value else DISABLED_MARK


# =============================================================================
# 셀 값 함수
# =============================================================================


def subscription_cell(sub: Subscription, index: int) -> str:
    return _pick([sub.id, sub.display_name or sub.name or sub.id, sub.tenant_id], index)


def resource_group_cell_factory(subscription_id: str) -> CellValueFunc:
    def cell(rg: ResourceGroup, index: int) -> str:
        return _pick([rg.name, rg.location, rg.subscription_id or subscription_id], index)

    return cell


def resource_type_cell(summary: ResourceTypeSummary, index: int) -> str:
    return _pick([strip_provider_prefix(summary.type), str(summary.count)], index)


def container_cell(container: Container, index: int) -> str:
    return _pick([container.name, container.public_access_display, _date_or_missing(container.last_modified)], index)


def blob_cell(node: DirectoryNode, index: int) -> str:
    if node.is_directory:
        return _pick([f"{FOLDER_ICON} {node.display_name}", MISSING, MISSING, MISSING], index)
    return _pick(
        [
            f"{FILE_ICON} {node.display_name}",
            format_size(node.size),
            node.content_type,
            _date_or_missing(node.last_modified),
        ],
        index,
    )


def vault_kind_cell(kind: VaultItemKind, index: int) -> str:
    return _pick([kind.label, kind.description], index)


def secret_cell(secret: Secret, index: int) -> str:
    return _pick([secret.name, _enabled(secret.enabled), secret.content_type, _date_or_missing(secret.updated)], index)


def vault_key_cell(key: VaultKey, index: int) -> str:
    return _pick([key.name, key.key_type, _enabled(key.enabled), _date_or_missing(key.updated)], index)


def certificate_expiry(cert: Certificate, now: datetime | None = None) -> str:
    """만료일 표시 (만료된 인증서는 경고 표시)"""
    if cert.expires is None:
        return MISSING
    expires = cert.expires.strftime("%Y-%m-%d")
    if cert.is_expired(now):
        return f"⚠️ {expires} (EXPIRED)"
    return expires


def certificate_cell(cert: Certificate, index: int) -> str:
    return _pick([cert.name, _enabled(cert.enabled), certificate_expiry(cert), _date_or_missing(cert.updated)], index)


def menu_cell(entry: MenuEntry, index: int) -> str:
    return _pick([entry.display_name], index)


# =============================================================================
# 스키마
# =============================================================================

SUBSCRIPTIONS_SCHEMA = ViewSchema(
    (ColumnConfig("ID"), ColumnConfig("Name"), ColumnConfig("Tenant ID")),
    subscription_cell,
)

RESOURCE_GROUP_COLUMNS = (ColumnConfig("Name"), ColumnConfig("Location"), ColumnConfig("Subscription ID"))

RESOURCE_TYPES_SCHEMA = ViewSchema(
    (ColumnConfig("Resource Type"), ColumnConfig("Count", Align.RIGHT)),
    resource_type_cell,
)

CONTAINERS_SCHEMA = ViewSchema(
    (ColumnConfig("Name"), ColumnConfig("Public Access"), ColumnConfig("Last Modified")),
    container_cell,
)

BLOBS_SCHEMA = ViewSchema(
    (
        ColumnConfig("Name"),
        ColumnConfig("Size", Align.RIGHT),
        ColumnConfig("Content Type"),
        ColumnConfig("Last Modified"),
    ),
    blob_cell,
)

VAULT_EXPLORER_SCHEMA = ViewSchema(
    (ColumnConfig("Item Type"), ColumnConfig("Description")),
    vault_kind_cell,
)

SECRETS_SCHEMA = ViewSchema(
    (
        ColumnConfig("Name"),
        ColumnConfig("Enabled", Align.CENTER),
        ColumnConfig("Content Type"),
        ColumnConfig("Updated"),
    ),
    secret_cell,
)

KEYS_SCHEMA = ViewSchema(
    (ColumnConfig("Name"), ColumnConfig("Type"), ColumnConfig("Enabled", Align.CENTER), ColumnConfig("Updated")),
    vault_key_cell,
)

CERTIFICATES_SCHEMA = ViewSchema(
    (ColumnConfig("Name"), ColumnConfig("Enabled", Align.CENTER), ColumnConfig("Expires"), ColumnConfig("Updated")),
    certificate_cell,
)

MENU_SCHEMA = ViewSchema((ColumnConfig("Resource Type"),), menu_cell)


def resource_group_schema(subscription_id: str) -> ViewSchema:
    return ViewSchema(RESOURCE_GROUP_COLUMNS, resource_group_cell_factory(subscription_id))


def handler_schema(handler: ResourceHandler) -> ViewSchema:
    return ViewSchema(handler.columns(), handler.cell_value)


# =============================================================================
# 뷰별 키 액션 (리소스 목록 뷰는 핸들러 액션 사용)
# =============================================================================

VIEW_ACTIONS: dict[ViewState, tuple[tuple[str, str], ...]] = {
    ViewState.SUBSCRIPTIONS: (("d", "Details"),),
    ViewState.RESOURCE_GROUPS: (("d", "Details"), ("r", "All Resources")),
    ViewState.RESOURCE_TYPES_SUMMARY: (),
    ViewState.STORAGE_EXPLORER: (("d", "Details"),),
    ViewState.BLOB_BROWSER: (("d", "Details"),),
    ViewState.VAULT_EXPLORER: (),
    ViewState.VAULT_SECRETS: (("d", "Details"), ("v", "View Value")),
    ViewState.VAULT_KEYS: (("d", "Details"),),
    ViewState.VAULT_CERTIFICATES: (("d", "Details"),),
    ViewState.MENU: (),
}


# =============================================================================
# 제목 / 브레드크럼
# =============================================================================


def view_title(state: NavigationState, type_display_name: str = "") -> str:
    """현재 뷰 제목"""
    ctx = state.context
    view = state.view

    if view is ViewState.SUBSCRIPTIONS:
        return "Subscriptions"
    if view is ViewState.RESOURCE_GROUPS:
        return f"Resource Groups - {ctx.subscription_name}"
    if view is ViewState.RESOURCE_TYPES_SUMMARY:
        return f"Resource List - {ctx.resource_group}"
    if view is ViewState.RESOURCE_LIST:
        return f"Resources - {ctx.resource_group}"
    if view is ViewState.RESOURCE_TYPE_FILTERED:
        scope = ctx.resource_group or ctx.subscription_name
        return f"{type_display_name or strip_provider_prefix(ctx.resource_type)} - {scope}"
    if view is ViewState.STORAGE_EXPLORER:
        return f"Storage Explorer - {ctx.storage_account}"
    if view is ViewState.BLOB_BROWSER:
        path = f" - {ctx.prefix}" if ctx.prefix else ""
        return f"Blobs - {ctx.storage_account}/{ctx.container}{path}"
    if view is ViewState.VAULT_EXPLORER:
        return f"Key Vault Explorer - {ctx.vault_name}"
    if view is ViewState.VAULT_SECRETS:
        return f"Secrets - {ctx.vault_name}"
    if view is ViewState.VAULT_KEYS:
        return f"Keys - {ctx.vault_name}"
    if view is ViewState.VAULT_CERTIFICATES:
        return f"Certificates - {ctx.vault_name}"
    return "Resource Types Menu"


def breadcrumb(state: NavigationState) -> tuple[str, ...]:
    """경로 조각 목록 (Subscriptions > 구독 > 리소스 그룹 > ...)"""
    ctx = state.context
    parts = ["Subscriptions"]
    if ctx.subscription_name or ctx.subscription_id:
        parts.append(ctx.subscription_name or ctx.subscription_id)
    if ctx.resource_group:
        parts.append(ctx.resource_group)
    if ctx.resource_type:
        parts.append(strip_provider_prefix(ctx.resource_type))
    if ctx.storage_account:
        parts.append(ctx.storage_account)
        if ctx.container:
            parts.append(ctx.container)
            parts.extend(segment for segment in ctx.prefix.split(state.delimiter) if segment)
    if ctx.vault_name:
        parts.append(ctx.vault_name)
        if state.view.is_vault_items:
            parts.append(state.view.value.replace("vault_", "").capitalize())
    if state.view is ViewState.MENU:
        parts.append("Menu")
    if state.showing_detail:
        parts.append("Details")
    return tuple(parts)
