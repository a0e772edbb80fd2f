"""
core/inventory/static.py - YAML 인벤토리 파일 기반 Provider

클라우드 클라이언트 없이 브라우저를 실행하거나 테스트할 때 사용합니다.

파일 구조:
    user:
      name: Jane Doe
      email: jane@example.com
      tenant_id: tenant-1
    subscriptions:
      - id: sub-1
        name: Dev
        resource_groups:
          - name: rg1
            location: koreacentral
            resources:
              - name: stdev
                type: Microsoft.Storage/storageAccounts
                containers:
                  - name: logs
                    blobs:
                      - name: 2024/01/app.log
                        size: 1024
              - name: kv-dev
                type: Microsoft.KeyVault/vaults
                secrets:
                  - name: db-password
                    value: s3cr3t
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from core.config import build_vault_url, settings
from core.exceptions import ValidationError

from .provider import ResourceProvider
from .types import (
    BlobDetail,
    Certificate,
    Container,
    KeyEntry,
    Resource,
    ResourceGroup,
    ResourceTypeSummary,
    Secret,
    Subscription,
    UserInfo,
    VaultKey,
    normalize_properties,
)

logger = logging.getLogger(__name__)


def _parse_datetime(value: Any) -> datetime | None:
    """YAML 값을 datetime으로 변환 (safe_load가 이미 변환한 경우 그대로)"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as e:
        raise ValidationError("datetime", value, "ISO 8601", cause=e) from e


def _str_map(value: Any) -> dict[str, str]:
    if not value:
        return {}
    if not isinstance(value, dict):
        raise ValidationError("tags", value, "mapping")
    return {str(k): "" if v is None else str(v) for k, v in value.items()}


def _size(value: Any, where: str) -> int | None:
    """블롭 크기를 정수로 변환 (없으면 None)"""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{where}.size", value, "정수")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{where}.size", value, "정수", cause=e) from e


def _mapping(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValidationError(where, value, "mapping")
    return value


def _items(data: dict[str, Any], key: str, where: str) -> list[dict[str, Any]]:
    """하위 목록의 각 원소가 매핑인지 확인"""
    items = data.get(key) or []
    if not isinstance(items, list):
        raise ValidationError(f"{where}.{key}", type(items).__name__, "list")
    return [_mapping(item, f"{where}.{key}[{i}]") for i, item in enumerate(items)]


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    if data.get(key) in (None, ""):
        raise ValidationError(f"{where}.{key}", data.get(key), "필수 값")
    return data[key]


class StaticProvider(ResourceProvider):
    """메모리 상의 인벤토리 딕셔너리를 제공하는 Provider

    Args:
        data: load_inventory()로 읽은 인벤토리 딕셔너리
    """

    def __init__(self, data: dict[str, Any] | None = None):
        self._data: dict[str, Any] = data or {}
        self._subscriptions: dict[str, dict[str, Any]] = {}
        self._vaults: dict[str, dict[str, Any]] = {}
        self._index()

    @classmethod
    def from_file(cls, path: str | Path) -> StaticProvider:
        """YAML 파일에서 Provider 생성"""
        return cls(load_inventory(path))

    # -------------------------------------------------------------------------
    # 인덱스 구축
    # -------------------------------------------------------------------------

    def _index(self) -> None:
        user = self._data.get("user")
        if user is not None:
            _mapping(user, "user")

        for sub in _items(self._data, "subscriptions", "inventory"):
            sub_id = str(_require(sub, "id", "subscriptions"))
            self._subscriptions[sub_id] = sub
            sub_where = f"subscriptions[{sub_id}]"
            for rg in _items(sub, "resource_groups", sub_where):
                rg_name = _require(rg, "name", f"{sub_where}.resource_groups")
                rg_where = f"resource_groups[{rg_name}]"
                for res in _items(rg, "resources", rg_where):
                    _require(res, "name", f"{rg_where}.resources")
                    _require(res, "type", f"{rg_where}.resources")
                    self._check_resource(res, f"{rg_where}.resources[{res['name']}]")
                    if res["type"] == settings.KEY_VAULT_TYPE:
                        self._vaults[self._vault_url(res)] = res

        logger.debug("인벤토리 로드: 구독 %d개, Key Vault %d개", len(self._subscriptions), len(self._vaults))

    @staticmethod
    def _check_resource(res: dict[str, Any], where: str) -> None:
        """컨테이너/블롭/Key Vault 항목 구조 검증"""
        for container in _items(res, "containers", where):
            container_name = _require(container, "name", f"{where}.containers")
            container_where = f"{where}.containers[{container_name}]"
            for blob in _items(container, "blobs", container_where):
                _require(blob, "name", f"{container_where}.blobs")
                _size(blob.get("size"), f"{container_where}.blobs[{blob['name']}]")
        for kind in ("secrets", "keys", "certificates"):
            for item in _items(res, kind, where):
                _require(item, "name", f"{where}.{kind}")

    @staticmethod
    def _vault_url(res: dict[str, Any]) -> str:
        props = res.get("properties") or {}
        url = props.get("vaultUri") if isinstance(props, dict) else None
        return str(url) if url else build_vault_url(str(res["name"]))

    def _subscription(self, subscription_id: str) -> dict[str, Any]:
        try:
            return self._subscriptions[subscription_id]
        except KeyError:
            raise KeyError(f"구독을 찾을 수 없습니다: {subscription_id}") from None

    def _resource_groups(self, subscription_id: str) -> list[dict[str, Any]]:
        return list(self._subscription(subscription_id).get("resource_groups") or [])

    def _resource_group(self, subscription_id: str, name: str) -> dict[str, Any]:
        for rg in self._resource_groups(subscription_id):
            if str(rg["name"]).lower() == name.lower():
                return rg
        raise KeyError(f"리소스 그룹을 찾을 수 없습니다: {name}")

    def _account(self, subscription_id: str, resource_group: str, account: str) -> dict[str, Any]:
        rg = self._resource_group(subscription_id, resource_group)
        for res in rg.get("resources") or []:
            if res["type"] == settings.STORAGE_ACCOUNT_TYPE and res["name"] == account:
                return res
        raise KeyError(f"스토리지 계정을 찾을 수 없습니다: {account}")

    def _container(self, subscription_id: str, resource_group: str, account: str, container: str) -> dict[str, Any]:
        for item in self._account(subscription_id, resource_group, account).get("containers") or []:
            if item["name"] == container:
                return item
        raise KeyError(f"컨테이너를 찾을 수 없습니다: {container}")

    def _vault(self, vault_url: str) -> dict[str, Any]:
        try:
            return self._vaults[vault_url]
        except KeyError:
            raise KeyError(f"Key Vault를 찾을 수 없습니다: {vault_url}") from None

    @staticmethod
    def _find_named(items: list[dict[str, Any]], name: str, kind: str) -> dict[str, Any]:
        for item in items:
            if item.get("name") == name:
                return item
        raise KeyError(f"{kind}을(를) 찾을 수 없습니다: {name}")

    # -------------------------------------------------------------------------
    # 변환
    # -------------------------------------------------------------------------

    @staticmethod
    def _to_resource(subscription_id: str, rg_name: str, res: dict[str, Any]) -> Resource:
        resource_id = res.get("id") or (
            f"/subscriptions/{subscription_id}/resourceGroups/{rg_name}/providers/{res['type']}/{res['name']}"
        )
        return Resource(
            id=str(resource_id),
            name=str(res["name"]),
            type=str(res["type"]),
            location=str(res.get("location", "")),
            resource_group=rg_name,
            tags=_str_map(res.get("tags")),
            properties=normalize_properties(res.get("properties")),
        )

    @staticmethod
    def _vault_item_kwargs(item: dict[str, Any]) -> dict[str, Any]:
        return {
            "name": str(item["name"]),
            "enabled": bool(item.get("enabled", True)),
            "created": _parse_datetime(item.get("created")),
            "updated": _parse_datetime(item.get("updated")),
            "expires": _parse_datetime(item.get("expires")),
            "not_before": _parse_datetime(item.get("not_before")),
            "version": str(item.get("version", "")),
            "tags": _str_map(item.get("tags")),
        }

    def _to_secret(self, item: dict[str, Any]) -> Secret:
        return Secret(content_type=str(item.get("content_type", "")), **self._vault_item_kwargs(item))

    def _to_vault_key(self, item: dict[str, Any]) -> VaultKey:
        return VaultKey(key_type=str(item.get("key_type", "")), **self._vault_item_kwargs(item))

    def _to_certificate(self, item: dict[str, Any]) -> Certificate:
        return Certificate(
            subject=str(item.get("subject", "")),
            issuer=str(item.get("issuer", "")),
            thumbprint=str(item.get("thumbprint", "")),
            content_type=str(item.get("content_type", "")),
            **self._vault_item_kwargs(item),
        )

    # -------------------------------------------------------------------------
    # ResourceProvider 구현
    # -------------------------------------------------------------------------

    def list_subscriptions(self) -> list[Subscription]:
        return [
            Subscription(
                id=sub_id,
                name=str(sub.get("name", sub_id)),
                display_name=str(sub.get("display_name", sub.get("name", ""))),
                state=str(sub.get("state", "Enabled")),
                tenant_id=str(sub.get("tenant_id", "")),
            )
            for sub_id, sub in self._subscriptions.items()
        ]

    def list_resource_groups(self, subscription_id: str) -> list[ResourceGroup]:
        return [
            ResourceGroup(
                name=str(rg["name"]),
                location=str(rg.get("location", "")),
                tags=_str_map(rg.get("tags")),
                subscription_id=subscription_id,
            )
            for rg in self._resource_groups(subscription_id)
        ]

    def list_resources(
        self,
        subscription_id: str,
        resource_group: str | None = None,
        resource_type: str | None = None,
    ) -> list[Resource]:
        if resource_group:
            groups = [self._resource_group(subscription_id, resource_group)]
        else:
            groups = self._resource_groups(subscription_id)

        resources = []
        for rg in groups:
            for res in rg.get("resources") or []:
                if resource_type and str(res["type"]).lower() != resource_type.lower():
                    continue
                resources.append(self._to_resource(subscription_id, str(rg["name"]), res))
        return resources

    def get_resource_type_counts(self, subscription_id: str, resource_group: str) -> list[ResourceTypeSummary]:
        counts: dict[str, int] = {}
        for res in self.list_resources(subscription_id, resource_group):
            counts[res.type] = counts.get(res.type, 0) + 1
        return [ResourceTypeSummary(type=t, count=c) for t, c in counts.items()]

    def list_containers(self, subscription_id: str, resource_group: str, account: str) -> list[Container]:
        return [
            Container(
                name=str(item["name"]),
                last_modified=_parse_datetime(item.get("last_modified")),
                etag=str(item.get("etag", "")),
                public_access=str(item.get("public_access", "") or ""),
                metadata=_str_map(item.get("metadata")),
            )
            for item in self._account(subscription_id, resource_group, account).get("containers") or []
        ]

    def list_keys(
        self,
        subscription_id: str,
        resource_group: str,
        account: str,
        container: str,
        prefix: str = "",
    ) -> list[KeyEntry]:
        entries = []
        for blob in self._container(subscription_id, resource_group, account, container).get("blobs") or []:
            name = str(blob["name"])
            if prefix and not name.startswith(prefix):
                continue
            entries.append(
                KeyEntry(
                    key=name,
                    size=_size(blob.get("size"), f"blobs[{name}]"),
                    content_type=str(blob.get("content_type", "")),
                    last_modified=_parse_datetime(blob.get("last_modified")),
                    etag=str(blob.get("etag", "")),
                    metadata=_str_map(blob.get("metadata")),
                    is_directory_marker=name.endswith(settings.DEFAULT_DELIMITER),
                )
            )
        return entries

    def get_blob_detail(
        self,
        subscription_id: str,
        resource_group: str,
        account: str,
        container: str,
        name: str,
    ) -> BlobDetail:
        blobs = self._container(subscription_id, resource_group, account, container).get("blobs") or []
        blob = self._find_named(blobs, name, "블롭")
        return BlobDetail(
            name=name,
            size=_size(blob.get("size"), f"blobs[{name}]") or 0,
            content_type=str(blob.get("content_type", "")),
            last_modified=_parse_datetime(blob.get("last_modified")),
            etag=str(blob.get("etag", "")),
            metadata=_str_map(blob.get("metadata")),
        )

    def list_secrets(self, vault_url: str) -> list[Secret]:
        return [self._to_secret(item) for item in self._vault(vault_url).get("secrets") or []]

    def list_vault_keys(self, vault_url: str) -> list[VaultKey]:
        return [self._to_vault_key(item) for item in self._vault(vault_url).get("keys") or []]

    def list_certificates(self, vault_url: str) -> list[Certificate]:
        return [self._to_certificate(item) for item in self._vault(vault_url).get("certificates") or []]

    def get_secret_value(self, vault_url: str, name: str) -> str:
        secret = self._find_named(self._vault(vault_url).get("secrets") or [], name, "시크릿")
        return str(secret.get("value", ""))

    def get_vault_key_detail(self, vault_url: str, name: str) -> VaultKey:
        return self._to_vault_key(self._find_named(self._vault(vault_url).get("keys") or [], name, "키"))

    def get_certificate_detail(self, vault_url: str, name: str) -> Certificate:
        certificates = self._vault(vault_url).get("certificates") or []
        return self._to_certificate(self._find_named(certificates, name, "인증서"))

    def get_user_info(self) -> UserInfo:
        user = self._data.get("user") or {}
        return UserInfo(
            name=str(user.get("name", "")),
            email=str(user.get("email", "")),
            tenant_id=str(user.get("tenant_id", "")),
        )


def load_inventory(path: str | Path) -> dict[str, Any]:
    """인벤토리 YAML 파일 로드

    Args:
        path: 파일 경로

    Returns:
        인벤토리 딕셔너리

    Raises:
        ValidationError: 파일이 없거나 최상위가 매핑이 아닌 경우
    """
    inventory_file = Path(path)
    if not inventory_file.exists():
        raise ValidationError("inventory", str(inventory_file), "존재하는 파일")

    with inventory_file.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValidationError("inventory", str(inventory_file), "YAML 문서", cause=e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("inventory", type(data).__name__, "mapping")
    return data
