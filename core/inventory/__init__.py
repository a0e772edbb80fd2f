"""
core/inventory - 인벤토리 레코드와 리소스 Provider

Classes:
    - ResourceProvider: 외부 클라우드 클라이언트가 구현하는 인터페이스
    - StaticProvider: YAML 인벤토리 파일 기반 Provider

Usage:
    from core.inventory import StaticProvider, call_provider

    provider = StaticProvider.from_file("inventory.yaml")
    subs = call_provider("list_subscriptions", provider.list_subscriptions)
"""

from .provider import ResourceProvider, call_provider
from .static import StaticProvider, load_inventory
from .types import (
    BlobDetail,
    Certificate,
    Container,
    DirectoryNode,
    KeyEntry,
    PropertyValue,
    Resource,
    ResourceGroup,
    ResourceTypeSummary,
    Secret,
    Subscription,
    UserInfo,
    VaultItemKind,
    VaultKey,
    normalize_properties,
    normalize_property,
    strip_provider_prefix,
)

__all__ = [
    # Provider
    "ResourceProvider",
    "StaticProvider",
    "call_provider",
    "load_inventory",
    # Types
    "BlobDetail",
    "Certificate",
    "Container",
    "DirectoryNode",
    "KeyEntry",
    "PropertyValue",
    "Resource",
    "ResourceGroup",
    "ResourceTypeSummary",
    "Secret",
    "Subscription",
    "UserInfo",
    "VaultItemKind",
    "VaultKey",
    "normalize_properties",
    "normalize_property",
    "strip_provider_prefix",
]
