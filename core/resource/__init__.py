"""
core/resource - 리소스 타입별 핸들러와 레지스트리

Classes:
    - ResourceHandler: 핸들러 기본 클래스
    - DefaultHandler, StorageAccountHandler, KeyVaultHandler: 기본 제공 핸들러
    - ResourceRegistry: 타입 -> 핸들러 조회 (기본 핸들러 대체 지원)
"""

from .handler import Action, ActionContext, ActionHost, ResourceHandler
from .handlers import DefaultHandler, KeyVaultHandler, StorageAccountHandler
from .registry import DEFAULT_KEY, ReadWriteLock, ResourceRegistry, create_default_registry

__all__ = [
    "Action",
    "ActionContext",
    "ActionHost",
    "ResourceHandler",
    "DefaultHandler",
    "StorageAccountHandler",
    "KeyVaultHandler",
    "DEFAULT_KEY",
    "ReadWriteLock",
    "ResourceRegistry",
    "create_default_registry",
]
