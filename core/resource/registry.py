"""
core/resource/registry.py - 리소스 타입 -> 핸들러 레지스트리

리소스 타입 문자열로 핸들러를 찾습니다. 빈 문자열("")은 기본 핸들러 키입니다.

    - lookup_exact(): 정확히 일치하는 핸들러, 없으면 HandlerNotFoundError
    - lookup_or_default(): 정확한 핸들러 -> 기본 핸들러 -> HandlerNotFoundError

등록은 보통 시작 시 한 번, 조회는 반복적으로 일어납니다.
읽기/쓰기 락으로 보호되므로 등록 중에도 동시 조회가 안전합니다.

Usage:
    from core.resource import create_default_registry

    registry = create_default_registry()
    handler = registry.lookup_or_default("Microsoft.Web/sites")  # DefaultHandler
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from core.exceptions import HandlerNotFoundError
from core.inventory.types import strip_provider_prefix

from .handler import ResourceHandler
from .handlers import DefaultHandler, KeyVaultHandler, StorageAccountHandler

logger = logging.getLogger(__name__)

DEFAULT_KEY = ""


class ReadWriteLock:
    """다중 읽기 / 단일 쓰기 락

    쓰기 대기 중에는 새 읽기를 막아 쓰기가 굶지 않도록 합니다.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._waiting_writers += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ResourceRegistry:
    """리소스 타입 핸들러 레지스트리 (CapabilityRegistry)"""

    def __init__(self) -> None:
        self._handlers: dict[str, ResourceHandler] = {}
        self._lock = ReadWriteLock()

    def register(self, handler: ResourceHandler) -> None:
        """핸들러 등록 (같은 타입이 있으면 교체)"""
        key = handler.resource_type
        with self._lock.write():
            replaced = key in self._handlers
            self._handlers[key] = handler
        logger.debug("핸들러 등록: %r%s", key, " (교체)" if replaced else "")

    def lookup_exact(self, resource_type: str) -> ResourceHandler:
        """정확히 일치하는 핸들러 조회

        Raises:
            HandlerNotFoundError: 등록된 핸들러가 없는 경우
        """
        with self._lock.read():
            handler = self._handlers.get(resource_type)
        if handler is None:
            raise HandlerNotFoundError(resource_type)
        return handler

    def lookup_or_default(self, resource_type: str) -> ResourceHandler:
        """정확한 핸들러, 없으면 기본("") 핸들러

        Raises:
            HandlerNotFoundError: 기본 핸들러도 등록되지 않은 경우
        """
        with self._lock.read():
            handler = self._handlers.get(resource_type) or self._handlers.get(DEFAULT_KEY)
        if handler is None:
            raise HandlerNotFoundError(resource_type)
        return handler

    def list_resource_types(self) -> list[str]:
        """등록된 타입 목록 (기본 키 제외, 정렬)"""
        with self._lock.read():
            return sorted(k for k in self._handlers if k != DEFAULT_KEY)

    def supported_resource_types(self) -> list[str]:
        """목록 이동이 가능한 타입 목록 (메뉴 뷰 데이터)"""
        with self._lock.read():
            items = [(k, h) for k, h in self._handlers.items() if k != DEFAULT_KEY]
        return sorted(k for k, h in items if h.can_list_from_summary())

    def display_name_for(self, resource_type: str) -> str:
        """타입 표시 이름 (전용 핸들러가 없으면 Provider 접두사를 뗀 타입)"""
        with self._lock.read():
            handler = self._handlers.get(resource_type) if resource_type else None
        if handler is not None:
            return handler.display_name
        return strip_provider_prefix(resource_type)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._handlers)

    def __contains__(self, resource_type: object) -> bool:
        with self._lock.read():
            return resource_type in self._handlers


def create_default_registry() -> ResourceRegistry:
    """기본 핸들러 3종이 등록된 레지스트리 생성"""
    registry = ResourceRegistry()
    registry.register(DefaultHandler())
    registry.register(StorageAccountHandler())
    registry.register(KeyVaultHandler())
    return registry
