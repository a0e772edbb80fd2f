"""
core/inventory/provider.py - 리소스 Provider 인터페이스

실제 클라우드 API 클라이언트(인증, 페이지네이션, 재시도)는 외부 협력자입니다.
코어는 이 추상 클래스만 알고 있으며 모든 호출을 동기 호출로 취급합니다.

Example:
    class MyProvider(ResourceProvider):
        def list_subscriptions(self) -> list[Subscription]:
            ...

    groups = call_provider("list_resource_groups", provider.list_resource_groups, "sub-1")
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from core.exceptions import AZCTError, FetchFailedError

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
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResourceProvider(ABC):
    """모든 리소스 Provider가 구현해야 하는 추상 기본 클래스

    모든 메서드는 레코드 리스트(또는 단일 레코드)를 반환하거나 예외를 던집니다.
    코어는 재시도하지 않습니다.
    """

    # -------------------------------------------------------------------------
    # 구독 / 리소스 그룹 / 리소스
    # -------------------------------------------------------------------------

    @abstractmethod
    def list_subscriptions(self) -> list[Subscription]:
        """접근 가능한 구독 목록"""

    @abstractmethod
    def list_resource_groups(self, subscription_id: str) -> list[ResourceGroup]:
        """구독의 리소스 그룹 목록"""

    @abstractmethod
    def list_resources(
        self,
        subscription_id: str,
        resource_group: str | None = None,
        resource_type: str | None = None,
    ) -> list[Resource]:
        """리소스 목록

        Args:
            subscription_id: 구독 ID
            resource_group: 지정하면 해당 리소스 그룹으로 제한
            resource_type: 지정하면 해당 타입으로 제한
        """

    @abstractmethod
    def get_resource_type_counts(self, subscription_id: str, resource_group: str) -> list[ResourceTypeSummary]:
        """리소스 그룹의 타입별 개수 집계"""

    # -------------------------------------------------------------------------
    # 스토리지
    # -------------------------------------------------------------------------

    @abstractmethod
    def list_containers(self, subscription_id: str, resource_group: str, account: str) -> list[Container]:
        """스토리지 계정의 컨테이너 목록"""

    @abstractmethod
    def list_keys(
        self,
        subscription_id: str,
        resource_group: str,
        account: str,
        container: str,
        prefix: str = "",
    ) -> list[KeyEntry]:
        """컨테이너의 평면 키 목록 (prefix로 제한 가능)"""

    @abstractmethod
    def get_blob_detail(
        self,
        subscription_id: str,
        resource_group: str,
        account: str,
        container: str,
        name: str,
    ) -> BlobDetail:
        """단일 블롭의 전체 속성"""

    # -------------------------------------------------------------------------
    # Key Vault
    # -------------------------------------------------------------------------

    @abstractmethod
    def list_secrets(self, vault_url: str) -> list[Secret]:
        """시크릿 목록 (값 제외)"""

    @abstractmethod
    def list_vault_keys(self, vault_url: str) -> list[VaultKey]:
        """키 목록"""

    @abstractmethod
    def list_certificates(self, vault_url: str) -> list[Certificate]:
        """인증서 목록"""

    @abstractmethod
    def get_secret_value(self, vault_url: str, name: str) -> str:
        """시크릿 값 (명시적 요청 시에만 호출)"""

    @abstractmethod
    def get_vault_key_detail(self, vault_url: str, name: str) -> VaultKey:
        """키 상세"""

    @abstractmethod
    def get_certificate_detail(self, vault_url: str, name: str) -> Certificate:
        """인증서 상세"""

    # -------------------------------------------------------------------------
    # 사용자
    # -------------------------------------------------------------------------

    @abstractmethod
    def get_user_info(self) -> UserInfo:
        """현재 사용자 정보 (표시 이름, 이메일, 테넌트 ID)"""

    def close(self) -> None:  # noqa: B027
        """리소스를 정리합니다.

        기본 구현은 아무것도 하지 않습니다.
        """


def call_provider(operation: str, func: Callable[..., T], *args, **kwargs) -> T:
    """Provider 호출을 FetchFailedError로 감싸서 실행

    Args:
        operation: 로그/에러 메시지용 작업 이름
        func: Provider 메서드
        *args, **kwargs: 메서드 인자

    Returns:
        Provider 반환값

    Raises:
        FetchFailedError: Provider가 어떤 예외든 던진 경우
    """
    try:
        return func(*args, **kwargs)
    except FetchFailedError:
        raise
    except AZCTError as e:
        logger.warning("%s 실패: %s", operation, e)
        raise FetchFailedError(operation, message=e.message, cause=e) from e
    except Exception as e:
        logger.warning("%s 실패: %s", operation, e)
        raise FetchFailedError(operation, cause=e) from e
