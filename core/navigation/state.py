"""
core/navigation/state.py - 화면 내비게이션 상태 머신

현재 뷰 태그 + 선택 컨텍스트 + 상세 보기 오버레이 플래그로 구성된 단일 상태 값입니다.

뒤로 가기는 스택 pop이 아니라 뷰별 전용 역전이(navigate_back_from_*)로 처리합니다.
역전이는 기억된 컨텍스트(리소스 그룹 이름, prefix 등)로부터 부모 뷰를 다시 계산합니다.

예외:
    메뉴 뷰의 역전이는 메뉴를 연 뷰와 관계없이 항상 구독 목록으로 돌아갑니다.

Usage:
    state = NavigationState()
    state.navigate_to_resource_groups("sub-1", "Production")
    state.navigate_to_resource_types("rg1")
    state.back()  # ResourceGroups (sub-1 유지)
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from enum import Enum

from core.config import settings
from core.storage import parent_prefix

logger = logging.getLogger(__name__)


class ViewState(str, Enum):
    """뷰 태그"""

    SUBSCRIPTIONS = "subscriptions"
    RESOURCE_GROUPS = "resource_groups"
    RESOURCE_TYPES_SUMMARY = "resource_types_summary"
    RESOURCE_LIST = "resource_list"
    RESOURCE_TYPE_FILTERED = "resource_type_filtered"
    STORAGE_EXPLORER = "storage_explorer"
    BLOB_BROWSER = "blob_browser"
    VAULT_EXPLORER = "vault_explorer"
    VAULT_SECRETS = "vault_secrets"
    VAULT_KEYS = "vault_keys"
    VAULT_CERTIFICATES = "vault_certificates"
    MENU = "menu"

    @property
    def is_vault_items(self) -> bool:
        return self in (ViewState.VAULT_SECRETS, ViewState.VAULT_KEYS, ViewState.VAULT_CERTIFICATES)


@dataclass
class SelectionContext:
    """현재 경로의 선택 값

    Attributes:
        subscription_id / subscription_name: 선택한 구독
        resource_group: 탐색 중인 리소스 그룹 (메뉴에서 구독 전체 조회 시 빈 값)
        resource_type: 타입 필터 뷰의 리소스 타입
        storage_account: 탐색 중인 스토리지 계정
        storage_resource_group: 스토리지 계정이 속한 리소스 그룹
        container: 탐색 중인 컨테이너
        prefix: 블롭 브라우저의 현재 폴더 prefix ("" 또는 구분자로 끝남)
        selected_blob: 상세 보기 대상 블롭
        vault_name / vault_url: 탐색 중인 Key Vault
    """

    subscription_id: str = ""
    subscription_name: str = ""
    resource_group: str = ""
    resource_type: str = ""
    storage_account: str = ""
    storage_resource_group: str = ""
    container: str = ""
    prefix: str = ""
    selected_blob: str = ""
    vault_name: str = ""
    vault_url: str = ""

    def clear_storage(self) -> None:
        self.storage_account = ""
        self.storage_resource_group = ""
        self.clear_container()

    def clear_container(self) -> None:
        self.container = ""
        self.prefix = ""
        self.selected_blob = ""

    def clear_vault(self) -> None:
        self.vault_name = ""
        self.vault_url = ""

    def clear_explorers(self) -> None:
        self.clear_storage()
        self.clear_vault()


@dataclass
class NavigationState:
    """내비게이션 상태 (단일 소유 값)

    초기 상태: 구독 목록, 빈 컨텍스트, 오버레이 없음.
    상태 메서드는 예외를 던지지 않습니다. 정의되지 않은 요청 거절은 Navigator 몫입니다.
    """

    view: ViewState = ViewState.SUBSCRIPTIONS
    context: SelectionContext = field(default_factory=SelectionContext)
    showing_detail: bool = False
    delimiter: str = settings.DEFAULT_DELIMITER

    def copy(self) -> NavigationState:
        return copy.deepcopy(self)

    def _enter(self, view: ViewState) -> None:
        logger.debug("뷰 전환: %s -> %s", self.view.value, view.value)
        self.view = view
        self.showing_detail = False

    # =========================================================================
    # 순방향 전이
    # =========================================================================

    def navigate_to_subscriptions(self) -> None:
        self._enter(ViewState.SUBSCRIPTIONS)
        self.context = SelectionContext()

    def navigate_to_resource_groups(self, subscription_id: str, subscription_name: str) -> None:
        self._enter(ViewState.RESOURCE_GROUPS)
        self.context = SelectionContext(subscription_id=subscription_id, subscription_name=subscription_name)

    def navigate_to_resource_types(self, resource_group: str) -> None:
        self._enter(ViewState.RESOURCE_TYPES_SUMMARY)
        self.context.resource_group = resource_group
        self.context.resource_type = ""
        self.context.clear_explorers()

    def navigate_to_resources(self, resource_group: str) -> None:
        self._enter(ViewState.RESOURCE_LIST)
        self.context.resource_group = resource_group
        self.context.resource_type = ""
        self.context.clear_explorers()

    def navigate_to_resource_type(self, resource_type: str) -> None:
        self._enter(ViewState.RESOURCE_TYPE_FILTERED)
        self.context.resource_type = resource_type
        self.context.clear_explorers()

    def navigate_to_storage_explorer(self, account: str, resource_group: str = "") -> None:
        self._enter(ViewState.STORAGE_EXPLORER)
        self.context.clear_vault()
        self.context.storage_account = account
        self.context.storage_resource_group = resource_group or self.context.resource_group
        self.context.clear_container()

    def navigate_to_blobs(self, container: str) -> None:
        self._enter(ViewState.BLOB_BROWSER)
        self.context.container = container
        self.context.prefix = ""
        self.context.selected_blob = ""

    def navigate_into_blob_folder(self, prefix: str) -> None:
        """폴더 진입 (prefix는 구분자로 끝나는 전체 경로)"""
        self._enter(ViewState.BLOB_BROWSER)
        self.context.prefix = prefix
        self.context.selected_blob = ""

    def select_blob(self, name: str) -> None:
        self.context.selected_blob = name

    def navigate_to_vault_explorer(self, vault_name: str, vault_url: str) -> None:
        self._enter(ViewState.VAULT_EXPLORER)
        self.context.clear_storage()
        self.context.vault_name = vault_name
        self.context.vault_url = vault_url

    def navigate_to_vault_secrets(self) -> None:
        self._enter(ViewState.VAULT_SECRETS)

    def navigate_to_vault_keys(self) -> None:
        self._enter(ViewState.VAULT_KEYS)

    def navigate_to_vault_certificates(self) -> None:
        self._enter(ViewState.VAULT_CERTIFICATES)

    def navigate_to_menu(self) -> None:
        self._enter(ViewState.MENU)

    # =========================================================================
    # 상세 보기 오버레이 (뷰 태그는 바뀌지 않음)
    # =========================================================================

    def show_detail(self) -> None:
        self.showing_detail = True

    def navigate_back_from_detail(self) -> None:
        self.showing_detail = False

    # =========================================================================
    # 역전이
    # =========================================================================

    def navigate_back_from_subscriptions(self) -> None:
        """최상위 뷰: 변경 없음"""

    def navigate_back_from_resource_groups(self) -> None:
        self.navigate_to_subscriptions()

    def navigate_back_from_resource_types_summary(self) -> None:
        self.navigate_to_resource_groups(self.context.subscription_id, self.context.subscription_name)

    def navigate_back_from_resource_list(self) -> None:
        self.navigate_to_resource_groups(self.context.subscription_id, self.context.subscription_name)

    def navigate_back_from_resource_type_filtered(self) -> None:
        if self.context.resource_group:
            self.navigate_to_resource_types(self.context.resource_group)
        elif self.context.subscription_id:
            self.navigate_to_resource_groups(self.context.subscription_id, self.context.subscription_name)
        else:
            self.navigate_to_subscriptions()

    def _back_to_resource_listing(self) -> None:
        if self.context.resource_type:
            self.navigate_to_resource_type(self.context.resource_type)
        elif self.context.resource_group:
            self.navigate_to_resources(self.context.resource_group)
        elif self.context.subscription_id:
            self.navigate_to_resource_groups(self.context.subscription_id, self.context.subscription_name)
        else:
            self.navigate_to_subscriptions()

    def navigate_back_from_storage_explorer(self) -> None:
        self._back_to_resource_listing()

    def navigate_back_from_blob_browser(self) -> None:
        """하위 폴더면 상위 폴더로, 루트면 스토리지 탐색기로"""
        if self.context.prefix:
            self.context.prefix = parent_prefix(self.context.prefix, self.delimiter)
            self.context.selected_blob = ""
            self.showing_detail = False
            logger.debug("상위 폴더: '%s'", self.context.prefix)
            return
        self._enter(ViewState.STORAGE_EXPLORER)
        self.context.clear_container()

    def navigate_back_from_vault_explorer(self) -> None:
        self._back_to_resource_listing()

    def navigate_back_from_vault_items(self) -> None:
        self._enter(ViewState.VAULT_EXPLORER)

    def navigate_back_from_menu(self) -> None:
        """메뉴를 연 뷰와 관계없이 구독 목록으로"""
        self.navigate_to_subscriptions()

    def back(self) -> None:
        """현재 뷰의 역전이 실행 (오버레이가 열려 있으면 오버레이만 닫음)"""
        if self.showing_detail:
            self.navigate_back_from_detail()
            return
        getattr(self, BACK_TRANSITIONS[self.view])()

    @property
    def at_root(self) -> bool:
        return self.view is ViewState.SUBSCRIPTIONS and not self.showing_detail


# 뷰 -> 역전이 메서드 이름
BACK_TRANSITIONS: dict[ViewState, str] = {
    ViewState.SUBSCRIPTIONS: "navigate_back_from_subscriptions",
    ViewState.RESOURCE_GROUPS: "navigate_back_from_resource_groups",
    ViewState.RESOURCE_TYPES_SUMMARY: "navigate_back_from_resource_types_summary",
    ViewState.RESOURCE_LIST: "navigate_back_from_resource_list",
    ViewState.RESOURCE_TYPE_FILTERED: "navigate_back_from_resource_type_filtered",
    ViewState.STORAGE_EXPLORER: "navigate_back_from_storage_explorer",
    ViewState.BLOB_BROWSER: "navigate_back_from_blob_browser",
    ViewState.VAULT_EXPLORER: "navigate_back_from_vault_explorer",
    ViewState.VAULT_SECRETS: "navigate_back_from_vault_items",
    ViewState.VAULT_KEYS: "navigate_back_from_vault_items",
    ViewState.VAULT_CERTIFICATES: "navigate_back_from_vault_items",
    ViewState.MENU: "navigate_back_from_menu",
}
