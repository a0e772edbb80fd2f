"""
core/navigation/navigator.py - 내비게이션 오케스트레이터

NavigationState, FilterableList, ResourceRegistry, ResourceProvider를 묶어
UI가 호출하는 단일 진입점을 제공합니다.

전이 순서:
    1. 현재 상태를 복사해 목표 상태를 계산
    2. 목표 뷰의 데이터를 Provider에서 조회 (실패 시 FetchFailedError)
    3. 조회가 성공한 경우에만 상태/목록/컬럼을 한 번에 교체

따라서 조회 실패 시 상태, 목록, 컬럼은 그대로 유지됩니다.
코어는 화면을 그리지 않고 snapshot()으로 읽기 전용 스냅샷만 제공합니다.

Usage:
    from core.inventory import StaticProvider
    from core.navigation import Navigator

    nav = Navigator(StaticProvider.from_file("inventory.yaml"))
    nav.open_subscriptions()
    nav.select(0)          # 첫 번째 구독의 리소스 그룹
    snap = nav.snapshot()
    print(snap.title, snap.footer)
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from core.config import build_vault_url, settings
from core.exceptions import FetchFailedError, NavigationError
from core.inventory.provider import ResourceProvider, call_provider
from core.inventory.types import (
    Certificate,
    Container,
    DirectoryNode,
    Resource,
    ResourceGroup,
    ResourceTypeSummary,
    Secret,
    Subscription,
    UserInfo,
    VaultItemKind,
    VaultKey,
)
from core.listing import ColumnConfig, FilterableList
from core.resource import ActionContext, ResourceHandler, ResourceRegistry, create_default_registry
from core.resource.details import (
    render_blob_detail,
    render_certificate_detail,
    render_container_detail,
    render_resource_group_detail,
    render_secret_detail,
    render_subscription_detail,
    render_vault_key_detail,
)
from core.storage import project

from . import views
from .state import NavigationState, SelectionContext, ViewState
from .views import MenuEntry, ViewSchema

logger = logging.getLogger(__name__)

RESOURCE_VIEWS = (ViewState.RESOURCE_LIST, ViewState.RESOURCE_TYPE_FILTERED)


@dataclass(frozen=True)
class ViewSnapshot:
    """렌더링용 읽기 전용 스냅샷"""

    view: ViewState
    context: SelectionContext
    title: str
    breadcrumb: tuple[str, ...]
    columns: tuple[ColumnConfig, ...]
    rows: tuple[tuple[str, ...], ...]
    total_count: int
    filtered_count: int
    filter_text: str
    actions: tuple[tuple[str, str], ...]
    showing_detail: bool = False
    detail: str | None = None

    @property
    def has_filter(self) -> bool:
        return bool(self.filter_text)

    @property
    def footer(self) -> str:
        """항목 수 표시 ("Items: Showing X of Y" 또는 "Items: N")"""
        if self.has_filter:
            return f"Items: Showing {self.filtered_count} of {self.total_count}"
        return f"Items: {self.total_count}"


class Navigator:
    """화면 전이 + 데이터 조회 오케스트레이터

    Args:
        provider: 리소스 Provider
        registry: 핸들러 레지스트리 (None이면 기본 레지스트리)
        delimiter: 블롭 키 구분자
    """

    def __init__(
        self,
        provider: ResourceProvider,
        registry: ResourceRegistry | None = None,
        delimiter: str = settings.DEFAULT_DELIMITER,
    ):
        self._provider = provider
        self._registry = registry or create_default_registry()
        self._state = NavigationState(delimiter=delimiter)
        self._list: FilterableList[Any] = FilterableList()
        self._detail: str | None = None
        self._type_display_name = ""

        self._loaders: dict[ViewState, Callable[[NavigationState], tuple[list[Any], ViewSchema]]] = {
            ViewState.SUBSCRIPTIONS: self._load_subscriptions,
            ViewState.RESOURCE_GROUPS: self._load_resource_groups,
            ViewState.RESOURCE_TYPES_SUMMARY: self._load_resource_types,
            ViewState.RESOURCE_LIST: self._load_resources,
            ViewState.RESOURCE_TYPE_FILTERED: self._load_resource_type,
            ViewState.STORAGE_EXPLORER: self._load_containers,
            ViewState.BLOB_BROWSER: self._load_blobs,
            ViewState.VAULT_EXPLORER: self._load_vault_explorer,
            ViewState.VAULT_SECRETS: self._load_secrets,
            ViewState.VAULT_KEYS: self._load_vault_keys,
            ViewState.VAULT_CERTIFICATES: self._load_certificates,
            ViewState.MENU: self._load_menu,
        }

    # =========================================================================
    # 속성
    # =========================================================================

    @property
    def state(self) -> NavigationState:
        """현재 상태의 복사본"""
        return self._state.copy()

    @property
    def view(self) -> ViewState:
        return self._state.view

    @property
    def registry(self) -> ResourceRegistry:
        return self._registry

    @property
    def listing(self) -> FilterableList[Any]:
        return self._list

    @property
    def showing_detail(self) -> bool:
        return self._state.showing_detail

    # =========================================================================
    # 조회 후 전이
    # =========================================================================

    def _fetch(self, operation: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        return call_provider(operation, func, *args, **kwargs)

    def _activate(self, target: NavigationState) -> None:
        """목표 상태의 데이터를 조회한 뒤 커밋 (조회 실패 시 아무것도 바꾸지 않음)"""
        records, schema = self._loaders[target.view](target)
        type_display_name = ""
        if target.view is ViewState.RESOURCE_TYPE_FILTERED:
            type_display_name = self._registry.display_name_for(target.context.resource_type)

        self._state = target
        self._list.configure(schema.columns, schema.cell_value)
        self._list.load(records)
        self._detail = None
        self._type_display_name = type_display_name
        logger.debug("뷰 활성화: %s (%d건)", target.view.value, len(records))

    def _transition(self, apply: Callable[[NavigationState], None]) -> None:
        target = self._state.copy()
        apply(target)
        self._activate(target)

    def refresh(self) -> None:
        """현재 뷰 다시 조회 (필터 초기화)"""
        self._transition(lambda s: s.navigate_back_from_detail())

    # =========================================================================
    # 뷰 데이터 로더
    # =========================================================================

    def _load_subscriptions(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        subs = self._fetch("list_subscriptions", self._provider.list_subscriptions)
        return subs, views.SUBSCRIPTIONS_SCHEMA

    def _load_resource_groups(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        sub_id = state.context.subscription_id
        groups = self._fetch("list_resource_groups", self._provider.list_resource_groups, sub_id)
        return groups, views.resource_group_schema(sub_id)

    def _load_resource_types(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        ctx = state.context
        counts = self._fetch(
            "get_resource_type_counts",
            self._provider.get_resource_type_counts,
            ctx.subscription_id,
            ctx.resource_group,
        )
        return counts, views.RESOURCE_TYPES_SCHEMA

    def _load_resources(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        ctx = state.context
        resources = self._fetch(
            "list_resources",
            self._provider.list_resources,
            ctx.subscription_id,
            resource_group=ctx.resource_group,
        )
        return resources, views.handler_schema(self._registry.lookup_or_default(""))

    def _load_resource_type(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        ctx = state.context
        if not ctx.subscription_id:
            raise NavigationError(state.view.value, f"list {ctx.resource_type} without subscription")
        resources = self._fetch(
            "list_resources",
            self._provider.list_resources,
            ctx.subscription_id,
            resource_group=ctx.resource_group or None,
            resource_type=ctx.resource_type,
        )
        return resources, views.handler_schema(self._registry.lookup_or_default(ctx.resource_type))

    def _load_containers(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        ctx = state.context
        containers = self._fetch(
            "list_containers",
            self._provider.list_containers,
            ctx.subscription_id,
            ctx.storage_resource_group,
            ctx.storage_account,
        )
        return containers, views.CONTAINERS_SCHEMA

    def _load_blobs(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        ctx = state.context
        entries = self._fetch(
            "list_keys",
            self._provider.list_keys,
            ctx.subscription_id,
            ctx.storage_resource_group,
            ctx.storage_account,
            ctx.container,
            prefix=ctx.prefix,
        )
        nodes = project(entries, ctx.prefix, state.delimiter)
        return nodes, views.BLOBS_SCHEMA

    def _load_vault_explorer(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        return list(views.VAULT_ITEM_KINDS), views.VAULT_EXPLORER_SCHEMA

    def _load_secrets(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        secrets = self._fetch("list_secrets", self._provider.list_secrets, state.context.vault_url)
        return secrets, views.SECRETS_SCHEMA

    def _load_vault_keys(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        keys = self._fetch("list_vault_keys", self._provider.list_vault_keys, state.context.vault_url)
        return keys, views.KEYS_SCHEMA

    def _load_certificates(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        certs = self._fetch("list_certificates", self._provider.list_certificates, state.context.vault_url)
        return certs, views.CERTIFICATES_SCHEMA

    def _load_menu(self, state: NavigationState) -> tuple[list[Any], ViewSchema]:
        entries = [
            MenuEntry(resource_type, self._registry.display_name_for(resource_type))
            for resource_type in self._registry.supported_resource_types()
        ]
        return entries, views.MENU_SCHEMA

    # =========================================================================
    # 순방향 전이
    # =========================================================================

    def open_subscriptions(self) -> None:
        self._transition(lambda s: s.navigate_to_subscriptions())

    def open_resource_groups(self, subscription_id: str, subscription_name: str) -> None:
        self._transition(lambda s: s.navigate_to_resource_groups(subscription_id, subscription_name))

    def open_resource_types(self, resource_group: str) -> None:
        self._require_subscription("open_resource_types")
        self._transition(lambda s: s.navigate_to_resource_types(resource_group))

    def open_resources(self, resource_group: str) -> None:
        self._require_subscription("open_resources")
        self._transition(lambda s: s.navigate_to_resources(resource_group))

    def open_resource_type(self, resource_type: str) -> None:
        self._transition(lambda s: s.navigate_to_resource_type(resource_type))

    def explore(self, resource: Resource) -> None:
        """탐색 가능한 리소스의 전용 탐색기 열기"""
        handler = self._registry.lookup_or_default(resource.type)
        if not handler.can_explore():
            raise NavigationError(self._state.view.value, f"explore {resource.type}")
        if resource.type == settings.STORAGE_ACCOUNT_TYPE:
            self.open_storage_explorer(resource.name, resource.resource_group)
        elif resource.type == settings.KEY_VAULT_TYPE:
            self.open_vault(resource.name, vault_url_for(resource))
        else:
            raise NavigationError(self._state.view.value, f"explore {resource.type}")

    def open_storage_explorer(self, account: str, resource_group: str = "") -> None:
        self._require_subscription("open_storage_explorer")
        self._transition(lambda s: s.navigate_to_storage_explorer(account, resource_group))

    def open_container(self, container: str) -> None:
        if self._state.view is not ViewState.STORAGE_EXPLORER:
            raise NavigationError(self._state.view.value, "open_container")
        self._transition(lambda s: s.navigate_to_blobs(container))

    def open_folder(self, prefix: str) -> None:
        if self._state.view is not ViewState.BLOB_BROWSER:
            raise NavigationError(self._state.view.value, "open_folder")
        self._transition(lambda s: s.navigate_into_blob_folder(prefix))

    def open_vault(self, vault_name: str, vault_url: str = "") -> None:
        url = vault_url or build_vault_url(vault_name)
        self._transition(lambda s: s.navigate_to_vault_explorer(vault_name, url))

    def open_vault_items(self, kind: str) -> None:
        """Key Vault 항목 종류(secrets/keys/certificates) 목록 열기"""
        if not self._state.context.vault_url:
            raise NavigationError(self._state.view.value, f"open_vault_items {kind}")
        target_view = views.VAULT_KIND_VIEWS.get(kind)
        if target_view is None:
            raise NavigationError(self._state.view.value, f"open_vault_items {kind}")
        transitions = {
            ViewState.VAULT_SECRETS: NavigationState.navigate_to_vault_secrets,
            ViewState.VAULT_KEYS: NavigationState.navigate_to_vault_keys,
            ViewState.VAULT_CERTIFICATES: NavigationState.navigate_to_vault_certificates,
        }
        self._transition(transitions[target_view])

    def open_menu(self) -> None:
        if self._state.showing_detail:
            return
        self._transition(lambda s: s.navigate_to_menu())

    def _require_subscription(self, request: str) -> None:
        if not self._state.context.subscription_id:
            raise NavigationError(self._state.view.value, request)

    # =========================================================================
    # 선택 (Enter)
    # =========================================================================

    def record_at(self, row: int) -> Any:
        """표시 행의 레코드 (범위 밖이면 NavigationError)"""
        record = self._list.record_at(row)
        if record is None:
            raise NavigationError(self._state.view.value, f"row {row}")
        return record

    def select(self, row: int) -> None:
        """현재 뷰에서 행 선택"""
        if self._state.showing_detail:
            return
        record = self.record_at(row)
        view = self._state.view

        if isinstance(record, Subscription):
            self.open_resource_groups(record.id, record.label)
        elif isinstance(record, ResourceGroup):
            self.open_resource_types(record.name)
        elif isinstance(record, ResourceTypeSummary):
            handler = self._registry.lookup_or_default(record.type)
            if not handler.can_list_from_summary():
                raise NavigationError(view.value, f"list {record.type}")
            self.open_resource_type(record.type)
        elif isinstance(record, Resource):
            if self._registry.lookup_or_default(record.type).can_explore():
                self.explore(record)
            else:
                self.show_resource_detail(record)
        elif isinstance(record, Container):
            self.open_container(record.name)
        elif isinstance(record, DirectoryNode):
            if record.is_directory:
                self.open_folder(record.key)
            else:
                self.show_detail(row)
        elif isinstance(record, VaultItemKind):
            self.open_vault_items(record.kind)
        elif isinstance(record, (Secret, VaultKey, Certificate)):
            self.show_detail(row)
        elif isinstance(record, MenuEntry):
            self.open_resource_type(record.resource_type)
        else:
            raise NavigationError(view.value, f"select {type(record).__name__}")

    # =========================================================================
    # 상세 보기 / 액션
    # =========================================================================

    def action_context(self) -> ActionContext:
        ctx = self._state.context
        return ActionContext(
            subscription_id=ctx.subscription_id,
            subscription_name=ctx.subscription_name,
            resource_group=ctx.resource_group,
            host=self,
        )

    def _open_detail(self, text: str) -> None:
        self._detail = text
        self._state.show_detail()

    def show_resource_detail(self, resource: Resource) -> None:
        if self._state.showing_detail:
            return
        handler = self._registry.lookup_or_default(resource.type)
        self._open_detail(handler.render_detail(resource, self.action_context()))

    def show_detail(self, row: int) -> None:
        """행의 상세 보기 오버레이 열기 (조회가 필요한 경우 실패 시 오버레이는 닫힌 채 유지)"""
        if self._state.showing_detail:
            return
        record = self.record_at(row)
        ctx = self._state.context
        view = self._state.view

        if isinstance(record, Subscription):
            text = render_subscription_detail(record)
        elif isinstance(record, ResourceGroup):
            text = render_resource_group_detail(record, ctx.subscription_id)
        elif isinstance(record, Resource):
            handler = self._registry.lookup_or_default(record.type)
            text = handler.render_detail(record, self.action_context())
        elif isinstance(record, Container):
            text = render_container_detail(record, ctx.storage_account)
        elif isinstance(record, DirectoryNode) and not record.is_directory:
            blob = self._fetch(
                "get_blob_detail",
                self._provider.get_blob_detail,
                ctx.subscription_id,
                ctx.storage_resource_group,
                ctx.storage_account,
                ctx.container,
                record.key,
            )
            self._state.select_blob(record.key)
            text = render_blob_detail(blob, ctx.storage_account, ctx.container)
        elif isinstance(record, Secret):
            text = render_secret_detail(record, ctx.vault_name)
        elif isinstance(record, VaultKey):
            key = self._fetch("get_vault_key_detail", self._provider.get_vault_key_detail, ctx.vault_url, record.name)
            text = render_vault_key_detail(key, ctx.vault_name)
        elif isinstance(record, Certificate):
            cert = self._fetch(
                "get_certificate_detail", self._provider.get_certificate_detail, ctx.vault_url, record.name
            )
            text = render_certificate_detail(cert, ctx.vault_name)
        else:
            raise NavigationError(view.value, f"detail {type(record).__name__}")

        self._open_detail(text)

    def run_action(self, row: int, key: str) -> bool:
        """리소스 행에 핸들러 액션 실행

        Returns:
            액션이 이벤트를 처리했는지 여부
        """
        if self._state.view not in RESOURCE_VIEWS:
            raise NavigationError(self._state.view.value, f"action {key}")
        if self._state.showing_detail:
            return False
        record = self.record_at(row)
        handler = self._registry.lookup_or_default(record.type)
        action = handler.find_action(key)
        if action is None:
            raise NavigationError(self._state.view.value, f"action {key}")
        return action.run(record, self.action_context())

    def reveal_secret(self, row: int) -> str:
        """시크릿 값 조회 (명시적 요청 전용, 목록/상세에는 포함되지 않음)"""
        if self._state.view is not ViewState.VAULT_SECRETS:
            raise NavigationError(self._state.view.value, "reveal_secret")
        secret = self.record_at(row)
        logger.info("시크릿 값 조회: %s/%s", self._state.context.vault_name, secret.name)
        return self._fetch(
            "get_secret_value", self._provider.get_secret_value, self._state.context.vault_url, secret.name
        )

    # =========================================================================
    # 뒤로 가기
    # =========================================================================

    def back(self) -> None:
        """현재 뷰의 역전이 (오버레이가 열려 있으면 오버레이만 닫음)"""
        if self._state.showing_detail:
            self._state.navigate_back_from_detail()
            self._detail = None
            return
        if self._state.view is ViewState.SUBSCRIPTIONS:
            return
        self._transition(lambda s: s.back())

    # =========================================================================
    # 필터
    # =========================================================================

    def set_filter(self, text: str) -> None:
        if self._state.showing_detail:
            return
        self._list.set_filter(text)

    def clear_filter(self) -> None:
        if self._state.showing_detail:
            return
        self._list.clear_filter()

    # =========================================================================
    # 스냅샷
    # =========================================================================

    def current_handler(self) -> ResourceHandler | None:
        """리소스 목록 뷰의 핸들러 (그 외 뷰는 None)"""
        if self._state.view is ViewState.RESOURCE_TYPE_FILTERED:
            return self._registry.lookup_or_default(self._state.context.resource_type)
        if self._state.view is ViewState.RESOURCE_LIST:
            return self._registry.lookup_or_default("")
        return None

    def _actions(self) -> tuple[tuple[str, str], ...]:
        handler = self.current_handler()
        if handler is not None:
            return tuple((action.key, action.label) for action in handler.actions())
        return views.VIEW_ACTIONS.get(self._state.view, ())

    def snapshot(self) -> ViewSnapshot:
        state = self._state
        return ViewSnapshot(
            view=state.view,
            context=copy.copy(state.context),
            title=views.view_title(state, self._type_display_name),
            breadcrumb=views.breadcrumb(state),
            columns=self._list.columns,
            rows=tuple(tuple(row) for row in self._list.rows()),
            total_count=self._list.total_count(),
            filtered_count=self._list.filtered_count(),
            filter_text=self._list.filter_text,
            actions=self._actions(),
            showing_detail=state.showing_detail,
            detail=self._detail if state.showing_detail else None,
        )

    def user_info(self) -> UserInfo | None:
        """헤더용 사용자 정보 (조회 실패 시 None)"""
        try:
            return self._fetch("get_user_info", self._provider.get_user_info)
        except FetchFailedError as e:
            logger.warning("사용자 정보 조회 실패: %s", e)
            return None


def vault_url_for(resource: Resource) -> str:
    """Key Vault 리소스의 URL (vaultUri 속성, 없으면 이름으로 생성)"""
    uri = resource.properties.get("vaultUri")
    if isinstance(uri, str) and uri:
        return uri
    return build_vault_url(resource.name)
