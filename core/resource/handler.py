"""
core/resource/handler.py - 리소스 타입 핸들러 기본 클래스

핸들러는 하나의 리소스 타입에 대한 표시/동작 정보를 묶은 불변 객체입니다.

    - columns(): 목록 컬럼 스키마
    - cell_value(): (리소스, 컬럼 인덱스) -> 표시 문자열
    - actions(): 키 바인딩 액션 목록
    - can_list_from_summary() / can_explore(): 능력 플래그
    - render_detail(): 상세 보기 텍스트

새 타입 지원 추가:
    class ContainerRegistryHandler(ResourceHandler):
        resource_type = "Microsoft.ContainerRegistry/registries"
        display_name = "Container Registries"
        detail_title = "Container Registry Details"

    registry.register(ContainerRegistryHandler())
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from core.config import settings
from core.inventory.types import Resource
from core.listing.columns import ColumnConfig

from .details import DetailBuilder

logger = logging.getLogger(__name__)


class ActionHost(Protocol):
    """액션 콜백이 호출하는 UI 측 진입점 (Navigator가 구현)"""

    def show_resource_detail(self, resource: Resource) -> None: ...

    def explore(self, resource: Resource) -> None: ...


@dataclass(frozen=True)
class ActionContext:
    """액션 실행 컨텍스트

    Attributes:
        subscription_id: 현재 구독 ID
        subscription_name: 현재 구독 이름
        resource_group: 현재 리소스 그룹 (없으면 빈 문자열)
        host: 액션을 처리할 UI 객체 (없으면 액션은 처리하지 않음)
    """

    subscription_id: str = ""
    subscription_name: str = ""
    resource_group: str = ""
    host: Any = None


ActionCallback = Callable[[Resource, ActionContext], bool]


@dataclass(frozen=True)
class Action:
    """키 바인딩 액션

    callback은 이벤트를 처리했으면 True를 반환합니다.
    """

    key: str
    label: str
    callback: ActionCallback

    def run(self, resource: Resource, context: ActionContext) -> bool:
        handled = self.callback(resource, context)
        logger.debug("액션 '%s' (%s): handled=%s", self.key, resource.name, handled)
        return handled


def show_details_action(resource: Resource, context: ActionContext) -> bool:
    """'d' 상세 보기"""
    if context.host is None:
        return False
    context.host.show_resource_detail(resource)
    return True


def explore_action(resource: Resource, context: ActionContext) -> bool:
    """'e' 탐색기 열기"""
    if context.host is None:
        return False
    context.host.explore(resource)
    return True


class ResourceHandler:
    """리소스 핸들러 기본 구현

    서브클래스는 클래스 속성(resource_type, display_name, detail_title)과
    필요한 경우 _build_actions(), can_explore()를 재정의합니다.
    """

    resource_type: str = ""
    display_name: str = "Resources"
    detail_title: str = "Resource Details"

    _COLUMNS: tuple[ColumnConfig, ...] = (
        ColumnConfig("Type"),
        ColumnConfig("Name"),
        ColumnConfig("Location"),
    )

    def __init__(self) -> None:
        self._actions: tuple[Action, ...] = tuple(self._build_actions())

    def _build_actions(self) -> list[Action]:
        return [Action(settings.DETAIL_KEY, "Details", show_details_action)]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(resource_type={self.resource_type!r})"

    # -------------------------------------------------------------------------
    # 목록
    # -------------------------------------------------------------------------

    def columns(self) -> tuple[ColumnConfig, ...]:
        return self._COLUMNS

    def cell_value(self, resource: Resource, index: int) -> str:
        """컬럼 값 (범위 밖 인덱스는 빈 문자열)"""
        if index == 0:
            return resource.short_type
        if index == 1:
            return resource.name
        if index == 2:
            return resource.location
        return ""

    # -------------------------------------------------------------------------
    # 액션 / 능력
    # -------------------------------------------------------------------------

    def actions(self) -> tuple[Action, ...]:
        return self._actions

    def find_action(self, key: str) -> Action | None:
        for action in self._actions:
            if action.key == key:
                return action
        return None

    def can_list_from_summary(self) -> bool:
        """타입 요약 뷰에서 이 타입의 목록으로 이동 가능한지"""
        return True

    def can_explore(self) -> bool:
        """전용 탐색기 뷰를 가지는지"""
        return False

    # -------------------------------------------------------------------------
    # 상세 보기
    # -------------------------------------------------------------------------

    def render_detail(self, resource: Resource, context: ActionContext) -> str:
        return (
            DetailBuilder(self.detail_title)
            .field("ID", resource.id)
            .field("Name", resource.name)
            .field("Type", resource.type)
            .field("Location", resource.location)
            .field("Resource Group", resource.resource_group)
            .field("Subscription ID", context.subscription_id)
            .mapping("Tags", resource.tags)
            .properties("Properties", resource.properties)
            .build()
        )
