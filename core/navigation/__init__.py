"""
core/navigation - 화면 내비게이션

Classes:
    - NavigationState: 뷰 태그 + 선택 컨텍스트 상태 머신
    - Navigator: 조회 후 전이 오케스트레이터, ViewSnapshot 제공
"""

from .navigator import Navigator, ViewSnapshot, vault_url_for
from .state import BACK_TRANSITIONS, NavigationState, SelectionContext, ViewState
from .views import VAULT_ITEM_KINDS, MenuEntry, ViewSchema

__all__ = [
    "BACK_TRANSITIONS",
    "MenuEntry",
    "NavigationState",
    "Navigator",
    "SelectionContext",
    "VAULT_ITEM_KINDS",
    "ViewSchema",
    "ViewSnapshot",
    "ViewState",
    "vault_url_for",
]
