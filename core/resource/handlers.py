"""
core/resource/handlers.py - 기본 제공 리소스 핸들러

    - DefaultHandler (""): 등록되지 않은 모든 타입의 대체 핸들러
    - StorageAccountHandler: 스토리지 계정 (컨테이너/블롭 탐색)
    - KeyVaultHandler: Key Vault (시크릿/키/인증서 탐색)
"""

from __future__ import annotations

from core.config import settings

from .handler import Action, ResourceHandler, explore_action, show_details_action

EXPLORE_KEY = "e"


class DefaultHandler(ResourceHandler):
    """기본 핸들러 (빈 문자열 키로 등록)"""

    resource_type = ""
    display_name = "Resources"
    detail_title = "Resource Details"


class StorageAccountHandler(ResourceHandler):
    resource_type = settings.STORAGE_ACCOUNT_TYPE
    display_name = "Storage Accounts"
    detail_title = "Storage Account Details"

    def _build_actions(self) -> list[Action]:
        return [
            Action(EXPLORE_KEY, "Explore Storage", explore_action),
            Action(settings.DETAIL_KEY, "Details", show_details_action),
        ]

    def can_explore(self) -> bool:
        return True


class KeyVaultHandler(ResourceHandler):
    resource_type = settings.KEY_VAULT_TYPE
    display_name = "Key Vaults"
    detail_title = "Key Vault Details"

    def _build_actions(self) -> list[Action]:
        return [
            Action(EXPLORE_KEY, "Explore Key Vault", explore_action),
            Action(settings.DETAIL_KEY, "Details", show_details_action),
        ]

    def can_explore(self) -> bool:
        return True
