# tests/core/test_navigation_state.py
"""
core/navigation/state.py 단위 테스트

순방향/역방향 전이, 상세 보기 오버레이, 뷰별 역전이 테이블 테스트.
"""

import pytest

from core.navigation import BACK_TRANSITIONS, NavigationState, SelectionContext, ViewState


def _state_in_rg():
    state = NavigationState()
    state.navigate_to_resource_groups("sub-1", "Test")
    return state


# =============================================================================
# 초기 상태
# =============================================================================


class TestInitialState:
    """초기 상태 테스트"""

    def test_defaults(self):
        state = NavigationState()

        assert state.view is ViewState.SUBSCRIPTIONS
        assert state.context == SelectionContext()
        assert not state.showing_detail
        assert state.at_root

    def test_back_at_root_noop(self):
        """구독 목록에서 뒤로 가기는 변경 없음"""
        state = NavigationState()
        state.back()

        assert state.view is ViewState.SUBSCRIPTIONS
        assert state.context == SelectionContext()

    def test_every_view_has_back_transition(self):
        assert set(BACK_TRANSITIONS) == set(ViewState)


# =============================================================================
# 순방향 / 역방향 전이
# =============================================================================


class TestTransitions:
    """전이 체인 테스트"""

    def test_chain_back_to_summary(self):
        """구독 -> RG -> 타입 요약 -> 타입 목록 -> 뒤로 = 타입 요약 (구독 유지)"""
        state = NavigationState()
        state.navigate_to_resource_groups("sub-1", "Test")
        state.navigate_to_resource_types("rg1")
        state.navigate_to_resource_type("T1")
        state.back()

        assert state.view is ViewState.RESOURCE_TYPES_SUMMARY
        assert state.context.resource_group == "rg1"
        assert state.context.subscription_id == "sub-1"
        assert state.context.subscription_name == "Test"
        assert state.context.resource_type == ""

    def test_full_chain_to_root(self):
        state = NavigationState()
        state.navigate_to_resource_groups("sub-1", "Test")
        state.navigate_to_resource_types("rg1")
        state.navigate_to_resource_type("T1")

        state.back()
        state.back()
        assert state.view is ViewState.RESOURCE_GROUPS
        assert state.context.subscription_id == "sub-1"

        state.back()
        assert state.view is ViewState.SUBSCRIPTIONS
        assert state.context == SelectionContext()

    @pytest.mark.parametrize("forward", ["navigate_to_resource_types", "navigate_to_resources"])
    def test_forward_then_back_round_trip(self, forward):
        """RG 뷰에서 앞으로 갔다 돌아오면 같은 컨텍스트"""
        state = _state_in_rg()
        before = state.copy()

        getattr(state, forward)("rg1")
        state.back()

        assert state == before

    def test_resource_groups_resets_context(self):
        """다른 구독 선택 시 이전 선택 초기화"""
        state = _state_in_rg()
        state.navigate_to_resource_types("rg1")
        state.navigate_to_resource_groups("sub-2", "Dev")

        assert state.context == SelectionContext(subscription_id="sub-2", subscription_name="Dev")

    def test_type_filtered_without_group_back_to_groups(self):
        """리소스 그룹 없이 연 타입 목록은 RG 뷰로"""
        state = _state_in_rg()
        state.navigate_to_resource_type("T1")
        state.back()

        assert state.view is ViewState.RESOURCE_GROUPS

    def test_type_filtered_without_subscription_back_to_root(self):
        state = NavigationState()
        state.navigate_to_resource_type("T1")
        state.back()

        assert state.view is ViewState.SUBSCRIPTIONS

    def test_copy_is_independent(self):
        state = _state_in_rg()
        copied = state.copy()
        copied.navigate_to_resource_types("rg1")

        assert state.view is ViewState.RESOURCE_GROUPS
        assert state.context.resource_group == ""


class TestStorageTransitions:
    """스토리지 탐색 전이 테스트"""

    def _in_blobs(self):
        state = _state_in_rg()
        state.navigate_to_resource_type("Microsoft.Storage/storageAccounts")
        state.navigate_to_storage_explorer("stprod", "rg-prod")
        state.navigate_to_blobs("logs")
        return state

    def test_storage_resource_group(self):
        """스토리지 계정의 리소스 그룹 기억 (없으면 현재 RG)"""
        state = self._in_blobs()
        assert state.context.storage_resource_group == "rg-prod"

        other = _state_in_rg()
        other.navigate_to_resources("rg1")
        other.navigate_to_storage_explorer("st1")
        assert other.context.storage_resource_group == "rg1"

    def test_folder_back_to_parent(self):
        """하위 폴더에서 뒤로 가기는 상위 폴더 (뷰 유지)"""
        state = self._in_blobs()
        state.navigate_into_blob_folder("a/")
        state.navigate_into_blob_folder("a/b/")

        state.back()
        assert state.view is ViewState.BLOB_BROWSER
        assert state.context.prefix == "a/"

        state.back()
        assert state.view is ViewState.BLOB_BROWSER
        assert state.context.prefix == ""

    def test_root_back_to_explorer(self):
        """루트 prefix에서 뒤로 가기는 스토리지 탐색기"""
        state = self._in_blobs()
        state.back()

        assert state.view is ViewState.STORAGE_EXPLORER
        assert state.context.container == ""
        assert state.context.storage_account == "stprod"

    def test_explorer_back_to_type_list(self):
        state = self._in_blobs()
        state.back()
        state.back()

        assert state.view is ViewState.RESOURCE_TYPE_FILTERED
        assert state.context.resource_type == "Microsoft.Storage/storageAccounts"
        assert state.context.storage_account == ""

    def test_explorer_back_to_resource_list(self):
        state = _state_in_rg()
        state.navigate_to_resources("rg1")
        state.navigate_to_storage_explorer("st1")
        state.back()

        assert state.view is ViewState.RESOURCE_LIST
        assert state.context.resource_group == "rg1"


class TestVaultTransitions:
    """Key Vault 탐색 전이 테스트"""

    def test_vault_items_back_to_explorer(self):
        state = _state_in_rg()
        state.navigate_to_resources("rg1")
        state.navigate_to_vault_explorer("kv-prod", "https://kv-prod.vault.azure.net/")

        for forward in ("navigate_to_vault_secrets", "navigate_to_vault_keys", "navigate_to_vault_certificates"):
            getattr(state, forward)()
            state.back()
            assert state.view is ViewState.VAULT_EXPLORER
            assert state.context.vault_name == "kv-prod"

    def test_vault_clears_storage(self):
        state = _state_in_rg()
        state.navigate_to_storage_explorer("st1", "rg1")
        state.navigate_to_vault_explorer("kv", "https://kv.vault.azure.net/")

        assert state.context.storage_account == ""
        assert state.context.vault_url == "https://kv.vault.azure.net/"

    def test_is_vault_items(self):
        assert ViewState.VAULT_KEYS.is_vault_items
        assert not ViewState.VAULT_EXPLORER.is_vault_items


class TestMenu:
    """메뉴 전이 테스트"""

    def test_menu_back_always_subscriptions(self):
        """메뉴에서 뒤로 가기는 연 위치와 관계없이 구독 목록"""
        state = _state_in_rg()
        state.navigate_to_resource_types("rg1")
        state.navigate_to_menu()
        state.back()

        assert state.view is ViewState.SUBSCRIPTIONS
        assert state.context == SelectionContext()

    def test_menu_keeps_context_for_selection(self):
        """메뉴 진입 시 선택 컨텍스트 유지"""
        state = _state_in_rg()
        state.navigate_to_menu()
        state.navigate_to_resource_type("T1")

        assert state.context.subscription_id == "sub-1"


# =============================================================================
# 상세 보기 오버레이
# =============================================================================


class TestDetailOverlay:
    """상세 보기 오버레이 테스트"""

    def test_overlay_keeps_view(self):
        state = _state_in_rg()
        state.show_detail()

        assert state.showing_detail
        assert state.view is ViewState.RESOURCE_GROUPS
        assert not state.at_root

    def test_back_closes_overlay_only(self):
        """오버레이가 열려 있으면 뒤로 가기는 오버레이만 닫음"""
        state = _state_in_rg()
        state.show_detail()
        state.back()

        assert not state.showing_detail
        assert state.view is ViewState.RESOURCE_GROUPS

    def test_forward_transition_clears_overlay(self):
        state = _state_in_rg()
        state.show_detail()
        state.navigate_to_resource_types("rg1")

        assert not state.showing_detail

    def test_select_blob(self):
        state = _state_in_rg()
        state.navigate_to_storage_explorer("st1", "rg1")
        state.navigate_to_blobs("logs")
        state.select_blob("a.txt")
        state.show_detail()

        assert state.context.selected_blob == "a.txt"
        state.back()
        assert state.context.selected_blob == "a.txt"
        assert state.view is ViewState.BLOB_BROWSER
