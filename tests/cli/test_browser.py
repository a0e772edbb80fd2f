# tests/cli/test_browser.py
"""
cli/ui/browser.py 단위 테스트

StringIO 콘솔과 가짜 확인 함수로 명령 처리 루프를 검증합니다.
"""

import io

import pytest
from rich.console import Console

from cli.ui import Browser
from core.navigation import ViewState


class ConfirmStub:
    """확인 프롬프트 대체 (응답 고정 + 메시지 기록)"""

    def __init__(self, answer):
        self.answer = answer
        self.messages = []

    def __call__(self, message):
        self.messages.append(message)
        return self.answer


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def browser(navigator, output):
    console = Console(file=output, width=200, color_system=None)
    return Browser(navigator, console=console, confirm=ConfirmStub(True))


def _to_secrets(browser):
    """구독 -> rg-prod -> vaults -> kv-prod -> Secrets"""
    for command in ("1", "1", "2", "1", "1"):
        assert browser.handle(command)
    assert browser.navigator.view is ViewState.VAULT_SECRETS


# =============================================================================
# 명령 처리
# =============================================================================


class TestHandle:
    """handle() 명령 처리 테스트"""

    def test_quit(self, browser):
        assert browser.handle("q") is False
        assert browser.handle("Q") is False

    def test_empty_command(self, browser):
        assert browser.handle("   ") is True
        assert browser.navigator.view is ViewState.SUBSCRIPTIONS

    def test_select_row(self, browser):
        """번호는 1부터"""
        browser.handle("2")
        assert browser.navigator.state.context.subscription_id == "sub-2"

    def test_filter_and_clear(self, browser):
        browser.handle("1")
        browser.handle("/shared")
        assert browser.navigator.snapshot().filtered_count == 1

        browser.handle("/")
        assert browser.navigator.snapshot().filter_text == ""

    def test_back_and_menu(self, browser):
        browser.handle("1")
        browser.handle("b")
        assert browser.navigator.view is ViewState.SUBSCRIPTIONS

        browser.handle("m")
        assert browser.navigator.view is ViewState.MENU

    def test_detail_key(self, browser):
        browser.handle("d 1")
        snap = browser.navigator.snapshot()
        assert snap.showing_detail
        assert "Subscription Details" in snap.detail

    def test_all_resources_key(self, browser):
        """리소스 그룹 뷰에서 r N은 전체 리소스"""
        browser.handle("1")
        browser.handle("r 1")

        assert browser.navigator.view is ViewState.RESOURCE_LIST
        assert browser.navigator.state.context.resource_group == "rg-prod"

    def test_refresh(self, browser, provider):
        calls = provider.calls.count("list_subscriptions")
        browser.handle("r")
        assert provider.calls.count("list_subscriptions") == calls + 1

    def test_handler_action(self, browser):
        """리소스 목록 뷰의 KEY N은 핸들러 액션"""
        for command in ("1", "1", "1"):
            browser.handle(command)
        assert browser.navigator.view is ViewState.RESOURCE_TYPE_FILTERED

        browser.handle("e 1")
        assert browser.navigator.view is ViewState.STORAGE_EXPLORER

    def test_unknown_command(self, browser, output):
        assert browser.handle("zzz") is True
        assert "알 수 없는 명령: zzz" in output.getvalue()

    def test_invalid_row(self, browser, output):
        browser.handle("99")
        assert "이 화면에서는 사용할 수 없습니다" in output.getvalue()
        assert browser.navigator.view is ViewState.SUBSCRIPTIONS

    def test_fetch_failure_reported(self, browser, provider, output):
        provider.fail_on.add("list_resource_groups")

        assert browser.handle("1") is True
        assert "조회 실패" in output.getvalue()
        assert browser.navigator.view is ViewState.SUBSCRIPTIONS

    def test_missing_record_is_warning(self, browser, inventory_data, output):
        """목록 이후 사라진 리소스 그룹은 조회 실패가 아니라 경고"""
        assert browser.handle("1") is True
        inventory_data["subscriptions"][0]["resource_groups"].pop(0)

        assert browser.handle("1") is True
        text = output.getvalue()
        assert "! 찾을 수 없습니다" in text
        assert "조회 실패" not in text
        assert browser.navigator.view is ViewState.RESOURCE_GROUPS


# =============================================================================
# 시크릿 값 표시
# =============================================================================


class TestRevealSecret:
    """시크릿 값 확인 후 표시 테스트"""

    def test_confirmed(self, browser, output):
        _to_secrets(browser)
        browser.handle("v 1")

        assert browser.confirm.messages == [
            "시크릿 'db-password'의 값을 표시하시겠습니까? 민감한 정보가 화면에 표시됩니다."
        ]
        assert "s3cr3t" in output.getvalue()

    def test_declined(self, navigator, output):
        console = Console(file=output, width=200, color_system=None)
        browser = Browser(navigator, console=console, confirm=ConfirmStub(False))
        _to_secrets(browser)
        browser.handle("v 1")

        assert "s3cr3t" not in output.getvalue()
        assert "취소되었습니다" in output.getvalue()

    def test_reveal_only_in_secrets(self, browser, output):
        browser.handle("v 1")
        assert "알 수 없는 명령: v 1" in output.getvalue()


# =============================================================================
# 렌더링 / 루프
# =============================================================================


class TestRender:
    """render() 출력 테스트"""

    def test_table_and_footer(self, browser, output):
        browser.render()
        text = output.getvalue()

        assert "Subscriptions" in text
        assert "Production" in text
        assert "Items: 2" in text

    def test_filter_footer(self, browser, output):
        browser.handle("/dev")
        browser.render()
        text = output.getvalue()

        assert "Items: Showing 1 of 2" in text
        assert "필터: dev" in text

    def test_detail_overlay(self, browser, output):
        browser.handle("d 1")
        browser.render()
        text = output.getvalue()

        assert "Subscription Details" in text
        assert "Subscriptions > Production > Details" not in text
        assert "Subscriptions > Details" in text

    def test_empty_view(self, browser, output):
        browser.handle("2")
        browser.handle("1")
        browser.render()
        assert "항목이 없습니다" in output.getvalue()


class TestRun:
    """run() 루프 테스트"""

    def test_run_until_eof(self, browser, output, monkeypatch):
        commands = iter(["1", "b"])

        def fake_input(*args):
            try:
                return next(commands)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
        browser.run()
        text = output.getvalue()

        assert "Jane Doe" in text
        assert "Resource Groups - Production" in text
        assert "종료합니다" in text
        assert browser.navigator.view is ViewState.SUBSCRIPTIONS

    def test_run_quit(self, browser, output, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda *args: "q")
        browser.run()
        assert "종료합니다" in output.getvalue()

    def test_start_failure(self, browser, provider, output):
        provider.fail_on.add("list_subscriptions")
        browser.run()
        assert "조회 실패" in output.getvalue()
