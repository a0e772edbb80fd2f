"""
cli/ui/browser.py - 대화형 인벤토리 브라우저

Navigator 스냅샷을 Rich로 출력하고 한 줄 명령을 읽어 처리하는 루프입니다.

명령어:
    N           행 선택 (Enter)
    /text       필터 적용 ("/"만 입력하면 해제)
    b           뒤로 (상세 보기가 열려 있으면 닫기)
    m           리소스 타입 메뉴
    r           새로고침, 리소스 그룹 뷰에서 "r N"은 전체 리소스 목록
    d N         상세 보기
    KEY N       리소스 핸들러 액션 (예: e N 탐색)
    v N         시크릿 값 보기 (확인 후)
    ?           도움말
    q           종료
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import questionary
from rich.console import Console
from rich.markup import escape

from cli.i18n import t
from core.config import settings
from core.exceptions import (
    FetchFailedError,
    HandlerNotFoundError,
    NavigationError,
    format_error_for_user,
    is_not_found,
)
from core.navigation import Navigator, ViewSnapshot, ViewState

from .banner import print_banner
from .console import SYMBOL_ERROR, SYMBOL_WARNING, build_table
from .console import console as default_console

logger = logging.getLogger(__name__)

ConfirmFunc = Callable[[str], bool]

RESOURCE_VIEWS = (ViewState.RESOURCE_LIST, ViewState.RESOURCE_TYPE_FILTERED)
REFRESH_KEY = "r"
REVEAL_KEY = "v"
HELP_KEYS = ("?", "h")


def questionary_confirm(message: str) -> bool:
    """questionary 확인 프롬프트 (Ctrl+C는 취소로 처리)"""
    answer = questionary.confirm(message, default=False).ask()
    return bool(answer)


class Browser:
    """인벤토리 브라우저 루프

    Args:
        navigator: 내비게이션 오케스트레이터
        console: Rich Console (기본: 전역 console)
        confirm: 시크릿 값 표시 전 확인 함수
    """

    def __init__(
        self,
        navigator: Navigator,
        console: Console | None = None,
        confirm: ConfirmFunc | None = None,
    ):
        self.navigator = navigator
        self.console = console or default_console
        self.confirm = confirm or questionary_confirm

    # =========================================================================
    # 실행
    # =========================================================================

    def start(self) -> None:
        """첫 화면(구독 목록) 로드"""
        print_banner(self.console, self.navigator.user_info())
        self.navigator.open_subscriptions()

    def run(self) -> None:
        """명령 루프 (q 또는 Ctrl+C/Ctrl+D로 종료)"""
        try:
            self.start()
        except FetchFailedError as e:
            self._error(t("browser.fetch_failed", error=format_error_for_user(e)))
            return

        while True:
            self.render()
            try:
                command = self.console.input(f"[bold]{escape(t('browser.prompt'))}[/bold] > ")
            except (KeyboardInterrupt, EOFError):
                self.console.print()
                break
            if not self.handle(command):
                break

        self.console.print(f"[dim]{t('common.goodbye')}[/dim]")

    # =========================================================================
    # 렌더링
    # =========================================================================

    def render(self) -> None:
        snap = self.navigator.snapshot()
        self.console.print()
        self.console.print(f"[dim]{escape(' > '.join(snap.breadcrumb))}[/dim]")

        if snap.showing_detail and snap.detail is not None:
            self.console.print(snap.detail)
            self.console.print(f"[dim]{t('browser.detail_hint')}[/dim]")
            return

        self.console.print(f"[bold cyan]{escape(snap.title)}[/bold cyan]")
        if snap.rows:
            self.console.print(build_table(snap.columns, snap.rows))
        else:
            self.console.print(f"[dim]{t('browser.empty')}[/dim]")
        self.console.print(self._footer(snap))

    def _footer(self, snap: ViewSnapshot) -> str:
        parts = [f"[bold cyan]{escape(snap.footer)}[/bold cyan]"]
        if snap.has_filter:
            parts.append(escape(t("browser.filter_active", text=snap.filter_text)))
        if snap.actions:
            parts.append(" ".join(f"[white on blue] {escape(key)} [/] {escape(label)}" for key, label in snap.actions))
        return "  |  ".join(parts)

    def show_help(self) -> None:
        self.console.print(f"[bold]{t('browser.help_title')}[/bold]")
        for key in ("help_select", "help_filter", "help_back", "help_menu", "help_action", "help_refresh", "help_quit"):
            self.console.print(f"  {escape(t('browser.' + key))}")

    def _error(self, message: str) -> None:
        self.console.print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]")

    def _warning(self, message: str) -> None:
        self.console.print(f"[yellow]{SYMBOL_WARNING} {escape(message)}[/yellow]")

    # =========================================================================
    # 명령 처리
    # =========================================================================

    def handle(self, command: str) -> bool:
        """명령 한 줄 처리

        Returns:
            True: 계속, False: 종료
        """
        command = command.strip()
        if not command:
            return True
        if command.lower() == settings.QUIT_KEY:
            return False

        try:
            self._dispatch(command)
        except (FetchFailedError, HandlerNotFoundError) as e:
            if is_not_found(e):
                self._warning(t("browser.not_found", error=format_error_for_user(e)))
            else:
                self._error(t("browser.fetch_failed", error=format_error_for_user(e)))
        except NavigationError as e:
            self._warning(t("browser.not_available", request=e.request))
        return True

    def _dispatch(self, command: str) -> None:
        nav = self.navigator

        if command.startswith(settings.FILTER_KEY):
            text = command[len(settings.FILTER_KEY) :].strip()
            if text:
                nav.set_filter(text)
            else:
                nav.clear_filter()
            return

        lowered = command.lower()
        if lowered in HELP_KEYS:
            self.show_help()
            return
        if lowered == settings.BACK_KEY:
            nav.back()
            return
        if lowered == settings.MENU_KEY:
            nav.open_menu()
            return
        if lowered == REFRESH_KEY:
            nav.refresh()
            return
        if command.isdigit():
            nav.select(self._row(command))
            return

        parts = command.split()
        if len(parts) == 2 and parts[1].isdigit():
            self._keyed(parts[0].lower(), self._row(parts[1]))
            return

        self._warning(t("browser.unknown_command", command=command))

    def _row(self, text: str) -> int:
        """1부터 시작하는 입력 번호 -> 0부터 시작하는 행"""
        return int(text) - 1

    def _keyed(self, key: str, row: int) -> None:
        nav = self.navigator
        view = nav.view

        if view in RESOURCE_VIEWS:
            if not nav.run_action(row, key):
                self._warning(t("browser.action_not_handled", key=key))
            return
        if key == settings.DETAIL_KEY:
            nav.show_detail(row)
            return
        if key == REFRESH_KEY and view is ViewState.RESOURCE_GROUPS:
            nav.open_resources(nav.record_at(row).name)
            return
        if key == REVEAL_KEY and view is ViewState.VAULT_SECRETS:
            self.reveal_secret(row)
            return

        self._warning(t("browser.unknown_command", command=f"{key} {row + 1}"))

    def reveal_secret(self, row: int) -> None:
        """확인 후 시크릿 값 표시"""
        secret = self.navigator.record_at(row)
        if not self.confirm(t("browser.secret_confirm", name=secret.name)):
            self.console.print(f"[dim]{t('common.cancelled')}[/dim]")
            return
        value = self.navigator.reveal_secret(row)
        self.console.print(f"[bold yellow]{escape(t('browser.secret_value_title', name=secret.name))}[/bold yellow]")
        self.console.print(escape(value))
