"""
cli/ui/banner.py - ASCII 아트 배너 및 사용자 컨텍스트 표시
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from cli.i18n import t
from core.config import get_version
from core.inventory.types import UserInfo

# (style, ascii_art, suffix) 형식
LOGO_LINES: list[tuple[str, str, str]] = [
    ("#0078D4", "    /\\", "      [bold white]{title}[/] [dim]v{version}[/]"),
    ("#0078D4", "   /  \\", "     {user}"),
    ("#005A9E", "  / /\\ \\", "    {tenant}"),
    ("#004578", " /_/  \\_\\", "   [dim]{hint}[/]"),
]


def format_user(user: UserInfo | None) -> tuple[str, str]:
    """(사용자 줄, 테넌트 줄) 마크업"""
    if user is None:
        return "", ""
    name = escape(user.name or "-")
    email = escape(user.email or "-")
    tenant = escape(user.tenant_id or "-")
    return f"[cyan]{t('browser.user', name=name, email=email)}[/]", f"[dim]{t('browser.tenant', tenant=tenant)}[/]"


def _render_logo_lines(console: Console, lines: list[tuple[str, str, str]], format_vars: dict[str, str]) -> None:
    """로고 라인 렌더링 (백슬래시 이스케이프 처리)"""
    for color, ascii_art, suffix in lines:
        text = Text()
        text.append(ascii_art, style=f"bold {color}")
        if suffix:
            console.print(text, suffix.format(**format_vars), end="")
            console.print()
        else:
            console.print(text)


def print_banner(console: Console, user: UserInfo | None = None) -> None:
    """배너 출력

    Args:
        console: Rich Console 인스턴스
        user: 현재 사용자 정보 (없으면 빈 줄)
    """
    user_line, tenant_line = format_user(user)
    format_vars = {
        "title": t("browser.title"),
        "version": get_version(),
        "user": user_line,
        "tenant": tenant_line,
        "hint": t("browser.prompt"),
    }
    console.print()
    _render_logo_lines(console, LOGO_LINES, format_vars)
    console.print()
