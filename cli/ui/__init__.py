# cli/ui - TUI 컴포넌트 (questionary, rich)
"""
TUI 컴포넌트 모듈

CLI 전용 UI 컴포넌트들 (인벤토리 브라우저, 콘솔 출력 등)
"""

from .banner import print_banner
from .browser import Browser, questionary_confirm
from .console import (
    SYMBOL_ERROR,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    build_table,
    console,
    get_console,
    get_logger,
)

__all__: list[str] = [
    "Browser",
    "questionary_confirm",
    "print_banner",
    "console",
    "get_console",
    "get_logger",
    # 표준 출력 심볼
    "SYMBOL_SUCCESS",
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    "build_table",
]
