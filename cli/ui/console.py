"""
cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력을 위한 함수들
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from core.listing import ColumnConfig


def get_console() -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()


def get_logger(name: str = "azct", level: int = logging.INFO) -> logging.Logger:
    """Rich 핸들러가 설정된 logger를 반환합니다.

    Args:
        name: logger 이름 (기본값: "azct")
        level: 로그 레벨

    Returns:
        logging.Logger: 설정된 logger 인스턴스
    """
    logger = logging.getLogger(name)

    # 이미 핸들러가 설정되어 있으면 반환
    if logger.handlers:
        return logger

    logger.setLevel(level)
    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)

    return logger


# 상태 심볼
SYMBOL_SUCCESS = "✓"  # 완료
SYMBOL_ERROR = "✗"  # 에러
SYMBOL_WARNING = "!"  # 경고


def build_table(
    columns: Sequence[ColumnConfig],
    rows: Sequence[Sequence[str]],
    title: str | None = None,
    numbered: bool = True,
) -> Table:
    """컬럼 스키마로 Rich Table 생성

    Args:
        columns: 컬럼 설정 (정렬/너비)
        rows: 표시 행
        title: 테이블 제목
        numbered: 행 번호 컬럼 추가 여부 (1부터)
    """
    table = Table(title=title, show_header=True, header_style="bold magenta", expand=False)

    if numbered:
        table.add_column("#", justify="right", style="dim")
    for column in columns:
        table.add_column(column.name, justify=column.align.value, width=column.width, overflow="fold")

    for index, row in enumerate(rows, start=1):
        cells = [escape(str(cell)) for cell in row]
        if numbered:
            cells.insert(0, str(index))
        table.add_row(*cells)

    return table
