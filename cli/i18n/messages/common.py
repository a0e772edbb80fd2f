"""
cli/i18n/messages/common.py - Common Messages

Shared status and error strings used across the CLI.
"""

from __future__ import annotations

COMMON_MESSAGES = {
    "cancelled": {"ko": "취소되었습니다", "en": "Cancelled"},
    "goodbye": {"ko": "종료합니다", "en": "Goodbye"},
    "file_not_found": {"ko": "파일을 찾을 수 없습니다: {path}", "en": "File not found: {path}"},
    "inventory_required": {
        "ko": "인벤토리 파일이 필요합니다 (--inventory 또는 AZCT_INVENTORY)",
        "en": "An inventory file is required (--inventory or AZCT_INVENTORY)",
    },
    "inventory_invalid": {
        "ko": "인벤토리 파일을 읽을 수 없습니다: {error}",
        "en": "Cannot read inventory file: {error}",
    },
}
