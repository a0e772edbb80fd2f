"""
cli/i18n/messages/browser.py - Browser Messages

Contains translations for the interactive inventory browser.
"""

from __future__ import annotations

BROWSER_MESSAGES = {
    # =========================================================================
    # Header / Footer
    # =========================================================================
    "title": {
        "ko": "azct - 클라우드 인벤토리 브라우저",
        "en": "azct - Cloud Inventory Browser",
    },
    "user": {"ko": "사용자: {name} ({email})", "en": "User: {name} ({email})"},
    "tenant": {"ko": "테넌트: {tenant}", "en": "Tenant: {tenant}"},
    "filter_active": {"ko": "필터: {text}", "en": "Filter: {text}"},
    "empty": {"ko": "항목이 없습니다", "en": "No items"},
    # =========================================================================
    # Prompt / Help
    # =========================================================================
    "prompt": {"ko": "명령 입력 (도움말: ?)", "en": "Enter command (help: ?)"},
    "help_title": {"ko": "명령어", "en": "Commands"},
    "help_select": {"ko": "N        행 선택 (Enter)", "en": "N        select row (Enter)"},
    "help_filter": {"ko": "/text    필터 적용, / 만 입력하면 해제", "en": "/text    apply filter, / alone clears"},
    "help_back": {"ko": "b        뒤로", "en": "b        back"},
    "help_menu": {"ko": "m        리소스 타입 메뉴", "en": "m        resource type menu"},
    "help_action": {"ko": "KEY N    행에 액션 실행 (예: d 1, e 2)", "en": "KEY N    run action on row (e.g. d 1, e 2)"},
    "help_refresh": {"ko": "r        새로고침 (리소스 그룹 뷰: r N 전체 리소스)", "en": "r        refresh (resource groups: r N all resources)"},
    "help_quit": {"ko": "q        종료", "en": "q        quit"},
    "detail_hint": {"ko": "b: 상세 보기 닫기", "en": "b: close details"},
    # =========================================================================
    # Errors / Status
    # =========================================================================
    "unknown_command": {"ko": "알 수 없는 명령: {command}", "en": "Unknown command: {command}"},
    "fetch_failed": {"ko": "조회 실패: {error}", "en": "Fetch failed: {error}"},
    "not_found": {"ko": "찾을 수 없습니다: {error}", "en": "Not found: {error}"},
    "not_available": {"ko": "이 화면에서는 사용할 수 없습니다: {request}", "en": "Not available here: {request}"},
    "action_not_handled": {"ko": "처리되지 않은 액션: {key}", "en": "Action not handled: {key}"},
    # =========================================================================
    # Secrets
    # =========================================================================
    "secret_confirm": {
        "ko": "시크릿 '{name}'의 값을 표시하시겠습니까? 민감한 정보가 화면에 표시됩니다.",
        "en": "View the value of secret '{name}'? This will display sensitive information on screen.",
    },
    "secret_value_title": {"ko": "시크릿: {name}", "en": "Secret: {name}"},
    # =========================================================================
    # validate
    # =========================================================================
    "validate_summary": {
        "ko": "인벤토리 정상: 구독 {subscriptions}개, 리소스 그룹 {groups}개, 리소스 {resources}개",
        "en": "Inventory OK: {subscriptions} subscriptions, {groups} resource groups, {resources} resources",
    },
}
