# core/__init__.py
"""
core - azct 코어 엔진

화면 그리기와 클라우드 API 호출을 제외한 브라우저 로직 전체를 포함합니다.

아키텍처:
    core/
    ├── inventory/      # 레코드 타입, ResourceProvider 인터페이스, YAML Provider
    ├── listing/        # 컬럼 스키마, FilterableList
    ├── storage/        # 평면 키 -> 가상 디렉터리 투영
    ├── resource/       # 리소스 타입 핸들러, 레지스트리, 상세 렌더링
    ├── navigation/     # NavigationState, Navigator
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.inventory import StaticProvider
    from core.navigation import Navigator

    nav = Navigator(StaticProvider.from_file("inventory.yaml"))
    nav.open_subscriptions()
    print(nav.snapshot().footer)
"""

from core import config, exceptions

__all__: list[str] = [
    "config",
    "exceptions",
]
