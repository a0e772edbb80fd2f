"""
core/config.py - 중앙 설정 관리

애플리케이션 전역 상수와 환경변수 헬퍼를 제공합니다.

환경변수:
    AZCT_INVENTORY: 기본 인벤토리 YAML 파일 경로
    AZCT_LANG: UI 언어 ("ko" 또는 "en")
    AZCT_DEBUG: 디버그 로그 활성화

Usage:
    from core.config import settings, get_inventory_path

    delimiter = settings.DEFAULT_DELIMITER  # "/"
    path = get_inventory_path()
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from core.exceptions import ConfigError


@dataclass(frozen=True)
class Settings:
    """불변 설정 값"""

    # 스토리지 키 구분자
    DEFAULT_DELIMITER: str = "/"

    # UI 언어
    DEFAULT_LANG: str = "ko"
    SUPPORTED_LANGS: tuple = ("ko", "en")

    # Key Vault URL이 속성에 없을 때 사용하는 템플릿
    VAULT_URL_TEMPLATE: str = "https://{name}.vault.azure.net/"

    # 날짜 표시 형식
    DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # 키 바인딩
    FILTER_KEY: str = "/"
    MENU_KEY: str = "m"
    BACK_KEY: str = "b"
    QUIT_KEY: str = "q"
    DETAIL_KEY: str = "d"

    # 알려진 리소스 타입
    STORAGE_ACCOUNT_TYPE: str = "Microsoft.Storage/storageAccounts"
    KEY_VAULT_TYPE: str = "Microsoft.KeyVault/vaults"

    VERSION: str = "0.3.0"


settings = Settings()


def get_version() -> str:
    """버전 문자열 반환"""
    return settings.VERSION


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 변환

    Args:
        name: 환경변수 이름
        default: 값이 없을 때 기본값

    Returns:
        "true", "1", "yes", "on" (대소문자 무시)이면 True
    """
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes", "on")


def get_inventory_path() -> Optional[Path]:
    """AZCT_INVENTORY 환경변수에서 인벤토리 파일 경로 반환"""
    value = os.environ.get("AZCT_INVENTORY")
    if not value:
        return None
    return Path(value).expanduser()


def get_default_lang() -> str:
    """AZCT_LANG 환경변수에서 언어 반환

    Raises:
        ConfigError: 지원하지 않는 언어인 경우
    """
    lang = os.environ.get("AZCT_LANG", "").strip().lower()
    if not lang:
        return settings.DEFAULT_LANG
    if lang not in settings.SUPPORTED_LANGS:
        raise ConfigError("AZCT_LANG", f"지원하지 않는 언어입니다: {lang!r} (지원: {', '.join(settings.SUPPORTED_LANGS)})")
    return lang


def is_debug() -> bool:
    """AZCT_DEBUG 환경변수 확인"""
    return get_env_bool("AZCT_DEBUG")


def build_vault_url(vault_name: str) -> str:
    """Key Vault 이름으로 기본 URL 생성"""
    return settings.VAULT_URL_TEMPLATE.format(name=vault_name)
