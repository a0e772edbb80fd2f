"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    AZCTError (베이스)
    ├── HandlerNotFoundError (레지스트리 조회 실패, 기본 핸들러 없음)
    ├── FetchFailedError (리소스 Provider 호출 실패)
    ├── MalformedKeyError (예상하지 못한 구조의 스토리지 키)
    ├── NavigationError (현재 뷰에서 정의되지 않은 UI 요청)
    ├── ConfigError (설정 관련)
    └── ValidationError (입력/인벤토리 파일 검증)

Usage:
    from core.exceptions import FetchFailedError

    try:
        groups = provider.list_resource_groups(subscription_id)
    except Exception as e:
        raise FetchFailedError("list_resource_groups", cause=e) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class AZCTError(Exception):
    """azct 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 레지스트리 관련 예외
# =============================================================================


class HandlerNotFoundError(AZCTError):
    """리소스 타입에 해당하는 핸들러가 없는 경우

    호출자가 대체 동작(기본 컬럼 세트 등)을 결정합니다.
    """

    def __init__(self, resource_type: str):
        label = resource_type or "<default>"
        super().__init__(f"핸들러 없음 [{label}]")
        self.resource_type = resource_type
        self.details["resource_type"] = resource_type


# =============================================================================
# Provider 호출 관련 예외
# =============================================================================


class FetchFailedError(AZCTError):
    """리소스 Provider 호출 실패

    부분 결과를 만들지 않으며, 내비게이션 상태는 변경되지 않습니다.
    """

    def __init__(
        self,
        operation: str,
        message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        full_message = f"조회 실패 [{operation}]"
        if message:
            full_message = f"{full_message}: {message}"
        super().__init__(full_message, cause)
        self.operation = operation
        self.details["operation"] = operation


# =============================================================================
# 스토리지 키 관련 예외
# =============================================================================


class MalformedKeyError(AZCTError):
    """예상하지 못한 구조의 평면 키

    HierarchyProjector는 이 예외를 밖으로 던지지 않고
    루트 레벨 리프로 강등 처리합니다.
    """

    def __init__(self, key: str, reason: str):
        super().__init__(f"잘못된 키 [{key}]: {reason}")
        self.key = key
        self.reason = reason
        self.details.update({"key": key, "reason": reason})


# =============================================================================
# UI 내비게이션 관련 예외
# =============================================================================


class NavigationError(AZCTError):
    """현재 뷰에서 정의되지 않은 요청

    NavigationState 자체는 이 예외를 던지지 않습니다.
    Navigator가 UI의 잘못된 요청(예: 블롭 브라우저 밖에서 폴더 열기)을 거절할 때 사용합니다.
    """

    def __init__(self, view: str, request: str):
        super().__init__(f"내비게이션 오류 [{view}]: '{request}' 요청을 처리할 수 없습니다")
        self.view = view
        self.request = request
        self.details.update({"view": view, "request": request})


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(AZCTError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


class ValidationError(AZCTError):
    """입력 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        cause: Optional[Exception] = None,
    ):
        message = f"검증 오류 [{field}]: 예상값 '{expected}', 실제값 '{value}'"
        super().__init__(message, cause)
        self.field = field
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "field": field,
                "value": str(value),
                "expected": expected,
            }
        )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def is_not_found(error: Exception) -> bool:
    """핸들러/리소스를 찾을 수 없는 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        찾을 수 없음 오류이면 True
    """
    if isinstance(error, HandlerNotFoundError):
        return True

    if isinstance(error, FetchFailedError) and error.cause is not None:
        return isinstance(error.cause, (KeyError, LookupError))

    return False


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, AZCTError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    if isinstance(error, PermissionError):
        return "권한이 없습니다. 역할 할당을 확인하세요."

    if isinstance(error, TimeoutError):
        return "요청 시간이 초과되었습니다. 잠시 후 다시 시도하세요."

    return f"{type(error).__name__}: {error}"
