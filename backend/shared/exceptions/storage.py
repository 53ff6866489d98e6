"""
로컬 저장소 관련 도메인 예외
"""

from typing import Optional

from .base import DomainException


class StorageError(DomainException):
    """저장소 기본 예외"""

    def __init__(self, message: str, code: str = "STORAGE_ERROR", details: dict = None):
        super().__init__(message=message, code=code, details=details or {})


class StorageUnavailableError(StorageError):
    """저장소를 읽거나 쓸 수 없음 (디스크 용량, 권한, 비활성화 등)"""

    def __init__(self, message: str, path: Optional[str] = None, operation: Optional[str] = None):
        details = {}
        if path:
            details["path"] = path
        if operation:
            details["operation"] = operation
        super().__init__(
            message=f"Storage unavailable: {message}",
            code="STORAGE_UNAVAILABLE",
            details=details,
        )
