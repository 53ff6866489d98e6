"""
API 라우터 모듈
"""

from . import i18n

__all__ = ["i18n"]
