"""
Shared model definitions for locale-shell
"""

from .i18n import LocaleRequest, LocaleResponse, TranslationTable, coerce_translation_table
from .responses import ApiResponse

__all__ = [
    "ApiResponse",
    "LocaleRequest",
    "LocaleResponse",
    "TranslationTable",
    "coerce_translation_table",
]
