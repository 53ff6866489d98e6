"""
I18N primitives (model layer).

This module is intentionally dependency-light (no FastAPI imports) so it can be
used by the mock API, the HTTP client and the app shell alike.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

# key -> localized display string
TranslationTable = Dict[str, str]

# ordered locale identifiers, primary first
LocaleRequest = List[str]


def coerce_translation_table(value: Any) -> TranslationTable:
    """
    Keep only string -> string entries of a decoded JSON value.

    Anything that is not a JSON object yields an empty table.
    """
    if not isinstance(value, dict):
        return {}
    return {str(k): v for k, v in value.items() if isinstance(v, str)}


class LocaleResponse(BaseModel):
    """Payload of GET /api/i18n/{locales}"""

    model_config = ConfigDict(populate_by_name=True)

    language: str = Field(..., description="Primary language subtag of `locale`")
    locale: str = Field(..., description="Primary requested locale")
    lookup: TranslationTable = Field(default_factory=dict, description="Translation table")
    supported_locales: List[str] = Field(
        default_factory=list,
        alias="supportedLocales",
        description="Locales the service advertises",
    )
