"""
UI runtime contract and the in-process reference runtime.

A runtime is created from an initial configuration payload and exposes its
outbound ports. The only recognized configuration option is `translations`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Sequence

from app_shell.ports import RuntimePorts
from app_shell.services.i18n_client import I18nApiClient
from shared.models.i18n import LocaleResponse, TranslationTable, coerce_translation_table

logger = logging.getLogger(__name__)

TRANSLATIONS_OPTION = "translations"


class UIRuntime(Protocol):
    ports: RuntimePorts


RuntimeFactory = Callable[[Dict[str, Any]], UIRuntime]


class TranslationRuntime:
    """
    Reference UI runtime holding the in-memory translation table.

    Every replacement of the table is pushed as a full snapshot on
    `ports.store_translations`.
    """

    def __init__(self, flags: Optional[Mapping[str, Any]] = None):
        flags = flags or {}
        self.translations: TranslationTable = coerce_translation_table(flags.get(TRANSLATIONS_OPTION) or {})
        self.language: Optional[str] = None
        self.locale: Optional[str] = None
        self.supported_locales: Sequence[str] = []
        self.ports = RuntimePorts()

    def translate(self, key: str) -> str:
        """Localized string for a key; the key itself when missing."""
        return self.translations.get(key, key)

    def replace_translations(self, table: TranslationTable) -> None:
        self.translations = dict(table)
        self.ports.store_translations.send(dict(self.translations))

    async def refresh_translations(
        self,
        client: I18nApiClient,
        locales: Optional[Sequence[str]] = None,
    ) -> LocaleResponse:
        """Fetch translations from the i18n API and adopt them."""
        response = await client.fetch_translations(locales)
        self.language = response.language
        self.locale = response.locale
        self.supported_locales = list(response.supported_locales)
        logger.info(f"Fetched {len(response.lookup)} translations for {response.locale}")
        self.replace_translations(response.lookup)
        return response
