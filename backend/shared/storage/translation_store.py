"""
Local translation store

Persists the UI's translation table as JSON text in one well-known storage
slot. Loading never fails: an absent, unreadable or undecodable slot yields
an empty table. Saving overwrites the slot wholesale.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from shared.config.settings import ApplicationSettings, get_settings
from shared.exceptions import StorageUnavailableError
from shared.models.i18n import TranslationTable, coerce_translation_table
from shared.storage.local_storage import StorageBackend, create_local_storage

logger = logging.getLogger(__name__)

DEFAULT_TRANSLATIONS_KEY = "translations"


class TranslationStore:
    """Translation table persisted in a local storage slot"""

    def __init__(self, storage: StorageBackend, key: str = DEFAULT_TRANSLATIONS_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> TranslationTable:
        """저장된 번역 테이블 로드 (없거나 손상된 경우 빈 테이블)"""
        try:
            raw = self.storage.get_item(self.key)
        except StorageUnavailableError as e:
            logger.warning(f"Translation store unavailable, starting empty: {e}")
            return {}

        if raw is None:
            return {}

        try:
            decoded = json.loads(raw)
        except (TypeError, ValueError):
            logger.debug(f"Stored translations under '{self.key}' are not valid JSON, ignoring")
            return {}

        return coerce_translation_table(decoded)

    def save(self, table: TranslationTable) -> None:
        """번역 테이블 전체를 덮어써서 저장"""
        self.storage.set_item(self.key, json.dumps(dict(table), ensure_ascii=False))


def create_translation_store(app_settings: Optional[ApplicationSettings] = None) -> TranslationStore:
    """Translation store wired from settings (backend, path and slot key)."""
    app_settings = app_settings or get_settings()
    storage = create_local_storage(app_settings.storage)
    return TranslationStore(storage, key=app_settings.storage.translations_storage_key)
