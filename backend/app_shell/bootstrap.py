"""
Application bootstrap

Wires the translation store to the UI runtime:
1. startup  - the stored table becomes the runtime's `translations` option
2. ongoing  - every table the runtime pushes on `store_translations` is
              logged and written back to the store, in arrival order
"""

from __future__ import annotations

import logging
from typing import Optional

from app_shell.runtime import TRANSLATIONS_OPTION, RuntimeFactory, UIRuntime
from shared.config.settings import ApplicationSettings
from shared.models.i18n import TranslationTable
from shared.storage.translation_store import TranslationStore, create_translation_store

logger = logging.getLogger(__name__)


def bootstrap(
    runtime_factory: RuntimeFactory,
    store: Optional[TranslationStore] = None,
    app_settings: Optional[ApplicationSettings] = None,
) -> UIRuntime:
    """
    Start the UI runtime seeded with the persisted translations.

    Args:
        runtime_factory: Creates the runtime from its initial configuration
        store: Translation store (built from settings when omitted)
        app_settings: Settings used to build the default store

    Returns:
        The running UI runtime
    """
    store = store or create_translation_store(app_settings)

    translations = store.load()
    logger.info(f"Booting UI runtime with {len(translations)} stored translations")
    runtime = runtime_factory({TRANSLATIONS_OPTION: translations})

    def _store_translations(table: TranslationTable) -> None:
        logger.info("app.ports.store_translations -> %s", table)
        store.save(table)

    runtime.ports.store_translations.subscribe(_store_translations)
    return runtime
