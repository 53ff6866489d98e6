from __future__ import annotations

import pytest

from shared.config.settings import (
    ApplicationSettings,
    Environment,
    I18nApiSettings,
    StorageSettings,
)
from shared.storage.local_storage import FileLocalStorage, MemoryLocalStorage
from shared.storage.translation_store import TranslationStore


@pytest.fixture
def memory_storage() -> MemoryLocalStorage:
    return MemoryLocalStorage()


@pytest.fixture
def memory_store(memory_storage) -> TranslationStore:
    return TranslationStore(memory_storage)


@pytest.fixture
def storage_path(tmp_path) -> str:
    return str(tmp_path / "storage" / "local_storage.json")


@pytest.fixture
def file_store(storage_path) -> TranslationStore:
    return TranslationStore(FileLocalStorage(storage_path))


@pytest.fixture
def make_settings(tmp_path):
    """Build isolated ApplicationSettings for a test."""

    def _make(
        environment: Environment = Environment.DEVELOPMENT,
        legacy_fixed_lookup: bool = False,
        static_dir: str = "",
        backend: str = "memory",
        supported_locales: str = '["en-US", "de-DE"]',
    ) -> ApplicationSettings:
        return ApplicationSettings(
            environment=environment,
            storage=StorageSettings(
                local_storage_backend=backend,
                local_storage_dir=str(tmp_path / "settings_storage"),
            ),
            i18n_api=I18nApiSettings(
                i18n_legacy_fixed_lookup=legacy_fixed_lookup,
                i18n_static_dir=static_dir,
                i18n_supported_locales=supported_locales,
            ),
        )

    return _make
