"""
Unit tests for centralized settings
"""

import os

import pytest

from shared.config.settings import (
    ApplicationSettings,
    Environment,
    I18nApiSettings,
    ServiceSettings,
    StorageSettings,
    get_settings,
    reload_settings,
)


class TestDefaults:
    """Default values mirror the development server"""

    def test_i18n_api_defaults(self, monkeypatch):
        for key in ("I18N_API_HOST", "I18N_API_PORT", "I18N_SUPPORTED_LOCALES", "I18N_DEFAULT_LOCALE"):
            monkeypatch.delenv(key, raising=False)
        i18n_settings = I18nApiSettings(_env_file=None)

        assert i18n_settings.i18n_api_port == 8081
        assert i18n_settings.i18n_default_locale == "en-US"
        assert i18n_settings.supported_locales_list == ["en-US", "de-DE"]
        assert i18n_settings.base_url == "http://localhost:8081"
        assert i18n_settings.i18n_legacy_fixed_lookup is False

    def test_storage_defaults(self, monkeypatch):
        for key in ("LOCAL_STORAGE_BACKEND", "LOCAL_STORAGE_DIR", "LOCAL_STORAGE_FILE", "TRANSLATIONS_STORAGE_KEY"):
            monkeypatch.delenv(key, raising=False)
        storage_settings = StorageSettings(_env_file=None)

        assert storage_settings.local_storage_backend == "file"
        assert storage_settings.translations_storage_key == "translations"
        assert storage_settings.local_storage_path == os.path.join("./.local_storage", "local_storage.json")

    def test_environment_default(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        app_settings = ApplicationSettings(_env_file=None)

        assert app_settings.environment == Environment.DEVELOPMENT
        assert app_settings.is_development is True
        assert app_settings.is_production is False


class TestEnvironmentBinding:
    """Environment variables override defaults"""

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("I18N_API_PORT", "9000")
        monkeypatch.setenv("I18N_SUPPORTED_LOCALES", '["ko-KR"]')
        monkeypatch.setenv("LOCAL_STORAGE_BACKEND", "MEMORY")

        app_settings = ApplicationSettings()

        assert app_settings.is_production is True
        assert app_settings.i18n_api.i18n_api_port == 9000
        assert app_settings.i18n_api.supported_locales_list == ["ko-KR"]
        assert app_settings.storage.local_storage_backend == "memory"

    def test_comma_separated_supported_locales(self):
        i18n_settings = I18nApiSettings(i18n_supported_locales="en-US, de-DE")
        assert i18n_settings.supported_locales_list == ["en-US", "de-DE"]

    def test_empty_supported_locales_fall_back_to_default(self):
        i18n_settings = I18nApiSettings(i18n_supported_locales="[]")
        assert i18n_settings.supported_locales_list == ["en-US"]

    def test_invalid_cors_origins_allow_all(self):
        assert ServiceSettings(cors_origins="not json").cors_origins_list == ["*"]

    def test_reload_settings_replaces_global(self, monkeypatch):
        monkeypatch.setenv("I18N_API_PORT", "9100")
        try:
            reloaded = reload_settings()
            assert get_settings() is reloaded
            assert get_settings().i18n_api.i18n_api_port == 9100
        finally:
            monkeypatch.undo()
            reload_settings()


class TestSummary:
    """Startup settings summary"""

    def test_summary_is_json_friendly(self, make_settings):
        summary = make_settings().summary()

        assert summary["environment"] == "development"
        assert summary["storage"]["backend"] == "memory"
        assert summary["i18n_api"]["supported_locales"] == ["en-US", "de-DE"]
        assert summary["i18n_api"]["base_url"].endswith(":8081")

    @pytest.mark.parametrize("environment", list(Environment))
    def test_environment_flags(self, environment):
        app_settings = ApplicationSettings(environment=environment)
        assert app_settings.is_development == (environment == Environment.DEVELOPMENT)
        assert app_settings.is_test == (environment == Environment.TEST)
