"""
Mock i18n API dependencies

FastAPI Depends() providers. Tests and create_app() swap the settings through
app.dependency_overrides[get_app_settings].
"""

from fastapi import Depends

from i18n_api.services.locale_catalog import LocaleCatalog
from shared.config.settings import ApplicationSettings, get_settings


def get_app_settings() -> ApplicationSettings:
    """Application settings provider"""
    return get_settings()


def get_locale_catalog(app_settings: ApplicationSettings = Depends(get_app_settings)) -> LocaleCatalog:
    """Locale catalog configured from the current settings"""
    return LocaleCatalog.from_settings(app_settings.i18n_api)
