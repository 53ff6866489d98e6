"""
Unified Configuration Access Point

    from shared.config import get_settings

    settings = get_settings()
    path = settings.storage.local_storage_path
"""

from .settings import (
    ApplicationSettings,
    Environment,
    I18nApiSettings,
    ServiceSettings,
    StorageSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    "ApplicationSettings",
    "Environment",
    "I18nApiSettings",
    "ServiceSettings",
    "StorageSettings",
    "get_settings",
    "reload_settings",
]
