"""
Centralized Configuration System for locale-shell

Type-safe configuration using Pydantic Settings, shared by the mock i18n API
and the application shell.

Features:
- Type-safe configuration with validation
- Environment variable binding with defaults (.env supported)
- Hierarchical configuration structure
- Test-friendly configuration isolation (reload_settings)
"""

import json
import os
from enum import Enum
from typing import Any, Dict, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment types"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class StorageSettings(BaseSettings):
    """Local key-value storage settings"""

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    local_storage_backend: str = Field(
        default="file",
        description="Local storage backend: 'file' or 'memory'"
    )
    local_storage_dir: str = Field(
        default="./.local_storage",
        description="Directory holding the local storage file"
    )
    local_storage_file: str = Field(
        default="local_storage.json",
        description="Local storage file name"
    )
    translations_storage_key: str = Field(
        default="translations",
        description="Slot key under which the translation table is persisted"
    )

    @field_validator("local_storage_backend", mode="before")
    @classmethod
    def normalize_backend(cls, v):
        value = str(v or "file").strip().lower()
        if value not in ("file", "memory"):
            raise ValueError(f"Unsupported local storage backend: {v}")
        return value

    @property
    def local_storage_path(self) -> str:
        """Full path of the local storage file"""
        return os.path.join(os.path.expanduser(self.local_storage_dir), self.local_storage_file)


class I18nApiSettings(BaseSettings):
    """Mock i18n API (development server) settings"""

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    i18n_api_host: str = Field(
        default="localhost",
        description="Mock i18n API host"
    )
    i18n_api_port: int = Field(
        default=8081,
        description="Mock i18n API port"
    )
    i18n_default_locale: str = Field(
        default="en-US",
        description="Locale used when a request names none"
    )
    i18n_supported_locales: str = Field(
        default='["en-US", "de-DE"]',
        description="Supported locales advertised by the mock API (JSON array string)"
    )
    i18n_legacy_fixed_lookup: bool = Field(
        default=False,
        description="Serve the bare lookup table on GET /api/i18n (fixed form)"
    )
    i18n_static_dir: str = Field(
        default="./dist",
        description="Static content directory served at / when it exists"
    )
    i18n_request_timeout: float = Field(
        default=30.0,
        description="Client timeout in seconds for i18n API calls"
    )

    @property
    def base_url(self) -> str:
        """Construct mock i18n API base URL"""
        return f"http://{self.i18n_api_host}:{self.i18n_api_port}"

    @property
    def supported_locales_list(self) -> List[str]:
        """Parse supported locales from JSON string"""
        try:
            parsed = json.loads(self.i18n_supported_locales)
        except (json.JSONDecodeError, TypeError):
            parsed = [part for part in str(self.i18n_supported_locales).split(",")]
        if not isinstance(parsed, list):
            parsed = [parsed]
        locales = [str(item).strip() for item in parsed if str(item).strip()]
        return locales or [self.i18n_default_locale]


class ServiceSettings(BaseSettings):
    """Service-level HTTP settings"""

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # CORS Configuration
    cors_enabled: bool = Field(
        default=True,
        description="Enable CORS"
    )
    cors_origins: str = Field(
        default='["http://localhost:3000", "http://localhost:8080", "http://localhost:8081"]',
        description="CORS allowed origins (JSON array string)"
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from JSON string"""
        try:
            return json.loads(self.cors_origins)
        except (json.JSONDecodeError, TypeError):
            return ["*"]  # Fallback to allow all origins


class ApplicationSettings(BaseSettings):
    """Main application settings - aggregates all other settings"""

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment and basic settings
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )
    log_format: str = Field(
        default="text",
        description="Log output format: 'text' or 'json'"
    )

    # Nested settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    i18n_api: I18nApiSettings = Field(default_factory=I18nApiSettings)
    services: ServiceSettings = Field(default_factory=ServiceSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.environment == Environment.PRODUCTION

    @property
    def is_test(self) -> bool:
        """Check if running in test mode"""
        return self.environment == Environment.TEST

    def summary(self) -> Dict[str, Any]:
        """Effective settings as a JSON-friendly dict (logged on startup)"""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "log_level": self.log_level,
            "storage": {
                "backend": self.storage.local_storage_backend,
                "path": self.storage.local_storage_path,
                "translations_key": self.storage.translations_storage_key,
            },
            "i18n_api": {
                "base_url": self.i18n_api.base_url,
                "default_locale": self.i18n_api.i18n_default_locale,
                "supported_locales": self.i18n_api.supported_locales_list,
                "legacy_fixed_lookup": self.i18n_api.i18n_legacy_fixed_lookup,
                "static_dir": self.i18n_api.i18n_static_dir,
            },
        }


settings = ApplicationSettings()


def get_settings() -> ApplicationSettings:
    """
    Get the global settings instance

    Can be used with FastAPI's Depends() for dependency injection.

    Returns:
        ApplicationSettings: The global settings instance
    """
    return settings


def reload_settings() -> ApplicationSettings:
    """
    Reload settings from environment (useful for testing)

    Returns:
        ApplicationSettings: New settings instance with reloaded values
    """
    global settings
    settings = ApplicationSettings()
    return settings
