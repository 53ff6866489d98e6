"""
i18n API client
HTTP client the UI runtime uses to fetch translation tables
"""

import logging
from typing import Any, Dict, Optional, Sequence

import httpx

from shared.config.settings import get_settings
from shared.models.i18n import LocaleResponse, coerce_translation_table
from shared.utils.language import format_locale_request, language_of

logger = logging.getLogger(__name__)

I18N_PATH = "/api/i18n"


class I18nApiClient:
    """i18n API HTTP 클라이언트"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        i18n_settings = get_settings().i18n_api
        self.base_url = base_url or i18n_settings.base_url
        self.default_locale = i18n_settings.i18n_default_locale

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else i18n_settings.i18n_request_timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

        logger.info(f"i18n API client initialized with base URL: {self.base_url}")

    async def close(self):
        """클라이언트 연결 종료"""
        await self.client.aclose()

    async def get(self, path: str, **kwargs) -> Any:
        """Low-level GET helper (returns decoded JSON)."""
        response = await self.client.get(path, **kwargs)
        response.raise_for_status()
        if not response.text:
            return {}
        return response.json()

    async def check_health(self) -> bool:
        """i18n API 상태 확인"""
        try:
            response = await self.client.get("/health")
            response.raise_for_status()
            return True
        except Exception as e:
            logger.error(f"i18n API health check failed: {e}")
            return False

    async def fetch_translations(self, locales: Optional[Sequence[str]] = None) -> LocaleResponse:
        """
        Fetch translations for an ordered locale list.

        Without locales the fixed endpoint is used. A fixed-form response
        (bare key -> string table) is wrapped as the default locale.
        """
        path = I18N_PATH
        if locales:
            path = f"{I18N_PATH}/{format_locale_request(locales)}"

        payload = await self.get(path)
        if isinstance(payload, dict) and "lookup" in payload and "locale" in payload:
            return LocaleResponse.model_validate(payload)

        return self._wrap_fixed_lookup(payload)

    def _wrap_fixed_lookup(self, payload: Dict[str, Any]) -> LocaleResponse:
        locale = self.default_locale
        return LocaleResponse(
            language=language_of(locale),
            locale=locale,
            lookup=coerce_translation_table(payload),
            supported_locales=[locale],
        )
