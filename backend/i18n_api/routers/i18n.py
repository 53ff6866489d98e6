"""
i18n router - translation payloads for the UI shell during development
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from i18n_api.dependencies import get_app_settings, get_locale_catalog
from i18n_api.services.locale_catalog import LocaleCatalog
from shared.config.settings import ApplicationSettings
from shared.models.i18n import LocaleResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/i18n", tags=["i18n"])


@router.get(
    "",
    summary="Default translations",
    description="Translations for the default locale, or the bare lookup table in fixed mode.",
)
@router.get("/", include_in_schema=False)
async def get_default_translations(
    catalog: LocaleCatalog = Depends(get_locale_catalog),
    app_settings: ApplicationSettings = Depends(get_app_settings),
) -> Dict[str, Any]:
    if app_settings.i18n_api.i18n_legacy_fixed_lookup:
        return catalog.fixed_lookup()
    return catalog.resolve(None).model_dump(by_alias=True)


@router.get(
    "/{locales}",
    response_model=LocaleResponse,
    summary="Translations for a locale list",
    description="`locales` is a semicolon-delimited preference list, primary locale first (e.g. `en-US;de-DE`).",
)
async def get_translations(
    locales: str,
    catalog: LocaleCatalog = Depends(get_locale_catalog),
) -> LocaleResponse:
    response = catalog.resolve(locales)
    logger.debug(f"Resolved locale request '{locales}' -> {response.locale}")
    return response
