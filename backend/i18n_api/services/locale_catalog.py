"""
Locale catalog for the mock i18n API

Resolves a semicolon-delimited locale request into a LocaleResponse. The
lookup table is the same static sample for every locale; requested locales
are not checked against the supported list.
"""

from __future__ import annotations

from typing import List, Optional

from shared.config.settings import I18nApiSettings
from shared.models.i18n import LocaleResponse, TranslationTable
from shared.utils.language import get_default_locale, language_of, parse_locale_request, primary_locale

SAMPLE_LOOKUP: TranslationTable = {
    "some.button": "Increment (API)",
    "some.label": "A simple counter",
    "some.search": "Browse...",
}

DEFAULT_SUPPORTED_LOCALES: List[str] = ["en-US", "de-DE"]


class LocaleCatalog:
    """Static translation catalog advertised by the mock API"""

    def __init__(
        self,
        lookup: Optional[TranslationTable] = None,
        supported_locales: Optional[List[str]] = None,
        default_locale: Optional[str] = None,
    ):
        self.lookup = dict(SAMPLE_LOOKUP if lookup is None else lookup)
        self.supported_locales = list(supported_locales or DEFAULT_SUPPORTED_LOCALES)
        self.default_locale = default_locale or get_default_locale()

    @classmethod
    def from_settings(cls, i18n_settings: I18nApiSettings) -> "LocaleCatalog":
        return cls(
            supported_locales=i18n_settings.supported_locales_list,
            default_locale=i18n_settings.i18n_default_locale,
        )

    def resolve(self, raw_locales: Optional[str] = None) -> LocaleResponse:
        """
        Build the response for a transport-form locale request.

        The first requested locale is the response locale; its language is
        the part before the first "-" (the whole string when there is none).
        """
        locales = parse_locale_request(raw_locales, default=self.default_locale)
        locale = primary_locale(locales, default=self.default_locale)
        return LocaleResponse(
            language=language_of(locale),
            locale=locale,
            lookup=dict(self.lookup),
            supported_locales=list(self.supported_locales),
        )

    def fixed_lookup(self) -> TranslationTable:
        """Bare lookup table served by the fixed (single-locale) form"""
        return dict(self.lookup)
