"""
Language / locale utilities for locale-shell
"""

from __future__ import annotations

from typing import Iterable, List, Optional

DEFAULT_LOCALE = "en-US"
LOCALE_SEPARATOR = ";"
SUBTAG_SEPARATOR = "-"


def get_default_locale() -> str:
    """
    Get default locale.

    Returns:
        Default locale identifier
    """
    return DEFAULT_LOCALE


def parse_locale_request(raw: Optional[str], default: Optional[str] = None) -> List[str]:
    """
    Parse the transport form of a locale preference list.

    "en-US;de-DE" -> ["en-US", "de-DE"]. Whitespace around entries is
    stripped and empty entries are ignored; when nothing remains the
    default locale is returned as the only entry.
    """
    fallback = default or get_default_locale()
    if not raw:
        return [fallback]

    locales = [part.strip() for part in str(raw).split(LOCALE_SEPARATOR)]
    locales = [part for part in locales if part]
    return locales or [fallback]


def format_locale_request(locales: Iterable[str]) -> str:
    """Join locales into the semicolon-delimited transport form."""
    return LOCALE_SEPARATOR.join(str(locale).strip() for locale in locales if str(locale).strip())


def primary_locale(locales: List[str], default: Optional[str] = None) -> str:
    """First entry of a locale preference list (default when empty)."""
    if not locales:
        return default or get_default_locale()
    return locales[0]


def language_of(locale: str) -> str:
    """
    Primary language subtag of a locale.

    Everything before the first "-", or the whole string when there is no
    separator ("en-US" -> "en", "de" -> "de"). No case folding.
    """
    return str(locale).split(SUBTAG_SEPARATOR, 1)[0]
