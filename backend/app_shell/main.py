"""
Application shell entry point

Boots the reference UI runtime against the local translation store and
optionally refreshes the translations from the i18n API.

    python -m app_shell.main --refresh --locales "de-DE;en-US"
    python -m app_shell.main --key some.button --key some.label
"""

# Load environment variables first (before other imports)
from dotenv import load_dotenv
load_dotenv()

import argparse
import asyncio
import json
import sys
from typing import List, Optional

import httpx

from app_shell.bootstrap import bootstrap
from app_shell.runtime import TranslationRuntime
from app_shell.services.i18n_client import I18nApiClient
from shared.config.settings import get_settings
from shared.utils.app_logger import configure_logging, get_shell_logger
from shared.utils.language import parse_locale_request

logger = get_shell_logger("main")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Boot the UI shell with persisted translations.")
    parser.add_argument("--refresh", action="store_true", help="Fetch translations from the i18n API")
    parser.add_argument(
        "--locales",
        default=None,
        help="Semicolon-delimited locale preference list (e.g. 'en-US;de-DE')",
    )
    parser.add_argument("--api-url", default=None, help="i18n API base URL (defaults to settings)")
    parser.add_argument(
        "--key",
        action="append",
        default=[],
        help="Translation key to print (repeatable); prints the whole table when omitted",
    )
    return parser.parse_args(argv)


async def _refresh(
    runtime: TranslationRuntime,
    api_url: Optional[str],
    locales: Optional[str],
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    client = I18nApiClient(base_url=api_url, transport=transport)
    try:
        requested = parse_locale_request(locales) if locales else None
        await runtime.refresh_translations(client, requested)
    finally:
        await client.close()


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    app_settings = get_settings()
    configure_logging(app_settings.log_level, json_format=app_settings.log_format == "json")

    runtime = bootstrap(TranslationRuntime, app_settings=app_settings)

    if args.refresh:
        logger.info(f"Refreshing translations from {args.api_url or app_settings.i18n_api.base_url}")
        asyncio.run(_refresh(runtime, args.api_url, args.locales))

    if args.key:
        output = {key: runtime.translate(key) for key in args.key}
    else:
        output = runtime.translations
    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
