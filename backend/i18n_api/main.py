"""
Mock i18n API service

Development server for the UI shell:
- GET /api/i18n and /api/i18n/{locales} serve sample translations
  (mounted only in the development environment)
- the built UI (static directory) is served at / when it exists
- /health reports service status
"""

# Load environment variables first (before other imports)
from dotenv import load_dotenv
load_dotenv()

import json
import os
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from i18n_api.dependencies import get_app_settings
from i18n_api.routers import i18n
from shared.config.settings import ApplicationSettings, get_settings
from shared.services.service_factory import ServiceInfo, create_fastapi_service, run_service
from shared.utils.app_logger import configure_logging, get_i18n_api_logger

logger = get_i18n_api_logger("main")


def build_service_info(app_settings: ApplicationSettings) -> ServiceInfo:
    return ServiceInfo(
        name="I18nMockAPI",
        title="Mock i18n API",
        description="Development translation service for the UI shell",
        version="1.0.0",
        port=app_settings.i18n_api.i18n_api_port,
        host=app_settings.i18n_api.i18n_api_host,
        tags=[{"name": "i18n", "description": "Translation payloads"}],
    )


def create_app(app_settings: Optional[ApplicationSettings] = None) -> FastAPI:
    """
    Create the mock i18n API application.

    The translation routes exist only in the development environment; any
    other environment gets a plain service with health endpoints.
    """
    app_settings = app_settings or get_settings()
    logger.info("i18n_api.settings %s", json.dumps(app_settings.summary(), indent=2))

    static_dir = app_settings.i18n_api.i18n_static_dir
    serve_static = bool(static_dir) and os.path.isdir(static_dir)

    app = create_fastapi_service(
        build_service_info(app_settings),
        include_root_endpoint=not serve_static,
        app_settings=app_settings,
    )
    app.dependency_overrides[get_app_settings] = lambda: app_settings

    if app_settings.is_development:
        app.include_router(i18n.router)
        logger.info("Mock i18n routes mounted at /api/i18n")
    else:
        logger.info(f"Mock i18n routes disabled in {app_settings.environment.value} environment")

    # Mounted last so API routes take precedence over static files
    if serve_static:
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info(f"Serving static content from {static_dir}")

    return app


configure_logging(get_settings().log_level, json_format=get_settings().log_format == "json")
app = create_app()


if __name__ == "__main__":
    run_service(
        app,
        build_service_info(get_settings()),
        "i18n_api.main:app",
        reload=get_settings().debug,
        app_settings=get_settings(),
    )
