"""
Service Factory Module

Provides common FastAPI service creation utilities (CORS, request logging,
health endpoints, uvicorn configuration).
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from shared.config.settings import ApplicationSettings, get_settings
from shared.models.responses import ApiResponse
from shared.utils.app_logger import JSON_FORMAT

logger = logging.getLogger(__name__)


class ServiceInfo:
    """Service configuration container"""

    def __init__(
        self,
        name: str,
        title: str,
        description: str,
        version: str = "1.0.0",
        port: int = 8000,
        host: str = "localhost",
        tags: Optional[List[Dict[str, str]]] = None
    ):
        self.name = name
        self.title = title
        self.description = description
        self.version = version
        self.port = port
        self.host = host
        self.tags = tags or []


def create_fastapi_service(
    service_info: ServiceInfo,
    include_root_endpoint: bool = True,
    app_settings: Optional[ApplicationSettings] = None,
) -> FastAPI:
    """
    FastAPI 앱 생성 - CORS, 요청 로깅, /health 및 / 엔드포인트를 settings 기준으로 구성.

    include_root_endpoint=False is used when something else (e.g. a static
    UI mount) owns "/".
    """
    app_settings = app_settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"{service_info.name} service starting")
        yield
        logger.info(f"{service_info.name} service stopped")

    openapi_tags = [
        {"name": "Health", "description": "Health check and service status"}
    ]
    if service_info.tags:
        openapi_tags.extend(service_info.tags)

    app = FastAPI(
        title=service_info.title,
        description=service_info.description,
        version=service_info.version,
        lifespan=lifespan,
        openapi_tags=openapi_tags,
        debug=app_settings.debug,
    )

    _configure_cors(app, app_settings)
    _add_logging_middleware(app)
    _add_health_check(app, service_info, include_root_endpoint)

    logger.info(f"{service_info.name} FastAPI app created")

    return app


def _configure_cors(app: FastAPI, app_settings: ApplicationSettings) -> None:
    """Configure CORS middleware from settings"""
    if not app_settings.services.cors_enabled:
        logger.info("CORS disabled")
        return

    origins = app_settings.services.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(f"CORS enabled with origins: {origins}")


def _add_logging_middleware(app: FastAPI) -> None:
    """Log one line per request (method, path, status, elapsed ms)"""
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1fms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            extra={"path": request.url.path, "status_code": response.status_code},
        )
        return response


def _add_health_check(app: FastAPI, service_info: ServiceInfo, include_root_endpoint: bool) -> None:
    if include_root_endpoint:
        @app.get("/", tags=["Health"])
        async def root():
            """루트 엔드포인트 - 서비스 정보"""
            return {
                "service": service_info.name,
                "title": service_info.title,
                "version": service_info.version,
                "description": service_info.description,
                "status": "running"
            }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """헬스 체크 (ApiResponse 형식)"""
        return ApiResponse.health_check(
            service_name=service_info.name,
            version=service_info.version,
            description=service_info.description
        ).to_dict()


def create_uvicorn_config(
    service_info: ServiceInfo,
    reload: bool = True,
    app_settings: Optional[ApplicationSettings] = None,
) -> Dict[str, Any]:
    """
    Build the keyword arguments for uvicorn.run().

    Log level and format follow LOG_LEVEL / LOG_FORMAT so the server's own
    records look like the application's.
    """
    app_settings = app_settings or get_settings()
    config = {
        "host": service_info.host,
        "port": service_info.port,
        "reload": reload,
        "log_config": _get_logging_config(
            service_info.name,
            level=app_settings.log_level.upper(),
            json_format=app_settings.log_format == "json",
        ),
    }
    logger.info(f"{service_info.name} listening on http://{service_info.host}:{service_info.port}")
    return config


def _get_logging_config(service_name: str, level: str = "INFO", json_format: bool = False) -> Dict[str, Any]:
    if json_format:
        formatters = {
            "default": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "fmt": JSON_FORMAT,
            },
            "access": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "fmt": JSON_FORMAT,
            },
        }
    else:
        formatters = {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": "%(levelprefix)s %(asctime)s - %(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": '%(levelprefix)s %(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s',
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        }

    handlers = {
        "default": {"formatter": "default", "class": "logging.StreamHandler", "stream": "ext://sys.stderr"},
        "access": {"formatter": "access", "class": "logging.StreamHandler", "stream": "ext://sys.stdout"},
    }
    loggers = {
        "uvicorn": {"handlers": ["default"], "level": level, "propagate": False},
        "uvicorn.error": {"level": level},
        "uvicorn.access": {"handlers": ["access"], "level": level, "propagate": False},
        service_name.lower(): {"handlers": ["default"], "level": level, "propagate": False},
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": handlers,
        "loggers": loggers,
    }


def run_service(
    app: FastAPI,
    service_info: ServiceInfo,
    app_module_path: str,
    reload: bool = True,
    app_settings: Optional[ApplicationSettings] = None,
) -> None:
    """
    Run the service under uvicorn.

    With reload enabled uvicorn needs the import string (e.g.
    "i18n_api.main:app") instead of the app object.
    """
    config = create_uvicorn_config(service_info, reload, app_settings)
    uvicorn.run(app_module_path if reload else app, **config)
