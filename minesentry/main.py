"""
MineSentry API - FastAPI Application Entry Point

Backend for the illegal-mining risk dashboard: community reports,
alert subscriptions, the hotspot catalogue and a placeholder prediction.

DESIGN PRINCIPLES:
- One in-memory store per process, built here and injected into routes
- Validation happens before anything reaches the store
- Predictions are random placeholders, isolated from stored data
- Nothing is persisted across restarts
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from minesentry.core.log_config import configure_logging
from minesentry.core.settings import Settings, settings as default_settings
from minesentry.models.base import Location
from minesentry.models.report import ReportCategory, ReportCreate
from minesentry.models.validation import InputValidationError, field_details
from minesentry.routes import alerts, health, hotspots, reports, users
from minesentry.services.prediction import build_risk_predictor
from minesentry.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)


def seed_demo_report(storage: MemoryStorage) -> None:
    """Insert one demo report if the store is empty, so the dashboard never starts blank."""
    if storage.get_reports():
        logger.info("[STARTUP] Reports already present, skipping demo report")
        return

    report = storage.create_report(
        ReportCreate(
            location=Location(lat=5.2922, lng=-1.9833),
            description="Turbid, orange-brown river water downstream of excavation pits",
            category=ReportCategory.WATER_POLLUTION,
        ),
        user_id="demo",
        user_name="Demo Reporter",
    )
    logger.info(f"[STARTUP] Created demo report with ID: {report.id}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app_settings: Settings = app.state.settings
    configure_logging(app_settings.LOG_LEVEL)
    logger.info(f"Starting {app_settings.APP_NAME} v{app_settings.APP_VERSION}")

    if app_settings.SEED_DEMO_DATA:
        seed_demo_report(app.state.storage)

    yield

    logger.info(f"Shutting down {app_settings.APP_NAME}")


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(InputValidationError)
    async def input_validation_handler(request: Request, exc: InputValidationError):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.message} ({len(exc.details)} field errors)")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed path/query/body that FastAPI rejects before the handler runs."""
        details = field_details(exc.errors())
        logger.info(f"Rejected {request.method} {request.url.path}: {details}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request", "details": details},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"🔥 Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def create_app(
    app_settings: Optional[Settings] = None,
    storage: Optional[MemoryStorage] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        app_settings: Settings override (defaults to environment settings)
        storage: Storage engine to use (defaults to a fresh MemoryStorage)
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        description="Illegal-mining risk dashboard: community reports, alerts and hotspots",
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.storage = storage if storage is not None else MemoryStorage()
    app.state.predictor = build_risk_predictor(app_settings)

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(reports.router)
    app.include_router(alerts.router)
    app.include_router(users.router)
    app.include_router(hotspots.router)

    @app.get("/")
    async def root():
        """
        Root endpoint - API information.
        """
        return {
            "service": app_settings.APP_NAME,
            "version": app_settings.APP_VERSION,
            "status": "running",
            "docs": "/docs",
            "health": "/health",
            "reports": "/api/reports",
        }

    return app


app = create_app()
