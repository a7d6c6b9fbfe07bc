"""Freezer inventory FastAPI app: CORS, error handlers, /api routes, Swagger."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from .config.settings import settings
from .config.database import init_db
from .config.cors import setup_cors
from .config.log import configure_logging
from .middleware.errors import register_exception_handlers
from .routes import router as api_router

# Register the SQLAlchemy models (for create_all in init_db)
from . import models  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown: logging and table creation."""
    configure_logging()
    await init_db()
    logger.info("%s v%s started", settings.app_name, settings.app_version)
    yield


def custom_openapi(app: FastAPI):
    """OpenAPI schema for Swagger UI."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=settings.app_name,
        version=settings.app_version,
        description="Freezer inventory backend: freezers, drawers, products and stored items with expiration dates.",
        routes=app.routes,
    )
    openapi_schema["servers"] = [{"url": "/", "description": "Current"}]
    app.openapi_schema = openapi_schema
    return app.openapi_schema


app = FastAPI(
    title=settings.app_name,
    description="Freezer inventory REST API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

setup_cors(app)
register_exception_handlers(app)
app.include_router(api_router)
app.openapi = lambda: custom_openapi(app)


@app.get("/health")
async def health():
    return {"status": "ok", "service": settings.app_name}
