"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_catalog.api.errors import install_exception_handlers
from product_catalog.api.v1 import api_router
from product_catalog.core.config import get_settings
from product_catalog.core.logging_config import configure_logging
from product_catalog.database import dispose_engine
from product_catalog.schemas.common import HealthResponse

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup; the schema is managed by Alembic
    configure_logging(settings)
    logger.info(f"Starting {settings.app_name} {settings.app_version}")
    yield
    # Shutdown
    await dispose_engine()


app = FastAPI(
    title=settings.app_name,
    description="Create, read, update, delete and list products by category",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS middleware - configurable via settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Error translation applies to the whole app, never to a subset of routes
install_exception_handlers(app)


@app.get("/health", tags=["Health"], response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", app=settings.app_name, version=settings.app_version)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "api": settings.api_v1_prefix,
    }


# Include API v1 router
app.include_router(api_router, prefix=settings.api_v1_prefix)
