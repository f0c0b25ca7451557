"""Property Back Office - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backoffice.core.config import get_settings
from backoffice.core.env_validation import validate_environment
from backoffice.core.errors import register_error_handlers
from backoffice.core.logging_config import configure_logging
from backoffice.routers import (
    locations_router,
    tenants_router,
    vendors_router,
    notices_router,
    move_ins_router,
    move_outs_router,
    notice_and_evictions_router,
    payments_router,
    vendor_tasks_router,
)

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: hard-fails (exit 1) if required configuration is missing
    configure_logging(settings.log_level)
    validate_environment()
    logger.info(f"[STARTUP] {settings.app_name} ready, CORS origins: {allowed_origins}")
    yield
    # Shutdown


app = FastAPI(
    title=settings.app_name,
    description="Back office for move-ins, move-outs, notices and evictions, payments and vendor tasks.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS - configured from ALLOWED_ORIGINS; wildcard is rejected outside debug by env_validation.py
allowed_origins = [origin.strip() for origin in settings.allowed_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

register_error_handlers(app)

# API v1 routers
app.include_router(locations_router, prefix=settings.api_v1_prefix)
app.include_router(tenants_router, prefix=settings.api_v1_prefix)
app.include_router(vendors_router, prefix=settings.api_v1_prefix)
app.include_router(notices_router, prefix=settings.api_v1_prefix)
app.include_router(move_ins_router, prefix=settings.api_v1_prefix)
app.include_router(move_outs_router, prefix=settings.api_v1_prefix)
app.include_router(notice_and_evictions_router, prefix=settings.api_v1_prefix)
app.include_router(payments_router, prefix=settings.api_v1_prefix)
app.include_router(vendor_tasks_router, prefix=settings.api_v1_prefix)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs" if settings.debug else "Disabled in production",
    }
