"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from access_audit.api.v1 import api_router
from access_audit.core.config import get_settings
from access_audit.schemas.common import HealthResponse
from access_audit.services.exceptions import (
    AuthorizationDenied,
    NotFoundError,
    ServiceError,
    ValidationError,
)

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # Note: Schema management happens outside this service
    # from access_audit.database import init_db
    # await init_db()
    yield


app = FastAPI(
    title=settings.app_name,
    description="Permission checks and an append-only audit trail for role-based access control",
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


# Global exception handlers for service layer exceptions.
# Bodies are generic: no identifiers, storage messages or tracebacks.
@app.exception_handler(AuthorizationDenied)
async def authorization_denied_handler(request: Request, exc: AuthorizationDenied):
    """Convert AuthorizationDenied to 403 response."""
    return JSONResponse(status_code=403, content={"detail": AuthorizationDenied.MESSAGE})


@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Convert NotFoundError to 404 response."""
    return JSONResponse(status_code=404, content={"detail": f"{exc.entity} not found"})


@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    """Convert ValidationError to 400 response."""
    return JSONResponse(status_code=400, content={"detail": "Bad request"})


@app.exception_handler(ServiceError)
async def service_exception_handler(request: Request, exc: ServiceError):
    """Convert any other ServiceError (storage failures included) to 500 response."""
    logger.error(f"Unhandled service error: {exc.message}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health", response_model=HealthResponse, tags=["Health"])
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
