"""ISLBridge API - FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from islbridge import __version__
from islbridge.core.errors import (
    GlossNotFoundError,
    ISLBridgeError,
    PlaybackError,
)
from islbridge.core.log import configure_logging

from .routes import translate_router, signs_router
from .dependencies import get_settings, get_sign_catalog
from .schemas import HealthResponse

logger = logging.getLogger(__name__)

# Status codes for domain errors that reach the app unhandled
ERROR_STATUS = {
    GlossNotFoundError: 404,
    PlaybackError: 400,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    config = get_settings()
    configure_logging(config.log_level)
    logger.info("ISLBridge API starting (env=%s)", config.env.value)
    logger.info("  Sign catalog: %d signs", len(get_sign_catalog()))
    logger.info("  Playback: %.2fx, idle clip '%s'", config.playback_speed, config.idle_clip)

    yield

    # Shutdown
    logger.info("ISLBridge API shutting down...")


app = FastAPI(
    title="ISLBridge API",
    description="REST API for English to Indian Sign Language gloss translation",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
config = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(translate_router)
app.include_router(signs_router)


@app.exception_handler(ISLBridgeError)
async def islbridge_error_handler(request: Request, exc: ISLBridgeError):
    """Render domain errors with the same shape as HTTPException details."""
    status_code = 500
    for error_cls, code in ERROR_STATUS.items():
        if isinstance(exc, error_cls):
            status_code = code
            break
    if status_code >= 500:
        logger.error("Unhandled error on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.to_dict()})


@app.get("/api/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """Check if the API is healthy and all services are running."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        services={
            "api": "running",
            "translation": "available",
            "catalog": f"{len(get_sign_catalog())} signs",
        },
    )


@app.get("/", include_in_schema=False)
async def root():
    """Point the root at the API documentation."""
    return {
        "message": f"ISLBridge API v{__version__}",
        "docs": "/docs",
        "health": "/api/health",
    }
