"""me3 validator service — validates me.json documents over HTTP.

Main FastAPI application with lifespan logging, CORS, and global error handling.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from me3 import __version__
from me3.api.router import api_router
from me3.config import configure_logging, get_settings
from me3.validators.constraints import ME3_FILENAME, ME3_VERSION

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    logger.info("app_starting", debug=settings.DEBUG, protocol_version=ME3_VERSION)

    yield

    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="me3 Validator",
    description=(
        "Validation service for me3 profiles: portable personal websites "
        "described by a single me.json file."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

# Profiles are public data; any origin may validate.
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Service info."""
    return {
        "name": "me3 Validator",
        "version": __version__,
        "protocol_version": ME3_VERSION,
        "filename": ME3_FILENAME,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
