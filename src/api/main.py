"""FastAPI application entry point for the EcoTrack scoring service."""

import logging

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.scoring import router as scoring_router
from src.config.settings import get_settings

APP_VERSION = "0.1.0"

settings = get_settings()

_LOG_NAME_TO_LEVEL: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# --- Structured logging ---
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if settings.ENVIRONMENT == "dev"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        _LOG_NAME_TO_LEVEL[settings.LOG_LEVEL.value],
    ),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger()

# --- FastAPI app ---
app = FastAPI(
    title="EcoTrack Scoring API",
    description="ESG self-assessment scoring, benchmarks and suggestions.",
    version=APP_VERSION,
)

# --- CORS middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.ENVIRONMENT == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Routers ---
app.include_router(scoring_router)

logger.info(
    "app_configured",
    version=APP_VERSION,
    environment=settings.ENVIRONMENT.value,
)


# --- Infrastructure Endpoints (global) ---


@app.get("/health")
async def health_check() -> dict:
    """Liveness probe. The service has no backing stores to check."""
    return {
        "status": "ok",
        "version": APP_VERSION,
        "environment": settings.ENVIRONMENT.value,
    }


@app.get("/api/version")
async def get_version() -> dict[str, str]:
    """Return application name, version, and environment."""
    return {
        "name": "EcoTrack",
        "version": APP_VERSION,
        "environment": settings.ENVIRONMENT.value,
    }
