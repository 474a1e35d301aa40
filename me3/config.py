"""Application configuration via environment variables, and logging setup."""

import logging
import sys
from functools import lru_cache
from typing import Optional

import structlog
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Service settings loaded from environment variables.

    Protocol limits are not configurable here; they live in
    ``me3.validators.constraints``.
    """

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Requests
    MAX_DOCUMENT_BYTES: int = 1_000_000
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog for the service and the CLI. Logs go to stderr."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
