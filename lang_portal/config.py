"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./lang_portal.db"
    DATABASE_ECHO: bool = False
    SQLITE_BUSY_TIMEOUT_SECONDS: float = 5.0

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Analytics
    ACTIVE_GROUP_WINDOW_DAYS: int = 30

    # Optional JSON file replacing the built-in study activity catalog
    STUDY_ACTIVITIES_FILE: Path | None = None

    @field_validator("ACTIVE_GROUP_WINDOW_DAYS", mode="after")
    @classmethod
    def validate_window(cls, value: int) -> int:
        """Active-group window must cover at least one day."""
        if value < 1:
            msg = "ACTIVE_GROUP_WINDOW_DAYS must be at least 1"
            raise ValueError(msg)
        return value

    @field_validator("SQLITE_BUSY_TIMEOUT_SECONDS", mode="after")
    @classmethod
    def validate_busy_timeout(cls, value: float) -> float:
        """Busy timeout cannot be negative."""
        if value < 0:
            msg = "SQLITE_BUSY_TIMEOUT_SECONDS cannot be negative"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
