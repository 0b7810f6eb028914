"""
Configuration settings for the combined data service.

This module handles environment variable loading and configuration management
using Pydantic for validation and type safety.
"""

from enum import Enum
from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Levels understood by both loguru and uvicorn."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """
    Combined data service configuration settings.

    All settings can be overridden via environment variables prefixed with
    ``COMBINED_DATA_`` (e.g. ``COMBINED_DATA_LISTEN_PORT=9000``).
    """

    model_config = SettingsConfigDict(
        env_prefix="COMBINED_DATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream endpoints
    comments_url: str = Field(
        default="https://jsonplaceholder.typicode.com/comments",
        description="URL of the comments collection"
    )
    posts_url: str = Field(
        default="https://jsonplaceholder.typicode.com/posts",
        description="URL of the posts collection"
    )
    users_url: str = Field(
        default="https://jsonplaceholder.typicode.com/users",
        description="URL of the users collection"
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for each upstream request"
    )

    # Server Configuration
    listen_host: str = Field(
        default="0.0.0.0",
        description="Host the HTTP server binds to"
    )
    listen_port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port the HTTP server listens on"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Logging Configuration
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path of a rotating log file"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Configured settings instance
    """
    return Settings()
