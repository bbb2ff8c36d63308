"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from blogger.configs.base import BaseSettings
from blogger.configs.blog import BlogSettings
from blogger.configs.database import DatabaseSettings
from blogger.configs.server import ServerSettings
from blogger.configs.session import SessionSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    environment: str = Field(
        default="development",
        description="Deployment the blog runs in (development, production)",
    )
    debug: bool = Field(
        default=False,
        description="Run FastAPI in debug mode (tracebacks in error pages)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging()",
    )

    # Aggregated settings
    server: ServerSettings = Field(default_factory=ServerSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)
    blog: BlogSettings = Field(default_factory=BlogSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from blogger.configs import get_settings
        settings = get_settings()
    """
    return Settings()
