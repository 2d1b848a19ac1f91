"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from college_directory.configs.api import ApiSettings
from college_directory.configs.base import BaseSettings
from college_directory.configs.dataset import DatasetSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    dataset: DatasetSettings = Field(default_factory=DatasetSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from college_directory.configs import get_settings
        settings = get_settings()
    """
    return Settings()
