"""
HTTP API configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Server and pagination configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Uvicorn bind address, CORS and pagination limits."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Bind host for uvicorn")
    port: int = Field(default=8082, description="Bind port for uvicorn")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser",
    )
    default_page_size: int = Field(default=100, description="Default list page size")
    max_page_size: int = Field(default=500, description="Upper bound for the limit parameter")
