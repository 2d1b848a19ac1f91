"""
Dataset configuration settings.

Location of the mock hierarchy document and load-time checks.

Dependencies: pydantic, pydantic_settings
System role: Mock dataset configuration
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatasetSettings(BaseSettings):
    """Settings for the in-memory hierarchy dataset."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATASET_",
        case_sensitive=False,
        extra="ignore",
    )

    path: Path | None = Field(
        default=None,
        description="JSON dataset to load instead of the packaged mock data",
    )
    warn_on_duplicate_ids: bool = Field(
        default=True,
        description="Log a warning for every id collision found at load time",
    )
