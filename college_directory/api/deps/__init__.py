"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_directory_service,
    get_repository,
    get_search_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_directory_service",
    "get_repository",
    "get_search_service",
    "get_service_cache",
    "get_settings_dependency",
]
