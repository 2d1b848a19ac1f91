"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: college_directory.configs, college_directory.application, college_directory.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from college_directory.application.services import DirectoryService, SearchService
from college_directory.boundary.dataset.repository import HierarchyRepository
from college_directory.configs import Settings, get_settings


class ServiceCache:
    """Container for the process-wide hierarchy repository."""

    def __init__(self):
        self._repository = None

    @property
    def repository(self) -> HierarchyRepository:
        """Get cached repository, loading the dataset on first access."""
        if self._repository is None:
            self._repository = HierarchyRepository.from_settings(get_settings())
        return self._repository

    def clear(self) -> None:
        """Drop the loaded dataset; the next access reloads it."""
        self._repository = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_repository() -> HierarchyRepository:
    """
    Get the loaded hierarchy repository.

    Returns:
        HierarchyRepository: Repository shared by every request

    Raises:
        DatasetLoadError: If the dataset cannot be loaded
    """
    return get_service_cache().repository


def get_directory_service(
    repository: HierarchyRepository = Depends(get_repository),
) -> DirectoryService:
    """
    Get directory service instance.

    Args:
        repository: Hierarchy repository (injected via Depends)

    Returns:
        DirectoryService: Directory query service
    """
    return DirectoryService(repository=repository)


def get_search_service(
    repository: HierarchyRepository = Depends(get_repository),
) -> SearchService:
    """
    Get search service instance.

    Args:
        repository: Hierarchy repository (injected via Depends)

    Returns:
        SearchService: Name search service
    """
    return SearchService(repository=repository)
