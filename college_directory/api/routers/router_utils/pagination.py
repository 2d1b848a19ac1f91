"""
Pagination query parameters.

Resolves limit/offset against the configured page size bounds.

Dependencies: fastapi, college_directory.configs
System role: Shared list endpoint parameters
"""

from dataclasses import dataclass

from fastapi import Depends, HTTPException, Query, status

from college_directory.api.deps.dependencies import get_settings_dependency
from college_directory.configs import Settings


@dataclass(frozen=True)
class PageParams:
    """Resolved page window."""

    limit: int
    offset: int


def get_page_params(
    limit: int | None = Query(None, ge=1, description="Page size"),
    offset: int = Query(0, ge=0, description="Number of items to skip"),
    settings: Settings = Depends(get_settings_dependency),
) -> PageParams:
    """
    Build the page window for a list endpoint.

    Raises:
        HTTPException(400): limit exceeds the configured maximum
    """
    if limit is None:
        limit = settings.api.default_page_size
    if limit > settings.api.max_page_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"limit cannot exceed {settings.api.max_page_size}",
        )
    return PageParams(limit=limit, offset=offset)
