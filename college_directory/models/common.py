"""
Common response models and utilities.

Generic response wrappers and error schemas.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str = Field(description="Error message")


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic paginated response wrapper."""

    items: list[T]
    total: int
    limit: int
    offset: int
    has_more: bool = False


def paginate(items: list[T], limit: int, offset: int) -> PaginatedResponse[T]:
    """
    Slice a fully materialized list into a page.

    Args:
        items: Complete result list
        limit: Page size
        offset: Number of items to skip

    Returns:
        PaginatedResponse: Page with total count and has_more flag
    """
    page = items[offset:offset + limit]
    return PaginatedResponse(
        items=page,
        total=len(items),
        limit=limit,
        offset=offset,
        has_more=offset + len(page) < len(items),
    )
