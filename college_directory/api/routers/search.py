"""
Search API endpoint.

Routes:
- GET /search?q=...&kind=...&limit=... - Name search across the hierarchy

Dependencies: college_directory.application.services, college_directory.models
System role: Search HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from college_directory.api.deps.dependencies import get_search_service
from college_directory.application.services import SearchService
from college_directory.application.services.search_service import DEFAULT_SEARCH_LIMIT
from college_directory.models.search import SearchKind, SearchResponse

from .router_utils import handle_directory_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=SearchResponse)
@handle_directory_errors
async def search(
    q: str = Query(..., description="Case-insensitive name substring"),
    kind: list[SearchKind] | None = Query(None, description="Restrict to these levels"),
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=1, le=500),
    search_service: SearchService = Depends(get_search_service),
) -> SearchResponse:
    """
    Search colleges, departments, classes and students by name.

    Raises:
        HTTPException(400): Blank query
    """
    result = search_service.search(q, kinds=kind, limit=limit)

    logger.info(
        "Search completed",
        extra={"query": q, "total": result.total, "returned": len(result.hits)},
    )

    return result
