"""
Health check API endpoints.

Routes: GET /health, GET /health/dataset

Dependencies: college_directory.application
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from college_directory.api.deps.dependencies import get_directory_service
from college_directory.application.services import DirectoryService
from college_directory.models.listing import DirectoryCounts

from .router_utils import handle_directory_errors


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class DatasetHealthResponse(HealthResponse):
    """Dataset health check with per-level totals."""

    counts: DirectoryCounts


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/dataset", response_model=DatasetHealthResponse)
@handle_directory_errors
async def health_check_dataset(
    directory_service: DirectoryService = Depends(get_directory_service),
) -> DatasetHealthResponse:
    """Dataset health check; 503 is returned by the app when loading fails."""
    return DatasetHealthResponse(
        status="healthy",
        message="Dataset loaded",
        counts=directory_service.counts(),
    )
