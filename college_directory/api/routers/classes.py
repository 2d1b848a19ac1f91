"""
Class API endpoints.

Routes:
- GET /classes - Flattened classes across departments
- GET /classes/{class_id} - First class with this ID
- GET /classes/{class_id}/statistics - Age, gender and grade aggregates

Dependencies: college_directory.application.services, college_directory.models
System role: Flattened class HTTP API
"""

from fastapi import APIRouter, Depends

from college_directory.api.deps.dependencies import get_directory_service
from college_directory.application.services import DirectoryService
from college_directory.models.common import ErrorResponse, PaginatedResponse, paginate
from college_directory.models.hierarchy import SchoolClass
from college_directory.models.listing import ClassRow, ClassStatistics

from .router_utils import PageParams, get_page_params, handle_directory_errors

router = APIRouter(
    prefix="/classes",
    tags=["classes"],
    responses={404: {"model": ErrorResponse}},
)


@router.get("", response_model=PaginatedResponse[ClassRow])
@handle_directory_errors
async def list_classes(
    page: PageParams = Depends(get_page_params),
    directory_service: DirectoryService = Depends(get_directory_service),
) -> PaginatedResponse[ClassRow]:
    """List every class with its department."""
    return paginate(directory_service.list_classes(), page.limit, page.offset)


@router.get("/{class_id}", response_model=SchoolClass)
@handle_directory_errors
async def get_class(
    class_id: int,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> SchoolClass:
    """
    Get class by ID (first match in dataset order).

    Raises:
        HTTPException(404): Class not found
    """
    return directory_service.get_class(class_id)


@router.get("/{class_id}/statistics", response_model=ClassStatistics)
@handle_directory_errors
async def get_class_statistics(
    class_id: int,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> ClassStatistics:
    """
    Aggregate the students of a class.

    Raises:
        HTTPException(404): Class not found
    """
    return directory_service.get_class_statistics(class_id)
