"""
Student API endpoints.

Routes:
- GET /students - Flattened students across classes
- GET /students/{student_id} - First student with this ID

Dependencies: college_directory.application.services, college_directory.models
System role: Flattened student HTTP API
"""

from fastapi import APIRouter, Depends

from college_directory.api.deps.dependencies import get_directory_service
from college_directory.application.services import DirectoryService
from college_directory.models.common import ErrorResponse, PaginatedResponse, paginate
from college_directory.models.listing import StudentRow

from .router_utils import PageParams, get_page_params, handle_directory_errors

router = APIRouter(
    prefix="/students",
    tags=["students"],
    responses={404: {"model": ErrorResponse}},
)


@router.get("", response_model=PaginatedResponse[StudentRow])
@handle_directory_errors
async def list_students(
    page: PageParams = Depends(get_page_params),
    directory_service: DirectoryService = Depends(get_directory_service),
) -> PaginatedResponse[StudentRow]:
    """List every student with its class."""
    return paginate(directory_service.list_students(), page.limit, page.offset)


@router.get("/{student_id}", response_model=StudentRow)
@handle_directory_errors
async def get_student(
    student_id: int,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> StudentRow:
    """
    Get student by ID (first match in dataset order).

    Raises:
        HTTPException(404): Student not found
    """
    return directory_service.get_student(student_id)
