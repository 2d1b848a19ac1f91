"""
Department API endpoints.

Routes:
- GET /departments - Flattened departments across colleges
- GET /departments/{department_id} - First department with this ID

Dependencies: college_directory.application.services, college_directory.models
System role: Flattened department HTTP API
"""

from fastapi import APIRouter, Depends

from college_directory.api.deps.dependencies import get_directory_service
from college_directory.application.services import DirectoryService
from college_directory.models.common import ErrorResponse, PaginatedResponse, paginate
from college_directory.models.hierarchy import Department
from college_directory.models.listing import DepartmentRow

from .router_utils import PageParams, get_page_params, handle_directory_errors

router = APIRouter(
    prefix="/departments",
    tags=["departments"],
    responses={404: {"model": ErrorResponse}},
)


@router.get("", response_model=PaginatedResponse[DepartmentRow])
@handle_directory_errors
async def list_departments(
    page: PageParams = Depends(get_page_params),
    directory_service: DirectoryService = Depends(get_directory_service),
) -> PaginatedResponse[DepartmentRow]:
    """List every department with its college."""
    return paginate(directory_service.list_departments(), page.limit, page.offset)


@router.get("/{department_id}", response_model=Department)
@handle_directory_errors
async def get_department(
    department_id: int,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> Department:
    """
    Get department by ID (first match in dataset order).

    Raises:
        HTTPException(404): Department not found
    """
    return directory_service.get_department(department_id)
