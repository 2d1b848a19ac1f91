"""
College API endpoints.

Routes:
- GET /colleges - List colleges with per-level counts
- GET /colleges/{college_id} - Get nested college
- GET /colleges/{college_id}/departments - List departments of a college
- GET /colleges/{college_id}/departments/{department_id} - Get department
- GET /colleges/{college_id}/departments/{department_id}/classes - List classes
- GET /colleges/{college_id}/departments/{department_id}/classes/{class_id} - Get class
- GET /colleges/{college_id}/departments/{department_id}/classes/{class_id}/students - List students

Dependencies: college_directory.application.services, college_directory.models
System role: Route-parameter navigation down the hierarchy
"""

import logging

from fastapi import APIRouter, Depends

from college_directory.api.deps.dependencies import get_directory_service
from college_directory.application.services import DirectoryService
from college_directory.models.common import ErrorResponse, PaginatedResponse, paginate
from college_directory.models.hierarchy import College, Department, SchoolClass
from college_directory.models.listing import (
    ClassRow,
    CollegeSummary,
    DepartmentRow,
    StudentRow,
)

from .router_utils import PageParams, get_page_params, handle_directory_errors

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/colleges",
    tags=["colleges"],
    responses={404: {"model": ErrorResponse}},
)


@router.get("", response_model=PaginatedResponse[CollegeSummary])
@handle_directory_errors
async def list_colleges(
    page: PageParams = Depends(get_page_params),
    directory_service: DirectoryService = Depends(get_directory_service),
) -> PaginatedResponse[CollegeSummary]:
    """
    List colleges with pagination.

    Args:
        page: Resolved limit/offset
        directory_service: Injected DirectoryService

    Returns:
        PaginatedResponse[CollegeSummary]: Page of colleges
    """
    colleges = directory_service.list_colleges()

    logger.info(
        "Colleges retrieved successfully",
        extra={"count": len(colleges), "limit": page.limit, "offset": page.offset},
    )

    return paginate(colleges, page.limit, page.offset)


@router.get("/{college_id}", response_model=College)
@handle_directory_errors
async def get_college(
    college_id: int,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> College:
    """
    Get single college with all nested departments, classes and students.

    Raises:
        HTTPException(404): College not found
    """
    return directory_service.get_college(college_id)


@router.get("/{college_id}/departments", response_model=list[DepartmentRow])
@handle_directory_errors
async def list_college_departments(
    college_id: int,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> list[DepartmentRow]:
    """
    List departments of a college.

    Raises:
        HTTPException(404): College not found
    """
    return directory_service.list_college_departments(college_id)


@router.get("/{college_id}/departments/{department_id}", response_model=Department)
@handle_directory_errors
async def get_college_department(
    college_id: int,
    department_id: int,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> Department:
    """
    Get a department within its college.

    Raises:
        HTTPException(404): College or department not found
    """
    return directory_service.get_college_department(college_id, department_id)


@router.get(
    "/{college_id}/departments/{department_id}/classes",
    response_model=list[ClassRow],
)
@handle_directory_errors
async def list_department_classes(
    college_id: int,
    department_id: int,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> list[ClassRow]:
    """
    List classes of a department.

    Raises:
        HTTPException(404): College or department not found
    """
    return directory_service.list_department_classes(college_id, department_id)


@router.get(
    "/{college_id}/departments/{department_id}/classes/{class_id}",
    response_model=SchoolClass,
)
@handle_directory_errors
async def get_department_class(
    college_id: int,
    department_id: int,
    class_id: int,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> SchoolClass:
    """
    Get a class within its department.

    Raises:
        HTTPException(404): College, department or class not found
    """
    return directory_service.get_department_class(college_id, department_id, class_id)


@router.get(
    "/{college_id}/departments/{department_id}/classes/{class_id}/students",
    response_model=list[StudentRow],
)
@handle_directory_errors
async def list_class_students(
    college_id: int,
    department_id: int,
    class_id: int,
    directory_service: DirectoryService = Depends(get_directory_service),
) -> list[StudentRow]:
    """
    List students of a class.

    Raises:
        HTTPException(404): College, department or class not found
    """
    students = directory_service.list_class_students(college_id, department_id, class_id)

    logger.info(
        "Class students retrieved successfully",
        extra={"class_id": class_id, "student_count": len(students)},
    )

    return students
