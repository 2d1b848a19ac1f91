"""Pydantic models for the directory records and API schemas."""

from college_directory.models.common import ErrorResponse, PaginatedResponse, paginate
from college_directory.models.hierarchy import (
    College,
    Department,
    Gender,
    SchoolClass,
    Student,
)
from college_directory.models.listing import (
    ClassRow,
    ClassStatistics,
    CollegeSummary,
    DepartmentRow,
    DirectoryCounts,
    StudentRow,
)
from college_directory.models.search import SearchHit, SearchKind, SearchResponse

__all__ = [
    "ClassRow",
    "ClassStatistics",
    "College",
    "CollegeSummary",
    "Department",
    "DepartmentRow",
    "DirectoryCounts",
    "ErrorResponse",
    "Gender",
    "PaginatedResponse",
    "SchoolClass",
    "SearchHit",
    "SearchKind",
    "SearchResponse",
    "Student",
    "StudentRow",
    "paginate",
]
