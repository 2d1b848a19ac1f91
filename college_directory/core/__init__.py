"""
Core domain layer.

Exception hierarchy shared by the boundary, application and API layers.
"""

from college_directory.core.exceptions import (
    ClassNotFoundError,
    CollegeNotFoundError,
    DatasetLoadError,
    DepartmentNotFoundError,
    DirectoryException,
    InvalidQueryError,
    RecordNotFoundError,
    StudentNotFoundError,
)

__all__ = [
    "ClassNotFoundError",
    "CollegeNotFoundError",
    "DatasetLoadError",
    "DepartmentNotFoundError",
    "DirectoryException",
    "InvalidQueryError",
    "RecordNotFoundError",
    "StudentNotFoundError",
]
