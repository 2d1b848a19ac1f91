"""
Application services.

Use case orchestration over the in-memory hierarchy.
"""

from college_directory.application.services.directory_service import DirectoryService
from college_directory.application.services.search_service import SearchService

__all__ = [
    "DirectoryService",
    "SearchService",
]
