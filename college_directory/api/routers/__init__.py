"""API routers."""

from .classes import router as classes_router
from .colleges import router as colleges_router
from .departments import router as departments_router
from .health import router as health_router
from .search import router as search_router
from .students import router as students_router

__all__ = [
    "classes_router",
    "colleges_router",
    "departments_router",
    "health_router",
    "search_router",
    "students_router",
]
