"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    classes_router,
    colleges_router,
    departments_router,
    health_router,
    search_router,
    students_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(colleges_router)
api_router.include_router(departments_router)
api_router.include_router(classes_router)
api_router.include_router(students_router)
api_router.include_router(search_router)

__all__ = ["api_router"]
