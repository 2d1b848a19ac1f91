"""
Search domain models and schemas.

Dependencies: pydantic
System role: Name search API contracts
"""

from enum import Enum

from pydantic import BaseModel, Field


class SearchKind(str, Enum):
    """Hierarchy level a search hit belongs to."""

    COLLEGE = "college"
    DEPARTMENT = "department"
    CLASS = "class"
    STUDENT = "student"


class SearchHit(BaseModel):
    """Single record whose name matched the query."""

    kind: SearchKind
    id: int
    name: str
    path: list[str] = Field(default_factory=list, description="Ancestor names, outermost first")
    college_id: int | None = None
    department_id: int | None = None
    class_id: int | None = None


class SearchResponse(BaseModel):
    """Response schema for name search."""

    query: str
    total: int = Field(..., description="Number of matches before truncation")
    hits: list[SearchHit]
