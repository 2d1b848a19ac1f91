"""
Flattened listing schemas.

Rows returned by the flattening queries carry their ancestors' ids so a
client can navigate back up the hierarchy by route parameter.

Dependencies: pydantic, college_directory.models.hierarchy
System role: Directory listing API contracts
"""

from pydantic import BaseModel, Field

from college_directory.models.hierarchy import Gender


class CollegeSummary(BaseModel):
    """College with per-level counts instead of nested children."""

    id: int
    name: str
    department_count: int
    class_count: int
    student_count: int


class DepartmentRow(BaseModel):
    """Department flattened out of its college."""

    id: int
    name: str
    college_id: int
    college_name: str
    class_count: int


class ClassRow(BaseModel):
    """Class flattened out of its department."""

    id: int
    name: str
    college_id: int
    department_id: int
    department_name: str
    student_count: int


class StudentRow(BaseModel):
    """Student flattened out of its class."""

    id: int
    name: str
    age: int
    gender: Gender
    grade: str
    college_id: int
    department_id: int
    class_id: int
    class_name: str


class ClassStatistics(BaseModel):
    """Aggregates over the students of a single class."""

    class_id: int
    class_name: str
    student_count: int
    average_age: float | None = Field(None, description="None when the class has no students")
    gender_breakdown: dict[str, int] = Field(default_factory=dict)
    grade_distribution: dict[str, int] = Field(default_factory=dict)


class DirectoryCounts(BaseModel):
    """Totals for every level of the hierarchy."""

    colleges: int
    departments: int
    classes: int
    students: int
