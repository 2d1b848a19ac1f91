"""
Hierarchy domain models.

College -> Department -> Class -> Student records, built once from the
mock dataset and never mutated afterwards.

Dependencies: pydantic
System role: Directory record contracts
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    """Student gender as it appears in the dataset."""

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class Student(BaseModel):
    """Leaf record of the hierarchy."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Student ID, unique within its class")
    name: str = Field(..., min_length=1, description="Student full name")
    age: int = Field(..., ge=0, description="Student age in years")
    gender: Gender
    grade: str = Field(..., min_length=1, description="Current grade, e.g. 'A' or 'B+'")


class SchoolClass(BaseModel):
    """A class within a department."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Class ID, unique within its department")
    name: str = Field(..., min_length=1, description="Class name")
    students: list[Student] = Field(default_factory=list)


class Department(BaseModel):
    """A department within a college."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Department ID, unique within its college")
    name: str = Field(..., min_length=1, description="Department name")
    classes: list[SchoolClass] = Field(default_factory=list)


class College(BaseModel):
    """Root record of the hierarchy."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="College ID")
    name: str = Field(..., min_length=1, description="College name")
    departments: list[Department] = Field(default_factory=list)
