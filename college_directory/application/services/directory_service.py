"""
Directory service orchestrator.

Query façade over the college hierarchy: flattening, find-by-id and
per-class aggregation. Every operation is a linear traversal of the
repository; nothing is cached or indexed.

Dependencies: college_directory.boundary.dataset, college_directory.models
System role: Directory use case orchestration
"""

from collections import Counter

from college_directory.boundary.dataset.repository import HierarchyRepository
from college_directory.core.exceptions import (
    ClassNotFoundError,
    CollegeNotFoundError,
    DepartmentNotFoundError,
    StudentNotFoundError,
)
from college_directory.models.hierarchy import College, Department, SchoolClass, Student
from college_directory.models.listing import (
    ClassRow,
    ClassStatistics,
    CollegeSummary,
    DepartmentRow,
    DirectoryCounts,
    StudentRow,
)


def _summarize_college(college: College) -> CollegeSummary:
    classes = [c for d in college.departments for c in d.classes]
    return CollegeSummary(
        id=college.id,
        name=college.name,
        department_count=len(college.departments),
        class_count=len(classes),
        student_count=sum(len(c.students) for c in classes),
    )


def _department_row(college: College, department: Department) -> DepartmentRow:
    return DepartmentRow(
        id=department.id,
        name=department.name,
        college_id=college.id,
        college_name=college.name,
        class_count=len(department.classes),
    )


def _class_row(college: College, department: Department, school_class: SchoolClass) -> ClassRow:
    return ClassRow(
        id=school_class.id,
        name=school_class.name,
        college_id=college.id,
        department_id=department.id,
        department_name=department.name,
        student_count=len(school_class.students),
    )


def _student_row(
    college: College,
    department: Department,
    school_class: SchoolClass,
    student: Student,
) -> StudentRow:
    return StudentRow(
        id=student.id,
        name=student.name,
        age=student.age,
        gender=student.gender,
        grade=student.grade,
        college_id=college.id,
        department_id=department.id,
        class_id=school_class.id,
        class_name=school_class.name,
    )


def _department_of(college: College, department_id: int) -> Department:
    for department in college.departments:
        if department.id == department_id:
            return department
    raise DepartmentNotFoundError(department_id, details={"college_id": college.id})


def _class_of(department: Department, class_id: int, college_id: int) -> SchoolClass:
    for school_class in department.classes:
        if school_class.id == class_id:
            return school_class
    raise ClassNotFoundError(
        class_id,
        details={"college_id": college_id, "department_id": department.id},
    )


class DirectoryService:
    """Read-only queries over the college hierarchy."""

    def __init__(self, repository: HierarchyRepository) -> None:
        """
        Initialize directory service with the loaded hierarchy.

        Args:
            repository: In-memory hierarchy repository
        """
        self.repository = repository

    # Colleges

    def list_colleges(self) -> list[CollegeSummary]:
        """
        List every college with its per-level counts.

        Returns:
            list[CollegeSummary]: Colleges in dataset order
        """
        return [_summarize_college(c) for c in self.repository.colleges()]

    def get_college(self, college_id: int) -> College:
        """
        Get college by ID.

        Args:
            college_id: College ID

        Returns:
            College: Full nested college record

        Raises:
            CollegeNotFoundError: If no college has this ID
        """
        for college in self.repository.colleges():
            if college.id == college_id:
                return college
        raise CollegeNotFoundError(college_id)

    # Departments

    def list_departments(self) -> list[DepartmentRow]:
        """Flatten departments across all colleges."""
        return [_department_row(c, d) for c, d in self.repository.iter_departments()]

    def list_college_departments(self, college_id: int) -> list[DepartmentRow]:
        """
        List departments of one college.

        Raises:
            CollegeNotFoundError: If the college does not exist
        """
        college = self.get_college(college_id)
        return [_department_row(college, d) for d in college.departments]

    def get_department(self, department_id: int) -> Department:
        """
        Get the first department with this ID in traversal order.

        Raises:
            DepartmentNotFoundError: If no department has this ID
        """
        for _, department in self.repository.iter_departments():
            if department.id == department_id:
                return department
        raise DepartmentNotFoundError(department_id)

    def get_college_department(self, college_id: int, department_id: int) -> Department:
        """
        Get a department scoped to its college.

        Raises:
            CollegeNotFoundError: If the college does not exist
            DepartmentNotFoundError: If the college has no such department
        """
        return _department_of(self.get_college(college_id), department_id)

    # Classes

    def list_classes(self) -> list[ClassRow]:
        """Flatten classes across all departments."""
        return [_class_row(c, d, k) for c, d, k in self.repository.iter_classes()]

    def list_department_classes(self, college_id: int, department_id: int) -> list[ClassRow]:
        """
        List classes of one department.

        Raises:
            CollegeNotFoundError, DepartmentNotFoundError
        """
        college = self.get_college(college_id)
        department = _department_of(college, department_id)
        return [_class_row(college, department, k) for k in department.classes]

    def get_class(self, class_id: int) -> SchoolClass:
        """
        Get the first class with this ID in traversal order.

        Raises:
            ClassNotFoundError: If no class has this ID
        """
        for _, _, school_class in self.repository.iter_classes():
            if school_class.id == class_id:
                return school_class
        raise ClassNotFoundError(class_id)

    def get_department_class(
        self,
        college_id: int,
        department_id: int,
        class_id: int,
    ) -> SchoolClass:
        """
        Get a class scoped to its department.

        Raises:
            CollegeNotFoundError, DepartmentNotFoundError, ClassNotFoundError
        """
        department = self.get_college_department(college_id, department_id)
        return _class_of(department, class_id, college_id)

    # Students

    def list_students(self) -> list[StudentRow]:
        """Flatten students across all classes."""
        return [_student_row(*parents) for parents in self.repository.iter_students()]

    def list_class_students(
        self,
        college_id: int,
        department_id: int,
        class_id: int,
    ) -> list[StudentRow]:
        """
        List students of one class.

        Raises:
            CollegeNotFoundError, DepartmentNotFoundError, ClassNotFoundError
        """
        college = self.get_college(college_id)
        department = _department_of(college, department_id)
        school_class = _class_of(department, class_id, college_id)
        return [_student_row(college, department, school_class, s) for s in school_class.students]

    def get_student(self, student_id: int) -> StudentRow:
        """
        Get the first student with this ID in traversal order.

        Returns:
            StudentRow: Student with its ancestor ids

        Raises:
            StudentNotFoundError: If no student has this ID
        """
        for parents in self.repository.iter_students():
            if parents[-1].id == student_id:
                return _student_row(*parents)
        raise StudentNotFoundError(student_id)

    # Aggregation

    def get_class_statistics(self, class_id: int) -> ClassStatistics:
        """
        Aggregate age, gender and grade figures for one class.

        Args:
            class_id: Class ID (first match in traversal order)

        Returns:
            ClassStatistics: Counts and averages; average_age is None for an empty class

        Raises:
            ClassNotFoundError: If no class has this ID
        """
        school_class = self.get_class(class_id)
        students = school_class.students
        average_age = None
        if students:
            average_age = round(sum(s.age for s in students) / len(students), 2)

        return ClassStatistics(
            class_id=school_class.id,
            class_name=school_class.name,
            student_count=len(students),
            average_age=average_age,
            gender_breakdown=dict(Counter(s.gender.value for s in students)),
            grade_distribution=dict(Counter(s.grade for s in students)),
        )

    def counts(self) -> DirectoryCounts:
        """Totals for every level of the hierarchy."""
        return DirectoryCounts(
            colleges=len(self.repository.colleges()),
            departments=sum(1 for _ in self.repository.iter_departments()),
            classes=sum(1 for _ in self.repository.iter_classes()),
            students=sum(1 for _ in self.repository.iter_students()),
        )
