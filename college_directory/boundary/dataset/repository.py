"""
In-memory hierarchy repository.

Holds the college tree for the life of the process and exposes depth-first
traversals that pair every record with its ancestors.

Dependencies: college_directory.models, college_directory.configs
System role: Read-only data access boundary
"""

from collections.abc import Iterator

from college_directory.boundary.dataset.loader import load_colleges
from college_directory.configs.settings import Settings
from college_directory.models.hierarchy import College, Department, SchoolClass, Student


class HierarchyRepository:
    """Immutable, linearly scanned view over the loaded colleges."""

    def __init__(self, colleges: list[College]) -> None:
        self._colleges = tuple(colleges)

    @classmethod
    def from_settings(cls, settings: Settings) -> "HierarchyRepository":
        """
        Build a repository from the configured dataset.

        Args:
            settings: Application settings

        Returns:
            HierarchyRepository: Repository over the loaded colleges

        Raises:
            DatasetLoadError: If the dataset cannot be loaded
        """
        colleges = load_colleges(
            settings.dataset.path,
            warn_on_duplicates=settings.dataset.warn_on_duplicate_ids,
        )
        return cls(colleges)

    def colleges(self) -> list[College]:
        return list(self._colleges)

    def iter_departments(self) -> Iterator[tuple[College, Department]]:
        for college in self._colleges:
            for department in college.departments:
                yield college, department

    def iter_classes(self) -> Iterator[tuple[College, Department, SchoolClass]]:
        for college, department in self.iter_departments():
            for school_class in department.classes:
                yield college, department, school_class

    def iter_students(self) -> Iterator[tuple[College, Department, SchoolClass, Student]]:
        for college, department, school_class in self.iter_classes():
            for student in school_class.students:
                yield college, department, school_class, student
