"""
Test suite for HierarchyRepository traversals.

System role: Verification of read-only data access boundary
"""

from college_directory.boundary.dataset.repository import HierarchyRepository
from college_directory.configs.settings import Settings
from college_directory.configs.dataset import DatasetSettings


class TestHierarchyRepository:
    """Test suite for depth-first traversals."""

    def test_colleges_should_return_dataset_order(self, sample_repository) -> None:
        assert [c.name for c in sample_repository.colleges()] == ["North College", "South College"]

    def test_colleges_should_return_a_copy(self, sample_repository) -> None:
        sample_repository.colleges().clear()

        assert len(sample_repository.colleges()) == 2

    def test_iter_departments_should_pair_with_college(self, sample_repository) -> None:
        pairs = [(c.id, d.name) for c, d in sample_repository.iter_departments()]

        assert pairs == [(1, "Physics"), (2, "Poetry"), (2, "Drama")]

    def test_iter_classes_should_be_depth_first(self, sample_repository) -> None:
        names = [k.name for _, _, k in sample_repository.iter_classes()]

        assert names == ["Mechanics", "Optics", "Sonnets"]

    def test_iter_students_should_carry_every_ancestor(self, sample_repository) -> None:
        rows = [
            (c.id, d.id, k.id, s.name)
            for c, d, k, s in sample_repository.iter_students()
        ]

        assert rows == [
            (1, 1, 10, "Ana Silva"),
            (1, 1, 10, "Ben Ortiz"),
            (2, 1, 10, "Cara Diaz"),
        ]

    def test_empty_repository_should_yield_nothing(self) -> None:
        repository = HierarchyRepository([])

        assert repository.colleges() == []
        assert list(repository.iter_students()) == []

    def test_from_settings_should_load_configured_path(self, write_dataset, sample_dataset) -> None:
        path = write_dataset(sample_dataset)
        settings = Settings(dataset=DatasetSettings(path=path))

        repository = HierarchyRepository.from_settings(settings)

        assert [c.id for c in repository.colleges()] == [1, 2]

    def test_from_settings_should_default_to_packaged_dataset(self) -> None:
        settings = Settings(dataset=DatasetSettings(path=None))

        repository = HierarchyRepository.from_settings(settings)

        assert len(repository.colleges()) == 3
