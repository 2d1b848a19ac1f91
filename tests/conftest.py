"""
Shared test fixtures and configuration for entire test suite.

Provides: small hand-built hierarchy, repository/service fixtures,
API client bound to the packaged dataset, temp dataset files.
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

import copy
import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from college_directory.application.services import DirectoryService, SearchService
from college_directory.boundary.dataset import HierarchyRepository, load_colleges
from college_directory.configs import get_settings
from college_directory.models.hierarchy import College


SAMPLE_DATASET = [
    {
        "id": 1,
        "name": "North College",
        "departments": [
            {
                "id": 1,
                "name": "Physics",
                "classes": [
                    {
                        "id": 10,
                        "name": "Mechanics",
                        "students": [
                            {"id": 100, "name": "Ana Silva", "age": 20, "gender": "Female", "grade": "A"},
                            {"id": 101, "name": "Ben Ortiz", "age": 22, "gender": "Male", "grade": "B"},
                        ],
                    },
                    {"id": 11, "name": "Optics", "students": []},
                ],
            }
        ],
    },
    {
        "id": 2,
        "name": "South College",
        "departments": [
            {
                "id": 1,
                "name": "Poetry",
                "classes": [
                    {
                        "id": 10,
                        "name": "Sonnets",
                        "students": [
                            {"id": 100, "name": "Cara Diaz", "age": 19, "gender": "Female", "grade": "A"},
                        ],
                    }
                ],
            },
            {"id": 2, "name": "Drama", "classes": []},
        ],
    },
]


@pytest.fixture
def sample_dataset() -> list[dict]:
    """Raw JSON-shaped sample hierarchy."""
    return copy.deepcopy(SAMPLE_DATASET)


@pytest.fixture
def sample_colleges(sample_dataset: list[dict]) -> list[College]:
    """Two colleges whose department/class/student ids repeat across scopes."""
    return [College.model_validate(entry) for entry in sample_dataset]


@pytest.fixture
def sample_repository(sample_colleges: list[College]) -> HierarchyRepository:
    """Repository over the hand-built sample hierarchy."""
    return HierarchyRepository(sample_colleges)


@pytest.fixture
def directory_service(sample_repository: HierarchyRepository) -> DirectoryService:
    """DirectoryService over the sample hierarchy."""
    return DirectoryService(repository=sample_repository)


@pytest.fixture
def search_service(sample_repository: HierarchyRepository) -> SearchService:
    """SearchService over the sample hierarchy."""
    return SearchService(repository=sample_repository)


@pytest.fixture
def packaged_repository() -> HierarchyRepository:
    """Repository over the packaged mock dataset."""
    return HierarchyRepository(load_colleges())


@pytest.fixture
def client(packaged_repository: HierarchyRepository):
    """
    Test client with the repository dependency bound to the packaged dataset.

    Yields:
        TestClient: Client against a fresh app instance
    """
    from college_directory.api.deps.dependencies import get_repository
    from college_directory.main import create_app

    app = create_app()
    app.dependency_overrides[get_repository] = lambda: packaged_repository
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def write_dataset(tmp_path: Path):
    """
    Write a dataset document to a temp file.

    Returns:
        Callable: (content, name) -> Path; dicts/lists are JSON-encoded, strings written raw
    """
    def _write(content, name: str = "colleges.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop cached settings so env overrides in one test never leak into another."""
    from college_directory.api.deps.dependencies import get_settings_dependency

    get_settings.cache_clear()
    get_settings_dependency.cache_clear()
    yield
    get_settings.cache_clear()
    get_settings_dependency.cache_clear()
