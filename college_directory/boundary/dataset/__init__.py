"""Mock dataset loading and in-memory repository."""

from college_directory.boundary.dataset.loader import (
    DEFAULT_DATASET_PATH,
    find_duplicate_ids,
    load_colleges,
)
from college_directory.boundary.dataset.repository import HierarchyRepository

__all__ = [
    "DEFAULT_DATASET_PATH",
    "HierarchyRepository",
    "find_duplicate_ids",
    "load_colleges",
]
