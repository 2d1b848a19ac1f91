"""
Mock dataset loader.

Reads the hierarchy JSON document and copies it structurally into typed
College records. Id collisions are reported, never rejected.

Dependencies: pydantic, college_directory.models, college_directory.core
System role: Dataset ingestion boundary
"""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from college_directory.core.exceptions import DatasetLoadError
from college_directory.models.hierarchy import College
from college_directory.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = Path(__file__).parent / "data" / "colleges.json"


def _read_document(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _extract_entries(document: Any) -> list[Any]:
    """Accept either a bare list of colleges or ``{"colleges": [...]}``."""
    if isinstance(document, dict):
        document = document.get("colleges")
    if not isinstance(document, list):
        raise ValueError("Dataset must be a list of colleges or an object with a 'colleges' list")
    return document


def load_colleges(path: Path | None = None, warn_on_duplicates: bool = True) -> list[College]:
    """
    Load the hierarchy from a JSON document.

    Args:
        path: Dataset file (defaults to the packaged mock data)
        warn_on_duplicates: Log a warning for each id collision

    Returns:
        list[College]: Colleges in document order

    Raises:
        DatasetLoadError: If the file cannot be read or does not match the record shape
    """
    path = Path(path) if path is not None else DEFAULT_DATASET_PATH

    try:
        document = _read_document(path)
        colleges = [College.model_validate(entry) for entry in _extract_entries(document)]
    except (OSError, json.JSONDecodeError, ValueError, ValidationError) as e:
        log_exception_with_context(logger, "Failed to load dataset", e, path=str(path))
        raise DatasetLoadError(
            "Failed to load dataset",
            path=str(path),
            details={"cause": f"{type(e).__name__}: {e}"},
        ) from e

    if warn_on_duplicates:
        for duplicate in find_duplicate_ids(colleges):
            log_with_context(logger, logging.WARNING, "Duplicate id in dataset", duplicate=duplicate)

    log_with_context(
        logger,
        logging.INFO,
        "Dataset loaded",
        path=str(path),
        college_count=len(colleges),
    )
    return colleges


def _duplicates(ids: list[int]) -> list[int]:
    return [record_id for record_id, count in Counter(ids).items() if count > 1]


def find_duplicate_ids(colleges: list[College]) -> list[str]:
    """
    Describe every id collision within its natural scope.

    Colleges are checked against each other, departments within their
    college, classes within their department and students within their class.

    Args:
        colleges: Loaded hierarchy

    Returns:
        list[str]: One description per colliding id, empty when ids are clean
    """
    found = [f"college {i} appears more than once" for i in _duplicates([c.id for c in colleges])]

    for college in colleges:
        found.extend(
            f"department {i} appears more than once in college {college.id}"
            for i in _duplicates([d.id for d in college.departments])
        )
        for department in college.departments:
            found.extend(
                f"class {i} appears more than once in department {department.id}"
                for i in _duplicates([c.id for c in department.classes])
            )
            for school_class in department.classes:
                found.extend(
                    f"student {i} appears more than once in class {school_class.id}"
                    for i in _duplicates([s.id for s in school_class.students])
                )

    return found
