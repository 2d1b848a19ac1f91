"""
Name search service.

Case-insensitive substring search over the names of every level of the
hierarchy. Hits come back in traversal order, colleges first.

Dependencies: college_directory.boundary.dataset, college_directory.models
System role: Search use case orchestration
"""

import logging
from collections.abc import Iterable, Iterator

from college_directory.boundary.dataset.repository import HierarchyRepository
from college_directory.core.exceptions import InvalidQueryError
from college_directory.models.search import SearchHit, SearchKind, SearchResponse
from college_directory.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 50


class SearchService:
    """Search records by name across the hierarchy."""

    def __init__(self, repository: HierarchyRepository) -> None:
        self.repository = repository

    def _candidates(self, kind: SearchKind) -> Iterator[SearchHit]:
        if kind is SearchKind.COLLEGE:
            for college in self.repository.colleges():
                yield SearchHit(kind=kind, id=college.id, name=college.name)
        elif kind is SearchKind.DEPARTMENT:
            for college, department in self.repository.iter_departments():
                yield SearchHit(
                    kind=kind,
                    id=department.id,
                    name=department.name,
                    path=[college.name],
                    college_id=college.id,
                )
        elif kind is SearchKind.CLASS:
            for college, department, school_class in self.repository.iter_classes():
                yield SearchHit(
                    kind=kind,
                    id=school_class.id,
                    name=school_class.name,
                    path=[college.name, department.name],
                    college_id=college.id,
                    department_id=department.id,
                )
        else:
            for college, department, school_class, student in self.repository.iter_students():
                yield SearchHit(
                    kind=kind,
                    id=student.id,
                    name=student.name,
                    path=[college.name, department.name, school_class.name],
                    college_id=college.id,
                    department_id=department.id,
                    class_id=school_class.id,
                )

    def search(
        self,
        query: str,
        kinds: Iterable[SearchKind] | None = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> SearchResponse:
        """
        Find records whose name contains the query.

        Args:
            query: Substring to look for (case-insensitive, surrounding whitespace ignored)
            kinds: Levels to search (all levels when None or empty)
            limit: Maximum number of hits returned

        Returns:
            SearchResponse: Hits in traversal order and the untruncated total

        Raises:
            InvalidQueryError: If the query is blank or the limit is not positive
        """
        needle = (query or "").strip().casefold()
        if not needle:
            raise InvalidQueryError("Search query cannot be empty or whitespace-only", field="q")
        if limit < 1:
            raise InvalidQueryError("Search limit must be at least 1", field="limit")

        requested = set(kinds or ())
        levels = [k for k in SearchKind if not requested or k in requested]

        matches = [
            hit
            for kind in levels
            for hit in self._candidates(kind)
            if needle in hit.name.casefold()
        ]

        log_with_context(
            logger,
            logging.DEBUG,
            "Search completed",
            query=query,
            kinds=[k.value for k in levels],
            match_count=len(matches),
        )

        return SearchResponse(query=query.strip(), total=len(matches), hits=matches[:limit])

    def search_students(self, name: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[SearchHit]:
        """Students whose name contains ``name``."""
        return self.search(name, kinds=[SearchKind.STUDENT], limit=limit).hits

    def search_departments(self, name: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[SearchHit]:
        """Departments whose name contains ``name``."""
        return self.search(name, kinds=[SearchKind.DEPARTMENT], limit=limit).hits
