"""Shared typed models for arXiv search requests and parsed records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

MAX_RESULTS_LIMIT = 50
DEFAULT_MAX_RESULTS = 10


class SortKey(str, Enum):
    """Sort keys accepted by the arXiv query API."""

    RELEVANCE = "relevance"
    LAST_UPDATED_DATE = "lastUpdatedDate"
    SUBMITTED_DATE = "submittedDate"


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True, slots=True)
class SearchSpecification:
    """Caller-supplied search request.

    Filters that are set are combined with AND. An explicit id_list is sent
    verbatim alongside any filters. sort_order only applies when sort_by is set.
    """

    query: str | None = None
    author: str | None = None
    category: str | None = None
    id_list: tuple[str, ...] = ()
    max_results: int = DEFAULT_MAX_RESULTS
    sort_by: SortKey | None = None
    sort_order: SortDirection | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.max_results <= MAX_RESULTS_LIMIT:
            raise ValueError(
                f"max_results must be between 1 and {MAX_RESULTS_LIMIT}, got {self.max_results}"
            )


@dataclass(frozen=True, slots=True)
class PaperRecord:
    """Normalized arXiv entry."""

    arxiv_id: str
    title: str
    authors: tuple[str, ...]
    summary: str
    published: datetime | None
    updated: datetime | None
    categories: tuple[str, ...]
    primary_category: str
    comment: str | None = None
    journal_ref: str | None = None
    doi: str | None = None
    pdf_link: str | None = None
    abs_link: str | None = None
