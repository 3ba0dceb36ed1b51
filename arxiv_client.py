"""arXiv query API client with bounded retry for rate-limited responses."""

from __future__ import annotations

import logging
import os
import time
from enum import Enum

import requests

from models import (
    DEFAULT_MAX_RESULTS,
    PaperRecord,
    SearchSpecification,
    SortDirection,
    SortKey,
)
from query_builder import build_query_url
from record_mapper import parse_feed

USER_AGENT = "arxiv-paper-search/1.0"
_DEFAULT_TIMEOUT_SECONDS = 30.0
_DEFAULT_BACKOFF_SECONDS = 3.0
MAX_ATTEMPTS = 3
RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({429, 503})

LOGGER = logging.getLogger(__name__)


class ArxivAPIError(RuntimeError):
    """Base error for a failed arXiv request."""


class ArxivHTTPError(ArxivAPIError):
    """Non-retryable HTTP status returned by arXiv."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"arXiv API error: {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.reason = reason


class ArxivRetryExhaustedError(ArxivAPIError):
    """Every attempt was rate limited."""

    def __init__(self, status_code: int, attempts: int) -> None:
        super().__init__(
            f"arXiv API rate limited ({status_code}), gave up after {attempts} attempts"
        )
        self.status_code = status_code
        self.attempts = attempts


class FetchState(Enum):
    ATTEMPT = "attempt"
    BACKOFF = "backoff"
    DONE = "done"
    FATAL = "fatal"
    EXHAUSTED = "exhausted"


def classify_status(status_code: int) -> FetchState:
    """Transition out of ATTEMPT for a response with ``status_code``."""
    if status_code in RETRYABLE_STATUS_CODES:
        return FetchState.BACKOFF
    if 200 <= status_code < 300:
        return FetchState.DONE
    return FetchState.FATAL


def after_backoff(attempt: int) -> FetchState:
    """Transition out of BACKOFF following zero-based ``attempt``."""
    if attempt >= MAX_ATTEMPTS - 1:
        return FetchState.EXHAUSTED
    return FetchState.ATTEMPT


def backoff_delay(attempt: int) -> float:
    """Seconds to wait before zero-based ``attempt``; attempt 0 never waits.

    The base unit reads ARXIV_BACKOFF_SECONDS if set; defaults to 3.
    """
    base_seconds = float(os.getenv("ARXIV_BACKOFF_SECONDS", _DEFAULT_BACKOFF_SECONDS))
    return base_seconds * attempt


def fetch_feed(url: str) -> str:
    """GET ``url`` and return the response body.

    Only 429 and 503 are retried, with a linearly growing delay, for at most
    MAX_ATTEMPTS requests in total. Any other non-2xx status is raised
    immediately as ArxivHTTPError.

    Raises:
        ArxivHTTPError: non-retryable status.
        ArxivRetryExhaustedError: every attempt was rate limited.
        ArxivAPIError: the request could not be sent or completed.
    """
    state = FetchState.ATTEMPT
    attempt = 0
    response: requests.Response | None = None

    while True:
        if state is FetchState.ATTEMPT:
            LOGGER.debug("arXiv fetch attempt %s/%s: %s", attempt + 1, MAX_ATTEMPTS, url)
            response = _get(url)
            state = classify_status(response.status_code)

        elif state is FetchState.BACKOFF:
            LOGGER.warning(
                "arXiv API rate limited (%s) on attempt %s/%s",
                response.status_code,
                attempt + 1,
                MAX_ATTEMPTS,
            )
            state = after_backoff(attempt)
            if state is FetchState.ATTEMPT:
                attempt += 1
                time.sleep(backoff_delay(attempt))

        elif state is FetchState.DONE:
            LOGGER.info(
                "arXiv fetch succeeded: status=%s attempts=%s",
                response.status_code,
                attempt + 1,
            )
            return response.text

        elif state is FetchState.FATAL:
            LOGGER.error("arXiv API error: %s %s", response.status_code, response.reason)
            raise ArxivHTTPError(response.status_code, response.reason or "")

        else:
            raise ArxivRetryExhaustedError(response.status_code, attempt + 1)


def _get(url: str) -> requests.Response:
    try:
        return requests.get(
            url,
            headers={"User-Agent": USER_AGENT},
            timeout=float(os.getenv("ARXIV_TIMEOUT_SECONDS", _DEFAULT_TIMEOUT_SECONDS)),
        )
    except requests.RequestException as exc:
        raise ArxivAPIError(f"arXiv API request failed: {exc}") from exc


def search(spec: SearchSpecification) -> list[PaperRecord]:
    """Run one search and return the parsed records in feed order."""
    body = fetch_feed(build_query_url(spec))
    papers = parse_feed(body)
    LOGGER.info("arXiv search returned %s papers", len(papers))
    return papers


def search_papers(
    query: str,
    author: str | None = None,
    category: str | None = None,
    max_results: int = DEFAULT_MAX_RESULTS,
    sort_by: SortKey | None = None,
) -> list[PaperRecord]:
    """Keyword search, optionally narrowed by author and category."""
    return search(
        SearchSpecification(
            query=query,
            author=author,
            category=category,
            max_results=max_results,
            sort_by=sort_by,
        )
    )


def get_paper(arxiv_id: str) -> PaperRecord | None:
    """Look up a single paper by its arXiv identifier."""
    papers = search(SearchSpecification(id_list=(arxiv_id,), max_results=1))
    return papers[0] if papers else None


def get_recent_papers(category: str, max_results: int = DEFAULT_MAX_RESULTS) -> list[PaperRecord]:
    """Most recently submitted papers in ``category``, newest first."""
    return search(
        SearchSpecification(
            category=category,
            max_results=max_results,
            sort_by=SortKey.SUBMITTED_DATE,
            sort_order=SortDirection.DESCENDING,
        )
    )
