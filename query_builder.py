"""Translate a SearchSpecification into arXiv query API parameters."""

from __future__ import annotations

import os
from urllib.parse import urlencode

from models import SearchSpecification, SortDirection

DEFAULT_ARXIV_API_URL = "https://export.arxiv.org/api/query"
DEFAULT_SORT_ORDER = SortDirection.DESCENDING


def build_query_params(spec: SearchSpecification) -> dict[str, str]:
    """Return the ordered parameter mapping for one search.

    ``max_results`` and ``start`` are always present; ``start`` is pinned to
    zero since paging is not supported. ``sortOrder`` is only sent together
    with ``sortBy``.
    """
    params: dict[str, str] = {}

    clauses: list[str] = []
    if spec.query:
        clauses.append(f"all:{spec.query}")
    if spec.author:
        clauses.append(f"au:{spec.author}")
    if spec.category:
        clauses.append(f"cat:{spec.category}")
    if clauses:
        params["search_query"] = " AND ".join(clauses)

    if spec.id_list:
        params["id_list"] = ",".join(spec.id_list)

    params["max_results"] = str(spec.max_results)
    params["start"] = "0"

    if spec.sort_by is not None:
        params["sortBy"] = spec.sort_by.value
        params["sortOrder"] = (spec.sort_order or DEFAULT_SORT_ORDER).value

    return params


def build_query_url(spec: SearchSpecification) -> str:
    """Return the fully encoded request URL for ``spec``.

    The endpoint can be overridden with the ARXIV_API_URL env var.
    """
    base_url = os.getenv("ARXIV_API_URL", DEFAULT_ARXIV_API_URL)
    return f"{base_url}?{urlencode(build_query_params(spec))}"
