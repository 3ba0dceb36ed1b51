"""Map arXiv Atom entry fragments onto PaperRecord values."""

from __future__ import annotations

import re
from datetime import UTC, datetime

from feed_text import (
    extract_all_tags,
    extract_attribute,
    extract_entries,
    extract_links,
    extract_tag,
)
from models import PaperRecord

_ABS_URL_PREFIX_RE = re.compile(r"^https?://arxiv\.org/abs/", re.IGNORECASE)
_VERSION_SUFFIX_RE = re.compile(r"v\d+$")
_WHITESPACE_RE = re.compile(r"\s+")
_PRIMARY_CATEGORY_RE = re.compile(
    r'<arxiv:primary_category\s[^>]*?(?<![\w:-])term\s*=\s*"([^"]*)"',
    re.IGNORECASE,
)


def parse_feed(xml: str) -> list[PaperRecord]:
    """Parse every entry of a feed body, preserving feed order."""
    return [parse_entry(fragment) for fragment in extract_entries(xml)]


def parse_entry(entry_xml: str) -> PaperRecord:
    """Build one PaperRecord from a raw entry fragment.

    Missing or malformed fields degrade to empty strings, empty tuples or
    None; this function never raises on unexpected markup.
    """
    categories = tuple(extract_attribute(entry_xml, "category", "term"))
    pdf_link, abs_link = extract_links(entry_xml)

    return PaperRecord(
        arxiv_id=normalize_arxiv_id(extract_tag(entry_xml, "id")),
        title=_collapse_whitespace(extract_tag(entry_xml, "title")),
        # Not scoped to <author>: any <name> element in the entry is collected.
        authors=tuple(extract_all_tags(entry_xml, "name")),
        summary=_collapse_whitespace(extract_tag(entry_xml, "summary")),
        published=_parse_timestamp(extract_tag(entry_xml, "published")),
        updated=_parse_timestamp(extract_tag(entry_xml, "updated")),
        categories=categories,
        primary_category=_primary_category(entry_xml, categories),
        comment=_optional(extract_tag(entry_xml, "comment")),
        journal_ref=_optional(extract_tag(entry_xml, "journal_ref")),
        doi=_optional(extract_tag(entry_xml, "doi")),
        pdf_link=pdf_link,
        abs_link=abs_link,
    )


def normalize_arxiv_id(raw_id: str) -> str:
    """Strip the abstract-page URL prefix and any trailing ``vN`` version."""
    arxiv_id = _ABS_URL_PREFIX_RE.sub("", raw_id.strip())
    return _VERSION_SUFFIX_RE.sub("", arxiv_id)


def _primary_category(entry_xml: str, categories: tuple[str, ...]) -> str:
    match = _PRIMARY_CATEGORY_RE.search(entry_xml)
    if match:
        return match.group(1)
    return categories[0] if categories else ""


def _collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _optional(value: str) -> str | None:
    return value or None


def _parse_timestamp(raw: str) -> datetime | None:
    if not raw:
        return None

    # arXiv returns RFC3339 timestamps with trailing Z.
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)
