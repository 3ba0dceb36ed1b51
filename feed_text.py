"""Tolerant text-level extraction helpers for the arXiv Atom feed.

These helpers work on raw markup with regular expressions instead of a
namespace-aware XML parser. Element names match case-insensitively and may
carry a single namespace prefix (``<arxiv:doi>``, ``<atom:title>``). Nothing
here raises on malformed input: a missing element yields ``""`` or ``[]``.
"""

from __future__ import annotations

import re

_ENTITIES: dict[str, str] = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
}
_ENTITY_RE = re.compile(r"&(amp|lt|gt|quot|apos);")

_PREFIX = r"(?:[a-z][\w.-]*:)?"
_ENTRY_RE = re.compile(r"<entry(?:\s[^>]*)?>(.*?)</entry\s*>", re.IGNORECASE | re.DOTALL)
_LINK_RE = re.compile(rf"<{_PREFIX}link\s[^>]*>", re.IGNORECASE)
_ATTRIBUTE_PAIR_RE = re.compile(r'([\w:.-]+)\s*=\s*"([^"]*)"')


def decode_entities(text: str) -> str:
    """Decode the five predefined XML entities in a single pass.

    One pass means a decoded ampersand is never re-read as the start of
    another entity: ``&amp;lt;`` becomes the literal text ``&lt;``.
    """
    return _ENTITY_RE.sub(lambda match: _ENTITIES[match.group(1)], text)


def _element_re(tag: str) -> re.Pattern[str]:
    name = re.escape(tag)
    return re.compile(
        rf"<{_PREFIX}{name}(?:\s[^>]*?)?(?<!/)>(.*?)</{_PREFIX}{name}\s*>",
        re.IGNORECASE | re.DOTALL,
    )


def extract_tag(xml: str, tag: str) -> str:
    """Return the decoded, stripped text of the first ``tag`` element, or ``""``."""
    match = _element_re(tag).search(xml)
    return decode_entities(match.group(1).strip()) if match else ""


def extract_all_tags(xml: str, tag: str) -> list[str]:
    """Return the decoded, stripped text of every ``tag`` element in document order."""
    return [decode_entities(inner.strip()) for inner in _element_re(tag).findall(xml)]


def extract_attribute(xml: str, tag: str, attr: str) -> list[str]:
    """Return ``attr`` from every ``tag`` element that carries it, in document order."""
    pattern = re.compile(
        rf'<{_PREFIX}{re.escape(tag)}\s[^>]*?(?<![\w:-]){re.escape(attr)}\s*=\s*"([^"]*)"',
        re.IGNORECASE,
    )
    return [decode_entities(value) for value in pattern.findall(xml)]


def extract_entries(xml: str) -> list[str]:
    """Split a feed body into the raw inner markup of each ``<entry>``."""
    return _ENTRY_RE.findall(xml)


def parse_attributes(tag_markup: str) -> dict[str, str]:
    """Map attribute names to decoded values for a single opening tag."""
    return {
        name.lower(): decode_entities(value)
        for name, value in _ATTRIBUTE_PAIR_RE.findall(tag_markup)
    }


def extract_links(entry_xml: str) -> tuple[str | None, str | None]:
    """Return ``(pdf_link, abs_link)`` for one entry fragment.

    ``title="pdf"`` marks the PDF link and ``type="text/html"`` the landing
    page. When several tags qualify for the same slot, the last one wins.
    """
    pdf_link: str | None = None
    abs_link: str | None = None

    for tag_markup in _LINK_RE.findall(entry_xml):
        attributes = parse_attributes(tag_markup)
        href = attributes.get("href")
        if not href:
            continue
        if attributes.get("title") == "pdf":
            pdf_link = href
        if attributes.get("type") == "text/html":
            abs_link = href

    return pdf_link, abs_link
