"""Human-readable text renderings of PaperRecord values."""

from __future__ import annotations

from datetime import datetime

from models import PaperRecord

SUMMARY_PREVIEW_CHARS = 300
LIST_SEPARATOR = "\n\n---\n\n"


def _date(value: datetime | None) -> str:
    return value.date().isoformat() if value is not None else "unknown"


def _preview(text: str, max_len: int = SUMMARY_PREVIEW_CHARS) -> str:
    return text if len(text) <= max_len else f"{text[:max_len]}..."


def format_paper_summary(paper: PaperRecord) -> str:
    """Short multi-line card used in search result listings."""
    lines = [
        f"**{paper.title}**",
        f"arXiv ID: {paper.arxiv_id}",
        f"Authors: {', '.join(paper.authors)}",
        f"Published: {_date(paper.published)}",
        f"Category: {paper.primary_category}",
        f"Summary: {_preview(paper.summary)}",
        f"Link: {paper.abs_link}" if paper.abs_link else "",
    ]
    return "\n".join(line for line in lines if line)


def format_paper_detail(paper: PaperRecord) -> str:
    """Full record including optional metadata and the complete abstract."""
    lines = [
        f"**{paper.title}**",
        "",
        f"arXiv ID: {paper.arxiv_id}",
        f"Authors: {', '.join(paper.authors)}",
        f"Published: {_date(paper.published)}",
        f"Updated: {_date(paper.updated)}",
        f"Primary Category: {paper.primary_category}",
        f"All Categories: {', '.join(paper.categories)}",
    ]

    if paper.comment:
        lines.append(f"Comment: {paper.comment}")
    if paper.journal_ref:
        lines.append(f"Journal: {paper.journal_ref}")
    if paper.doi:
        lines.append(f"DOI: {paper.doi}")
    if paper.pdf_link:
        lines.append(f"PDF: {paper.pdf_link}")
    if paper.abs_link:
        lines.append(f"Abstract Page: {paper.abs_link}")

    lines.extend(["", "**Abstract:**", paper.summary])
    return "\n".join(lines)


def format_paper_list(papers: list[PaperRecord], header: str) -> str:
    """Join summary cards under ``header``."""
    body = LIST_SEPARATOR.join(format_paper_summary(paper) for paper in papers)
    return f"{header}\n\n{body}"
