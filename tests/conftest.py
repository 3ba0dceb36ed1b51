"""Shared arXiv feed fixtures."""

from __future__ import annotations

import pytest

SAMPLE_ENTRY = """
    <id>http://arxiv.org/abs/1706.03762v7</id>
    <updated>2023-08-02T00:41:18Z</updated>
    <published>2017-06-12T17:57:34Z</published>
    <title>Attention Is All
      You Need</title>
    <summary>  The dominant sequence transduction models are based on complex
recurrent or convolutional neural networks &amp; attention.	We propose
      a new simple network architecture, the Transformer.
    </summary>
    <author>
      <name>Ashish Vaswani</name>
    </author>
    <author>
      <name>Noam Shazeer</name>
    </author>
    <arxiv:comment xmlns:arxiv="http://arxiv.org/schemas/atom">15 pages, 5 figures</arxiv:comment>
    <arxiv:journal_ref xmlns:arxiv="http://arxiv.org/schemas/atom">NeurIPS 2017</arxiv:journal_ref>
    <arxiv:doi xmlns:arxiv="http://arxiv.org/schemas/atom">10.48550/arXiv.1706.03762</arxiv:doi>
    <link href="http://arxiv.org/abs/1706.03762v7" rel="alternate" type="text/html"/>
    <link title="pdf" href="http://arxiv.org/pdf/1706.03762v7" rel="related" type="application/pdf"/>
    <arxiv:primary_category xmlns:arxiv="http://arxiv.org/schemas/atom" term="cs.CL" scheme="http://arxiv.org/schemas/atom"/>
    <category term="cs.LG" scheme="http://arxiv.org/schemas/atom"/>
    <category term="cs.CL" scheme="http://arxiv.org/schemas/atom"/>
"""

MINIMAL_ENTRY = """
    <id>http://arxiv.org/abs/2401.00001v1</id>
    <title>Minimal</title>
    <summary>Short.</summary>
"""


def make_feed(*entries: str) -> str:
    """Wrap raw entry fragments in an Atom feed document."""
    body = "".join(f"<entry>{entry}</entry>\n" for entry in entries)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<feed xmlns="http://www.w3.org/2005/Atom">\n'
        "  <id>http://arxiv.org/api/abc</id>\n"
        "  <title>arXiv Query: search_query=all:attention</title>\n"
        f"{body}"
        "</feed>\n"
    )


@pytest.fixture
def sample_entry() -> str:
    return SAMPLE_ENTRY


@pytest.fixture
def sample_feed() -> str:
    return make_feed(SAMPLE_ENTRY, MINIMAL_ENTRY)
