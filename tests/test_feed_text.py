from feed_text import (
    decode_entities,
    extract_all_tags,
    extract_attribute,
    extract_entries,
    extract_links,
    extract_tag,
    parse_attributes,
)


def test_decode_entities_basic() -> None:
    assert decode_entities("a &lt; b &amp;&amp; c &gt; d") == "a < b && c > d"
    assert decode_entities("&quot;quoted&quot; &apos;single&apos;") == "\"quoted\" 'single'"


def test_decode_entities_escaped_ampersand_is_not_decoded_twice() -> None:
    assert decode_entities("&amp;lt;") == "&lt;"
    assert decode_entities("&lt;") == "<"
    assert decode_entities("&amp;amp;") == "&amp;"


def test_decode_entities_leaves_plain_text_unchanged() -> None:
    text = "Plain & simple <text> with no entities"
    assert decode_entities(text) == text


def test_decode_entities_ignores_unknown_entities() -> None:
    assert decode_entities("&nbsp;&#233;") == "&nbsp;&#233;"


def test_extract_tag_first_match_stripped_and_decoded() -> None:
    xml = "<title>\n  Fast &amp; Furious  \n</title><title>Second</title>"
    assert extract_tag(xml, "title") == "Fast & Furious"


def test_extract_tag_tolerates_namespace_prefix_and_attributes() -> None:
    xml = '<arxiv:doi xmlns:arxiv="http://arxiv.org/schemas/atom">10.1000/xyz</arxiv:doi>'
    assert extract_tag(xml, "doi") == "10.1000/xyz"


def test_extract_tag_is_case_insensitive() -> None:
    assert extract_tag("<Summary>Body</SUMMARY>", "summary") == "Body"


def test_extract_tag_missing_returns_empty_string() -> None:
    assert extract_tag("<title>x</title>", "comment") == ""


def test_extract_tag_does_not_match_longer_tag_names() -> None:
    assert extract_tag("<identifier>nope</identifier><id>yes</id>", "id") == "yes"


def test_extract_tag_ignores_self_closing_element() -> None:
    assert extract_tag("<doi/><doi>real</doi>", "doi") == "real"


def test_extract_all_tags_in_document_order() -> None:
    xml = (
        "<author><name>Ada Lovelace</name></author>"
        "<author><name>Alan Turing</name></author>"
        "<author><name>Ada Lovelace</name></author>"
    )
    assert extract_all_tags(xml, "name") == ["Ada Lovelace", "Alan Turing", "Ada Lovelace"]


def test_extract_all_tags_missing_returns_empty_list() -> None:
    assert extract_all_tags("<title>x</title>", "name") == []


def test_extract_attribute_collects_values_in_order() -> None:
    xml = (
        '<category term="cs.LG" scheme="http://arxiv.org/schemas/atom"/>'
        '<category scheme="http://arxiv.org/schemas/atom" term="cs.AI"/>'
        '<category term="cs.LG"/>'
    )
    assert extract_attribute(xml, "category", "term") == ["cs.LG", "cs.AI", "cs.LG"]


def test_extract_attribute_does_not_match_prefixed_longer_names() -> None:
    xml = (
        '<arxiv:primary_category term="stat.ML"/>'
        '<category data-term="wrong" term="cs.LG"/>'
    )
    assert extract_attribute(xml, "category", "term") == ["cs.LG"]


def test_extract_entries_zero_and_many() -> None:
    assert extract_entries("<feed><title>empty</title></feed>") == []

    xml = "<feed><entry><id>1</id></entry>\n<ENTRY><id>2</id></ENTRY></feed>"
    assert extract_entries(xml) == ["<id>1</id>", "<id>2</id>"]


def test_parse_attributes_decodes_values() -> None:
    attributes = parse_attributes('<link href="http://x.org/?a=1&amp;b=2" REL="alternate"/>')
    assert attributes == {"href": "http://x.org/?a=1&b=2", "rel": "alternate"}


def test_extract_links_pdf_and_html_regardless_of_order() -> None:
    pdf_first = (
        '<link title="pdf" href="http://arxiv.org/pdf/1706.03762v7" rel="related" type="application/pdf"/>'
        '<link href="http://arxiv.org/abs/1706.03762v7" rel="alternate" type="text/html"/>'
    )
    html_first = (
        '<link href="http://arxiv.org/abs/1706.03762v7" rel="alternate" type="text/html"/>'
        '<link title="pdf" href="http://arxiv.org/pdf/1706.03762v7" rel="related" type="application/pdf"/>'
    )

    expected = ("http://arxiv.org/pdf/1706.03762v7", "http://arxiv.org/abs/1706.03762v7")
    assert extract_links(pdf_first) == expected
    assert extract_links(html_first) == expected


def test_extract_links_last_match_wins() -> None:
    xml = (
        '<link title="pdf" href="first.pdf"/>'
        '<link title="pdf" href="second.pdf"></link>'
    )
    assert extract_links(xml) == ("second.pdf", None)


def test_extract_links_none_when_absent() -> None:
    assert extract_links('<link title="doi" href="http://dx.doi.org/10.1/x" rel="related"/>') == (None, None)
