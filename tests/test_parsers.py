# File: tests/test_parsers.py
import pytest

from site_ingest.crawler.link_extractor import extract_links
from site_ingest.errors import ParseFailure
from site_ingest.parser.html_parser import parse_html
from site_ingest.parser.sitemap_parser import SitemapIndex, UrlSet, parse_sitemap

from .conftest import sitemap_index, urlset


def test_parse_urlset():
    doc = parse_sitemap(urlset("https://example.com/a", " https://example.com/b "))
    assert isinstance(doc, UrlSet)
    assert doc.urls == ["https://example.com/a", "https://example.com/b"]


def test_parse_sitemap_index():
    doc = parse_sitemap(sitemap_index("https://example.com/s1.xml", "https://example.com/s2.xml"))
    assert isinstance(doc, SitemapIndex)
    assert doc.sitemaps == ["https://example.com/s1.xml", "https://example.com/s2.xml"]


def test_parse_sitemap_without_namespace():
    doc = parse_sitemap("<urlset><url><loc>https://example.com/x</loc></url><url><loc></loc></url></urlset>")
    assert isinstance(doc, UrlSet)
    assert doc.urls == ["https://example.com/x"]


def test_parse_sitemap_unexpected_root():
    with pytest.raises(ParseFailure):
        parse_sitemap('<?xml version="1.0"?><rss><channel/></rss>')


def test_parse_sitemap_garbage():
    with pytest.raises(ParseFailure):
        parse_sitemap("<?xml this is not xml")


def test_parse_html_collects_title_headings_and_visible_text(mock_page_data):
    parsed = parse_html(mock_page_data)
    assert parsed.url == "http://example.com/docs/guide?ref=1"
    assert parsed.title == "Guide"
    assert parsed.headings == [
        (1, "Intro"),
        (2, "Setup"),
        (2, "Usage"),
        (3, "Basics"),
        (1, "Reference"),
        (2, "API"),
    ]
    lines = parsed.text.splitlines()
    assert "Welcome   to the guide." in lines
    assert "Install it." in lines
    assert "var hidden = 1;" not in parsed.text
    assert "color: red" not in parsed.text


def test_parse_html_from_string():
    parsed = parse_html("<p>  only text </p>")
    assert parsed.url == ""
    assert parsed.title == ""
    assert parsed.headings == []
    assert parsed.text == "only text"


def test_extract_links_absolute_only():
    html = (
        '<a href="https://example.com/a?x=1#top">A</a>'
        '<a href="/relative">R</a>'
        '<a href="mailto:me@example.com">M</a>'
        '<a href="https://example.com/file.pdf">PDF</a>'
        '<a href="http://other.com/b">B</a>'
        '<a href="https://example.com/a">A again</a>'
        "<a>no href</a>"
    )
    assert extract_links(html) == ["https://example.com/a", "http://other.com/b"]


def test_parse_sitemap_ignores_declared_charset_of_decoded_text():
    xml = (
        '<?xml version="1.0" encoding="ISO-8859-1"?>'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
        "<url><loc>https://example.com/café</loc></url></urlset>"
    )
    doc = parse_sitemap(xml)
    assert isinstance(doc, UrlSet)
    assert doc.urls == ["https://example.com/café"]
