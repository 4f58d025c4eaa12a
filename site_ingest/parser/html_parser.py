# === FILE: site_ingest/parser/html_parser.py ===
"""HTML parsing utilities for SiteIngest.

`parse_html()` turns raw markup (or a fetched
:class:`~site_ingest.crawler.models.PageData`) into a :class:`ParsedPage`:

* title: document <title> text or ``""`` if absent.
* headings: ``(level, text)`` pairs for h1…h4 in document order.
* text: visible text, one block per line, normalized by
  :func:`site_ingest.utils.clean_text`.

Links are handled separately by :mod:`site_ingest.crawler.link_extractor`
because the crawler never needs the rest of the page.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from bs4 import BeautifulSoup

from site_ingest.utils import clean_text

__all__: Sequence[str] = ("HEADING_TAGS", "ParsedPage", "parse_html")

HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4")
_INVISIBLE_TAGS: tuple[str, ...] = ("script", "style", "noscript", "template")


@dataclass(slots=True)
class ParsedPage:
    """Lightweight representation of an HTML page."""

    url: str
    title: str
    headings: list[tuple[int, str]] = field(default_factory=list)
    text: str = ""


def parse_html(page: Any) -> ParsedPage:
    """Parse raw HTML (string) or :class:`~site_ingest.crawler.models.PageData`.

    Parameters
    ----------
    page
        Either a *str* (HTML markup) **or** an object with ``url`` and
        ``content`` attributes.
    """
    if hasattr(page, "content") and hasattr(page, "url"):
        html = page.content
        base_url = str(page.url)
    else:
        html = str(page)
        base_url = ""

    soup = BeautifulSoup(html, "html.parser")

    for element in soup(list(_INVISIBLE_TAGS)):
        element.decompose()

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""

    headings: list[tuple[int, str]] = []
    for tag in soup.find_all(list(HEADING_TAGS)):
        heading = " ".join(tag.get_text(" ").split())
        headings.append((int(tag.name[1]), heading))

    text = clean_text(soup.get_text("\n"))

    return ParsedPage(url=base_url, title=title, headings=headings, text=text)
