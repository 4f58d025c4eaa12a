# site_ingest/crawler/link_extractor.py
"""
Link extraction for HTML bodies reached by the sitemap crawler.
"""
from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup
from bs4.element import Tag

from site_ingest.errors import InvalidURL
from site_ingest.utils import canonicalize, is_crawlable_page, remove_duplicates


def extract_links(html: str) -> List[str]:
    """
    Extract canonical absolute HTTP(S) links from anchor tags.

    Relative links are ignored, as are links whose extension marks them as
    binary/document targets. Order of first appearance is kept.
    """
    soup = BeautifulSoup(html, "html.parser")
    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        if not raw.lower().startswith("http") or not is_crawlable_page(raw):
            continue
        try:
            links.append(canonicalize(raw))
        except InvalidURL:
            continue
    return remove_duplicates(links)
