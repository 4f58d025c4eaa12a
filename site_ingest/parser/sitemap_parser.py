# File: site_ingest/parser/sitemap_parser.py
"""site_ingest.parser.sitemap_parser: Разбор sitemap.xml в SitemapIndex или UrlSet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

from lxml import etree

from site_ingest.errors import ParseFailure

__all__ = ("SitemapIndex", "UrlSet", "SitemapDocument", "parse_sitemap")


@dataclass(slots=True)
class SitemapIndex:
    """Индекс sitemap: ссылки на дочерние sitemap-файлы."""

    sitemaps: List[str] = field(default_factory=list)


@dataclass(slots=True)
class UrlSet:
    """Обычный sitemap: ссылки на конечные страницы."""

    urls: List[str] = field(default_factory=list)


SitemapDocument = Union[SitemapIndex, UrlSet]


def _locs(root: etree._Element, entry: str) -> List[str]:
    locs = root.findall(f"{{*}}{entry}/{{*}}loc")
    return [loc.text.strip() for loc in locs if loc.text and loc.text.strip()]


def parse_sitemap(xml_content: str) -> SitemapDocument:
    """Разбирает XML sitemap и возвращает SitemapIndex или UrlSet.

    Args:
        xml_content: строка с содержимым sitemap.xml.

    Returns:
        SitemapIndex для ``<sitemapindex>``, UrlSet для ``<urlset>``.

    Raises:
        ParseFailure: XML не разбирается или корневой тег не является
            ни ``sitemapindex``, ни ``urlset``.

    Пример:
    ```python
    from site_ingest.parser.sitemap_parser import UrlSet, parse_sitemap

    doc = parse_sitemap(open('sitemap.xml', encoding='utf-8').read())
    if isinstance(doc, UrlSet):
        print(doc.urls)
    ```
    """
    # content is already decoded text; the XML declaration charset no longer applies
    parser = etree.XMLParser(
        ns_clean=True, recover=True, resolve_entities=False, no_network=True, encoding="utf-8"
    )
    try:
        root = etree.fromstring(xml_content.lstrip("\ufeff \t\r\n").encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as exc:
        raise ParseFailure(f"Malformed sitemap XML: {exc}") from exc
    if root is None:
        raise ParseFailure("Malformed sitemap XML: empty document")

    tag = etree.QName(root).localname.lower()
    if tag == "sitemapindex":
        return SitemapIndex(sitemaps=_locs(root, "sitemap"))
    if tag == "urlset":
        return UrlSet(urls=_locs(root, "url"))
    raise ParseFailure(f"Unexpected sitemap root element <{tag}>")
