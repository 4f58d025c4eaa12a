# === FILE: site_ingest/crawler/crawler.py ===
from __future__ import annotations

import logging
import time
from typing import Dict, List, Optional, Set
from urllib.parse import urldefrag, urlsplit

from aiohttp import ClientSession

from site_ingest.config import IngestConfig
from site_ingest.crawler.fetcher import Fetcher, create_session
from site_ingest.crawler.link_extractor import extract_links
from site_ingest.errors import InvalidURL, NetworkFailure, ParseFailure
from site_ingest.logger import LOGGER_NAME
from site_ingest.parser.sitemap_parser import SitemapIndex, parse_sitemap
from site_ingest.utils import (
    canonicalize,
    extract_domain,
    is_crawlable_page,
    is_same_domain,
    is_webpage,
    is_xml,
)

__all__ = ("SitemapCrawler", "crawl_site")


class SitemapCrawler:
    """Асинхронный обход sitemap: индексы, urlset и HTML-страницы, ограниченные доменом seed-URL.

    Sitemap-индексы обходятся в глубину и последовательно; каждый URL
    помечается посещённым до загрузки, поэтому циклические ссылки между
    индексами не приводят к повторным запросам.
    """

    def __init__(self, config: IngestConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None
        self.failed: List[str] = []
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> SitemapCrawler:
        if self.session is None:
            self.session = create_session(self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, seed: str) -> List[str]:
        """Return in-domain page URLs reachable from *seed*, plus *seed* itself for non-sitemap seeds."""
        if not self.session:
            raise RuntimeError("Session not initialized")
        domain = extract_domain(canonicalize(seed))

        self.logger.info("Crawl started: %s", seed)
        start = time.monotonic()
        self.failed = []
        fetcher = Fetcher(self.session, self.config)
        visited: Set[str] = set()
        found: Dict[str, None] = {}

        stack: List[str] = [seed]
        while stack:
            target = stack.pop()
            # keyed on the fetched address minus fragment; query kept so paged sitemaps stay distinct
            key = urldefrag(target).url
            if key in visited:
                self.logger.debug("Already visited: %s", target)
                continue
            visited.add(key)
            children = await self._process(fetcher, target, domain, found)
            # reversed so that children are processed in document order
            stack.extend(reversed(children))

        urls = [u for u in found if is_same_domain(u, domain)]
        if not urlsplit(seed).path.endswith(self.config.sitemap_filename):
            if canonicalize(seed) not in found:
                urls.append(seed)

        duration = time.monotonic() - start
        self.logger.info(
            "Crawl finished: %d URLs from %d documents in %.2f s", len(urls), len(visited), duration
        )
        if self.failed:
            self.logger.info("Failed branches: %d", len(self.failed))
        return urls

    async def _process(
        self, fetcher: Fetcher, url: str, domain: str, found: Dict[str, None]
    ) -> List[str]:
        """Fetch one target, record its leaf URLs in *found*, return child sitemaps to visit."""
        try:
            page = await fetcher.fetch(url)
        except NetworkFailure as exc:
            self.logger.warning("Fetch failed %s: %s", url, exc)
            self.failed.append(url)
            return []

        if not is_xml(page.content):
            for link in extract_links(page.content):
                if is_same_domain(link, domain) and is_webpage(link):
                    found.setdefault(link)
            return []

        try:
            document = parse_sitemap(page.content)
        except ParseFailure as exc:
            self.logger.warning("Skipping sitemap %s: %s", url, exc)
            self.failed.append(url)
            return []

        if isinstance(document, SitemapIndex):
            children = [loc for loc in document.sitemaps if is_crawlable_page(loc)]
            self.logger.debug("Sitemap index %s: %d child sitemaps", url, len(children))
            return children

        for loc in document.urls:
            page_url = self._accept_leaf(loc, domain)
            if page_url is not None:
                found.setdefault(page_url)
        self.logger.debug("Urlset %s: %d entries", url, len(document.urls))
        return []

    @staticmethod
    def _accept_leaf(loc: str, domain: str) -> Optional[str]:
        if not is_crawlable_page(loc):
            return None
        try:
            url = canonicalize(loc)
        except InvalidURL:
            return None
        if is_same_domain(url, domain) and is_webpage(url):
            return url
        return None


async def crawl_site(config: IngestConfig, seed: str) -> List[str]:
    """Run one crawl inside its own session and return the discovered URLs."""
    async with SitemapCrawler(config) as crawler:
        return await crawler.crawl(seed)
