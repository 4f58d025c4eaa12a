# File: site_ingest/engine.py
"""site_ingest.engine: Оркестрация: обход сайта, извлечение страниц и файлов, сборка отчёта."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from site_ingest.aggregator import IngestReport, aggregate_results
from site_ingest.config import IngestConfig
from site_ingest.crawler.crawler import SitemapCrawler
from site_ingest.extract import extract_data_from_url, extract_source
from site_ingest.extract.base import ExtractionResult
from site_ingest.logger import logger

__all__ = ["ingest_site", "ingest_sources"]


async def ingest_site(config: IngestConfig, seed: str) -> IngestReport:
    """Обходит сайт от seed и последовательно извлекает текст каждой найденной страницы."""
    results: List[Tuple[str, ExtractionResult]] = []
    async with SitemapCrawler(config) as crawler:
        urls = await crawler.crawl(seed)
        targets = urls[: config.max_pages] if config.max_pages else urls
        logger.info("Extracting %d of %d pages", len(targets), len(urls))
        for url in targets:
            result = await extract_data_from_url(url, config, session=crawler.session)
            results.append((url, result))
    report = aggregate_results(results, urls)
    logger.info("Ingest finished: %d pages, %d failures", len(report.pages), len(report.failures))
    return report


async def ingest_sources(config: IngestConfig, sources: Iterable[str]) -> IngestReport:
    """Извлекает текст из набора файлов и/или URL без обхода."""
    results: List[Tuple[str, ExtractionResult]] = []
    for source in sources:
        results.append((source, await extract_source(source, config)))
    return aggregate_results(results)
