# site_ingest/extract/html_page.py
"""
Live-page extractor: fetch a URL, outline its headings and return a PageRecord.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from aiohttp import ClientSession

from site_ingest.config import IngestConfig
from site_ingest.crawler.fetcher import Fetcher, create_session
from site_ingest.crawler.models import PageData
from site_ingest.errors import IngestError, ParseFailure
from site_ingest.extract.base import ExtractionResult, Failure, Success
from site_ingest.extract.toc import build_toc
from site_ingest.logger import logger
from site_ingest.parser.html_parser import parse_html
from site_ingest.utils import canonicalize

TITLE_FALLBACK = "Failed to extract title from the HTML"
FETCH_FAILED = "Failed to fetch the URL"


@dataclass(frozen=True, slots=True)
class PageRecord:
    """One successfully extracted page.

    ``text`` is the TOC followed by the body; ``document`` prefixes it with
    the URL and title and is what gets handed to the chunker.
    """

    url: str
    title: str
    hostname: str
    pathname: str
    toc: str
    body: str
    text: str
    document: str


def build_page_record(page: PageData) -> PageRecord:
    """Turn a fetched HTML document into a PageRecord (no network access)."""
    parsed = parse_html(page)
    toc = build_toc(parsed.headings)
    title = parsed.title or TITLE_FALLBACK
    text = f"{toc}. \n{parsed.text}"
    parts = urlsplit(page.url)
    return PageRecord(
        url=page.url,
        title=title,
        hostname=parts.hostname or "",
        pathname=parts.path or "/",
        toc=toc,
        body=parsed.text,
        text=text,
        document=f"URL: {page.url}\nTitle: {title}\nExtracted Data: {text}",
    )


async def _fetch(url: str, config: IngestConfig, session: Optional[ClientSession]) -> PageData:
    if session is not None:
        return await Fetcher(session, config).fetch(url)
    async with create_session(config) as own_session:
        return await Fetcher(own_session, config).fetch(url)


async def extract_data_from_url(
    url: str,
    config: Optional[IngestConfig] = None,
    session: Optional[ClientSession] = None,
) -> ExtractionResult[PageRecord]:
    """Fetch *url* with the request profile and extract its text.

    Never raises for network or parsing problems: those come back as a
    :class:`Failure` whose reason starts with ``"Failed to fetch the URL"``.
    """
    config = config or IngestConfig()
    try:
        canonicalize(url)
        page = await _fetch(url, config, session)
    except IngestError as exc:
        logger.warning("Page extraction failed %s: %s", url, exc)
        return Failure(f"{FETCH_FAILED}: {exc}", exc)

    try:
        record = build_page_record(page)
    except Exception as exc:  # bs4 tree builders can fail on pathological markup
        err = ParseFailure(f"{type(exc).__name__}: {exc}")
        logger.warning("Page parsing failed %s: %s", url, err)
        return Failure(f"{FETCH_FAILED}: {err}", err)

    logger.debug("Extracted %s (%d chars)", url, len(record.text))
    return Success(record)


__all__ = ["FETCH_FAILED", "PageRecord", "TITLE_FALLBACK", "build_page_record", "extract_data_from_url"]
