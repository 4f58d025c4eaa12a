# File: tests/conftest.py
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from aiohttp import web

from site_ingest.config import IngestConfig
from site_ingest.crawler.models import PageData

HOST = "127.0.0.1"


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, HOST, port)
    await site.start()
    try:
        yield f"http://{HOST}:{port}"
    finally:
        await runner.cleanup()


def urlset(*urls: str) -> str:
    entries = "".join(f"<url><loc>{u}</loc></url>" for u in urls)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{entries}</urlset>'
    )


def sitemap_index(*sitemaps: str) -> str:
    entries = "".join(f"<sitemap><loc>{u}</loc></sitemap>" for u in sitemaps)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{entries}</sitemapindex>'
    )


@pytest.fixture()
def config() -> IngestConfig:
    """Config with a short timeout for local test servers."""
    return IngestConfig(timeout=2.0)


@pytest.fixture()
def sample_html() -> str:
    return (
        "<html><head><title>Guide</title><script>var hidden = 1;</script></head><body>"
        "<h1>Intro</h1><p>Welcome   to the guide.</p>"
        "<h2>Setup</h2><p>Install it.</p>"
        "<h2>Usage</h2>"
        "<h3>Basics</h3><p>Run it.</p>"
        "<h1>Reference</h1>"
        "<h2>API</h2><p>Call it.</p>"
        "<style>.x { color: red }</style>"
        "</body></html>"
    )


@pytest.fixture()
def mock_page_data(sample_html) -> PageData:
    return PageData(url="http://example.com/docs/guide?ref=1", content=sample_html)


@pytest.fixture()
def text_file(tmp_path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text("  first line  \n\n\n   second line\n\t\n", encoding="utf-8")
    return path
