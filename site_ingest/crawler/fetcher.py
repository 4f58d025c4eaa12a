# site_ingest/crawler/fetcher.py
"""
Fetcher module: single-attempt HTTP GET with the shared request profile and a bounded timeout.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession, ClientTimeout

from site_ingest.config import IngestConfig
from site_ingest.crawler.models import PageData
from site_ingest.errors import NetworkFailure


def create_session(config: IngestConfig) -> ClientSession:
    """Build a session carrying the browser-like request profile and per-request timeout."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers=config.request_profile.headers(),
        raise_for_status=False,
    )


class Fetcher:
    """Fetches one URL per call; there are no retries, a failed attempt is definitive."""

    def __init__(self, session: ClientSession, config: IngestConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its decoded body.

        Raises NetworkFailure on connection errors, timeouts and non-2xx statuses.
        """
        try:
            async with self.session.get(url) as resp:
                if not 200 <= resp.status < 300:
                    raise NetworkFailure(url, f"HTTP {resp.status} {resp.reason or ''}".rstrip(), status=resp.status)
                text = await resp.text(errors="replace")
                return PageData(url=url, content=text)
        except asyncio.TimeoutError as exc:
            raise NetworkFailure(url, f"Timed out after {self.config.timeout} seconds") from exc
        except ClientError as exc:
            raise NetworkFailure(url, f"{type(exc).__name__}: {exc}") from exc
