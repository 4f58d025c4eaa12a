# site_ingest/crawler/models.py
"""
Data models for the SiteIngest crawler.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PageData:
    """Holds the requested URL and the decoded body of a fetched document."""

    url: str
    content: str
