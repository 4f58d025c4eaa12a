"""Sitemap crawler: fetcher, link extraction and the domain-scoped crawl."""
