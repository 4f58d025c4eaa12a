"""Parsers for sitemap XML and HTML pages."""
