# site_ingest/errors.py
"""
Exception taxonomy shared by the crawler and the extractors.

Extractors never let these escape: they are caught at the extractor boundary
and turned into :class:`~site_ingest.extract.base.Failure` values.
"""
from __future__ import annotations


class IngestError(Exception):
    """Base class for all SiteIngest errors."""


class NetworkFailure(IngestError):
    """Connection error, timeout or non-2xx response."""

    def __init__(self, url: str, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class ParseFailure(IngestError):
    """Malformed XML/HTML/PDF/DOCX or an unexpected document shape."""


class RecognitionFailure(IngestError):
    """The OCR engine could not process the image."""


class InvalidURL(IngestError, ValueError):
    """The input is not a well-formed absolute URL."""


__all__ = ["IngestError", "NetworkFailure", "ParseFailure", "RecognitionFailure", "InvalidURL"]
