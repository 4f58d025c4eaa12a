"""Extractors: one per source kind, each returning a Success/Failure result.

:func:`extract_source` picks the extractor for a URL or a file path.
"""
from __future__ import annotations

from pathlib import Path
from typing import Awaitable, Callable, Dict, Optional, Union

from site_ingest.config import IngestConfig
from site_ingest.extract.base import ExtractionResult, Failure, Success, is_failure, is_success
from site_ingest.extract.docx_file import extract_data_from_docx
from site_ingest.extract.html_page import PageRecord, extract_data_from_url
from site_ingest.extract.image_file import extract_data_from_image
from site_ingest.extract.pdf_file import extract_data_from_pdf
from site_ingest.extract.text_file import extract_data_from_file
from site_ingest.extract.toc import HeadingNode, build_toc, number_headings
from site_ingest.utils import get_extension

IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "bmp", "tif", "tiff", "webp", "pbm", "pgm", "ppm"})
TEXT_EXTENSIONS = frozenset({"txt", "text", "md", "rst", "csv", "log", "json", "xml", "yaml", "yml"})

_FileExtractor = Callable[[Path], Awaitable[ExtractionResult]]

_FILE_EXTRACTORS: Dict[str, _FileExtractor] = {
    "pdf": extract_data_from_pdf,
    "docx": extract_data_from_docx,
    **{ext: extract_data_from_file for ext in TEXT_EXTENSIONS},
}


async def extract_source(
    source: Union[str, Path], config: Optional[IngestConfig] = None
) -> ExtractionResult:
    """Extract text from a live URL or a local file, chosen by scheme or suffix."""
    config = config or IngestConfig()
    raw = str(source)
    if raw.lower().startswith(("http://", "https://")):
        return await extract_data_from_url(raw, config)

    path = Path(raw).expanduser()
    ext = get_extension(path.name)
    if ext in IMAGE_EXTENSIONS:
        return await extract_data_from_image(path, config.ocr_language)
    extractor = _FILE_EXTRACTORS.get(ext or "")
    if extractor is None:
        return Failure(f"Unsupported source type: {raw}")
    return await extractor(path)


__all__ = [
    "ExtractionResult",
    "Failure",
    "HeadingNode",
    "IMAGE_EXTENSIONS",
    "PageRecord",
    "Success",
    "TEXT_EXTENSIONS",
    "build_toc",
    "extract_data_from_docx",
    "extract_data_from_file",
    "extract_data_from_image",
    "extract_data_from_pdf",
    "extract_data_from_url",
    "extract_source",
    "is_failure",
    "is_success",
    "number_headings",
]
