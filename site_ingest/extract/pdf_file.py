# site_ingest/extract/pdf_file.py
"""
PDF extractor that rebuilds visual lines from glyph-run coordinates.

pypdf hands text out in content-stream order, which loses line structure for
many generators. Runs are collected together with their vertical position:
consecutive runs with the same position belong to one visual line, a changed
position starts a new one.
"""
from __future__ import annotations

import asyncio
import io
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from pypdf import PdfReader

from site_ingest.errors import ParseFailure
from site_ingest.extract.base import ExtractionResult, Failure, Success
from site_ingest.logger import logger
from site_ingest.utils import clean_text

GlyphRun = Tuple[float, str]

READ_FAILED = "Failed to read pdf file"


def reflow_runs(runs: Iterable[GlyphRun]) -> str:
    """Join ``(y, text)`` runs into lines; every line ends with a single space."""
    lines: List[str] = []
    last_y: Optional[float] = None
    for y, text in runs:
        if last_y is None or y != last_y:
            lines.append(text)
        else:
            lines[-1] += text
        last_y = y
    return "\n".join(f"{line} " for line in lines)


def _page_runs(page) -> List[GlyphRun]:
    runs: List[GlyphRun] = []

    def visitor(text: str, cm: Sequence[float], tm: Sequence[float], font_dict, font_size) -> None:
        text = text.replace("\n", "")
        if not text:
            return
        # vertical position of the run in device space (tm x cm)
        y = tm[4] * cm[1] + tm[5] * cm[3] + cm[5]
        runs.append((round(y, 2), text))

    page.extract_text(visitor_text=visitor)
    return runs


def read_pdf_text(data: bytes) -> str:
    """Extract reflowed text from PDF bytes; pages are separated by a blank line."""
    reader = PdfReader(io.BytesIO(data))
    if reader.is_encrypted:
        try:
            reader.decrypt("")
        except Exception as exc:
            raise ParseFailure(f"PDF is encrypted and could not be decrypted: {exc}") from exc

    pages: List[str] = []
    for page in reader.pages:
        pages.append(reflow_runs(_page_runs(page)))
    return "\n\n".join(pages)


async def extract_data_from_pdf(path: Union[str, Path]) -> ExtractionResult[str]:
    """Read a PDF file and return its normalized text."""
    try:
        data = await asyncio.to_thread(Path(path).read_bytes)
        text = await asyncio.to_thread(read_pdf_text, data)
    except (OSError, ParseFailure) as exc:
        logger.warning("PDF extraction failed %s: %s", path, exc)
        return Failure(f"{READ_FAILED}: {exc}", exc)
    except Exception as exc:  # pypdf raises a wide range of errors on broken files
        err = ParseFailure(f"{type(exc).__name__}: {exc}")
        logger.warning("PDF extraction failed %s: %s", path, err)
        return Failure(f"{READ_FAILED}: {exc}", err)

    logger.debug("Extracted PDF %s (%d chars)", path, len(text))
    return Success(clean_text(text))


__all__ = ["GlyphRun", "extract_data_from_pdf", "read_pdf_text", "reflow_runs"]
