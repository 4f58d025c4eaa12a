# site_ingest/extract/docx_file.py
"""
DOCX extractor: raw paragraph text from the document body, no styles.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Union

from docx import Document

from site_ingest.errors import ParseFailure
from site_ingest.extract.base import ExtractionResult, Failure, Success
from site_ingest.logger import logger
from site_ingest.utils import clean_text

READ_FAILED = "Failed to read docx file"


def read_docx_text(path: Union[str, Path]) -> str:
    """Return the body paragraphs (and table cell paragraphs) one per line."""
    document = Document(str(path))
    lines = [para.text for para in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                lines.extend(para.text for para in cell.paragraphs)
    return "\n".join(lines)


async def extract_data_from_docx(path: Union[str, Path]) -> ExtractionResult[str]:
    """Read a .docx file and return its normalized text."""
    try:
        text = await asyncio.to_thread(read_docx_text, path)
    except OSError as exc:
        logger.warning("DOCX extraction failed %s: %s", path, exc)
        return Failure(f"{READ_FAILED}: {exc}", exc)
    except Exception as exc:  # python-docx surfaces zip/XML errors directly
        err = ParseFailure(f"{type(exc).__name__}: {exc}")
        logger.warning("DOCX extraction failed %s: %s", path, err)
        return Failure(f"{READ_FAILED}: {exc}", err)

    logger.debug("Extracted DOCX %s (%d chars)", path, len(text))
    return Success(clean_text(text))


__all__ = ["extract_data_from_docx", "read_docx_text"]
