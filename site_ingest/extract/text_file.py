# site_ingest/extract/text_file.py
"""
Plain-text extractor.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Union

from site_ingest.extract.base import ExtractionResult, Failure, Success
from site_ingest.logger import logger
from site_ingest.utils import clean_text

READ_FAILED = "Failed to read text file"


async def extract_data_from_file(path: Union[str, Path]) -> ExtractionResult[str]:
    """Read a UTF-8 text file (undecodable bytes replaced) and normalize it."""
    try:
        text = await asyncio.to_thread(Path(path).read_text, encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("Text extraction failed %s: %s", path, exc)
        return Failure(f"{READ_FAILED}: {exc}", exc)

    return Success(clean_text(text))


__all__ = ["extract_data_from_file"]
