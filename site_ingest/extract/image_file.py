# site_ingest/extract/image_file.py
"""
Image extractor: OCR through Tesseract.

Each call opens the image, runs one recognition pass and releases the image;
no engine instance outlives the call.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Union

import pytesseract
from PIL import Image

from site_ingest.errors import RecognitionFailure
from site_ingest.extract.base import ExtractionResult, Failure, Success
from site_ingest.logger import logger
from site_ingest.utils import clean_text

RECOGNITION_FAILED = "Failed to recognize text"


def recognize_image(path: Union[str, Path], language: str = "eng") -> str:
    """Run OCR over one image file and return the raw recognized text."""
    with Image.open(path) as image:
        image.load()
        try:
            return pytesseract.image_to_string(image, lang=language)
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as exc:
            raise RecognitionFailure(str(exc).strip() or type(exc).__name__) from exc


async def extract_data_from_image(
    path: Union[str, Path], language: str = "eng"
) -> ExtractionResult[str]:
    """Recognize text in an image using the *language* model (Tesseract code, e.g. ``eng``)."""
    try:
        text = await asyncio.to_thread(recognize_image, path, language)
    except (OSError, Image.DecompressionBombError, RecognitionFailure) as exc:
        logger.warning("OCR failed %s: %s", path, exc)
        return Failure(f"{RECOGNITION_FAILED}: {exc}", exc)

    logger.debug("Recognized %s (%d chars)", path, len(text))
    return Success(clean_text(text))


__all__ = ["extract_data_from_image", "recognize_image"]
