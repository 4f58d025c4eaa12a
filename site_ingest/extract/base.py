# site_ingest/extract/base.py
"""
Tagged extraction results shared by every extractor.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeGuard, TypeVar, Union

from site_ingest.errors import IngestError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Extraction succeeded; ``data`` holds normalized text or a PageRecord."""

    data: T


@dataclass(frozen=True, slots=True)
class Failure:
    """Extraction failed; ``reason`` is human readable and includes the root cause."""

    reason: str
    error: Optional[BaseException] = None

    @property
    def category(self) -> str:
        """Class name of the underlying error (``NetworkFailure``, ``FileNotFoundError``…)."""
        if self.error is None:
            return IngestError.__name__
        return type(self.error).__name__


ExtractionResult = Union[Success[T], Failure]


def is_failure(result: ExtractionResult) -> TypeGuard[Failure]:
    return isinstance(result, Failure)


def is_success(result: ExtractionResult) -> TypeGuard[Success]:
    return isinstance(result, Success)


__all__ = ["ExtractionResult", "Failure", "Success", "is_failure", "is_success"]
