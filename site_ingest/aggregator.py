# File: site_ingest/aggregator.py
"""site_ingest.aggregator: Сборка результатов извлечения в единый отчёт."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Iterable, List, Tuple, TypedDict

from site_ingest.extract.base import ExtractionResult, Failure
from site_ingest.extract.html_page import PageRecord


class PageInfo(TypedDict):
    """Извлечённая веб-страница."""

    url: str
    title: str
    hostname: str
    pathname: str
    toc: str
    text: str
    document: str


class DocumentInfo(TypedDict):
    """Текст, извлечённый из файла (PDF, DOCX, текст, изображение)."""

    source: str
    text: str


class FailureInfo(TypedDict):
    """Источник, который не удалось обработать."""

    source: str
    category: str
    reason: str


@dataclass(slots=True)
class IngestReport:
    """Результаты обхода и извлечения: найденные URL, страницы, документы и ошибки."""

    urls: List[str] = field(default_factory=list)
    pages: List[PageInfo] = field(default_factory=list)
    documents: List[DocumentInfo] = field(default_factory=list)
    failures: List[FailureInfo] = field(default_factory=list)

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)

    def texts(self) -> List[str]:
        """Тексты для чанкера: документы страниц, затем тексты файлов."""
        return [p["document"] for p in self.pages] + [d["text"] for d in self.documents]


def _page_info(record: PageRecord) -> PageInfo:
    return {
        "url": record.url,
        "title": record.title,
        "hostname": record.hostname,
        "pathname": record.pathname,
        "toc": record.toc,
        "text": record.text,
        "document": record.document,
    }


def aggregate_results(
    results: Iterable[Tuple[str, ExtractionResult]], urls: Iterable[str] = ()
) -> IngestReport:
    """Раскладывает пары (источник, результат) по разделам IngestReport."""
    report = IngestReport(urls=list(urls))
    for source, result in results:
        if isinstance(result, Failure):
            report.failures.append(
                {"source": source, "category": result.category, "reason": result.reason}
            )
        elif isinstance(result.data, PageRecord):
            report.pages.append(_page_info(result.data))
        else:
            report.documents.append({"source": source, "text": str(result.data)})
    return report
