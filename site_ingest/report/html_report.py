# File: site_ingest/report/html_report.py
"""site_ingest.report.html_report: HTML-отчёт по шаблону Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from site_ingest.aggregator import IngestReport

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "report.html.j2"


def render_html(
    report: IngestReport,
    template_dir: Optional[Union[Path, str]],
    output_path: Union[Path, str],
) -> Path:
    """Записывает HTML-отчёт, отрисованный шаблоном ``report.html.j2``.

    Args:
        report: результат ingest/extract.
        template_dir: каталог со своим ``report.html.j2``;
            None означает шаблон, поставляемый с пакетом.
        output_path: куда писать; недостающие каталоги создаются.

    Returns:
        Путь к записанному файлу.

    В шаблон передаются ``urls``, ``pages``, ``documents`` и ``failures``.
    """
    env = Environment(
        loader=FileSystemLoader(str(template_dir or DEFAULT_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
        undefined=StrictUndefined,
    )
    html = env.get_template(TEMPLATE_NAME).render(
        urls=report.urls,
        pages=report.pages,
        documents=report.documents,
        failures=report.failures,
    )

    target = Path(output_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(html, encoding="utf-8")
    return target
