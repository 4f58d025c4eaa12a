# site_ingest/report/json_report.py

"""
JSON-отчёт SiteIngest: IngestReport целиком, как он выдаётся ``IngestReport.json()``.
"""
from pathlib import Path

from site_ingest.aggregator import IngestReport


def render_json(report: IngestReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Записывает отчёт в файл (UTF-8, без экранирования не-ASCII символов).

    :param report: результат ingest/extract
    :param output_path: куда писать; недостающие каталоги создаются
    :param pretty: отступ в 2 пробела
    :return: путь к записанному файлу

    Пример:
    ```python
    from site_ingest.report.json_report import render_json
    render_json(report, 'reports/ingest.json', pretty=False)
    ```
    """
    target = Path(output_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(report.json(pretty=pretty), encoding='utf-8')
    return target
