# === FILE: site_ingest/cli.py ===
#!/usr/bin/env python3
"""
Командная строка SiteIngest.

Команды:
  crawl     Найти страницы сайта по sitemap или HTML-странице
  extract   Извлечь текст из URL или файлов (PDF, DOCX, текст, изображения)
  ingest    Обход + извлечение всех страниц, сохранение отчётов
  config    Вывести действующую конфигурацию

Общие опции:
  --config PATH       YAML/JSON-конфиг (без него используются значения по умолчанию)
  --log-level LEVEL   DEBUG, INFO, WARNING, ERROR, CRITICAL
  --log-file PATH     Дополнительно писать логи в файл
  --log-format FORMAT Формат строк лога

Пример:
  site-ingest ingest https://example.com/sitemap.xml --json report.json --limit 50
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from site_ingest import __version__
from site_ingest.config import IngestConfig, load_config
from site_ingest.crawler.crawler import crawl_site
from site_ingest.engine import ingest_site, ingest_sources
from site_ingest.logger import init_logging
from site_ingest.report.html_report import render_html
from site_ingest.report.json_report import render_json
from site_ingest.utils import url_to_slug

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

_OUTPUT_FILE = click.Path(writable=True, dir_okay=False, path_type=Path)


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def json_file_option(help_text: str):
    """Опция ``--json/-j`` для команд, умеющих сохранять результат в файл."""
    return click.option('--json', '-j', 'json_output', default=None, type=_OUTPUT_FILE, help=help_text)


def _run(coro, action: str, timeout=None):
    """Запускает корутину; любая ошибка завершает CLI с кодом 1."""
    try:
        return asyncio.run(asyncio.wait_for(coro, timeout=timeout))
    except asyncio.TimeoutError:
        print_error(f'Обработка не завершена за {timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при {action}: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteIngest, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML/JSON-файл конфигурации.'
)
@click.option(
    '--log-level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Минимальный уровень сообщений в логе'
)
@click.option('--log-file', default=None, type=_OUTPUT_FILE, help='Файл для логов (с ротацией)')
@click.option(
    '--log-format',
    default='%(asctime)s %(levelname)s %(message)s', show_default=True,
    help='Формат строк лога (logging.Formatter)'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Обход sitemap и извлечение текста для индексации."""
    init_logging(level=log_level, log_file=log_file, log_format=log_format)
    cfg = IngestConfig()
    if config_path is not None:
        try:
            cfg = load_config(config_path)
        except Exception as e:
            print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@json_file_option('Записать найденные URL в JSON-файл')
@click.pass_context
def crawl(ctx, url, json_output):
    """Найти страницы сайта, начиная с URL (sitemap или HTML)."""
    urls = _run(crawl_site(ctx.obj['config'], url), 'обходе')

    if not json_output:
        for found in urls:
            click.echo(found)
        return
    json_output.parent.mkdir(parents=True, exist_ok=True)
    json_output.write_text(json.dumps(urls, ensure_ascii=False, indent=2), encoding='utf-8')
    click.echo(f'URL list: {json_output}')


@cli.command('extract', context_settings=CONTEXT_SETTINGS)
@click.argument('sources', nargs=-1, required=True)
@click.option('--report', 'as_report', is_flag=True, help='Печатать JSON-отчёт вместо текстов')
@click.pass_context
def extract(ctx, sources, as_report):
    """Извлечь текст из перечисленных URL и файлов."""
    report = _run(ingest_sources(ctx.obj['config'], sources), 'извлечении')

    click.echo(report.json(pretty=True) if as_report else '\n'.join(report.texts()))
    for failure in report.failures:
        click.secho(f'{failure["source"]}: {failure["reason"]}', fg='red', err=True)
    if report.failures:
        sys.exit(1)


@cli.command('ingest', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--limit', '-l',
    type=click.IntRange(min=1), default=None,
    help='Извлечь не больше N страниц (перекрывает max_pages)'
)
@json_file_option('Записать JSON-отчёт в файл')
@click.option('--html', '-h', 'html_output', default=None, type=_OUTPUT_FILE, help='Записать HTML-отчёт в файл')
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Каталог со своим report.html.j2'
)
@click.option(
    '--out-dir', '-o',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Каталог для .txt-файлов с документом каждой страницы'
)
@click.option('--pretty', is_flag=True, help='JSON с отступами')
@click.option('--ingest-timeout', type=float, default=None, help='Ограничение на весь прогон (секунд)')
@click.pass_context
def ingest(ctx, url, limit, json_output, html_output, template_dir, out_dir, pretty, ingest_timeout):
    """Обойти сайт, извлечь текст всех страниц и сохранить отчёты."""
    cfg = ctx.obj['config']
    if limit is not None:
        cfg = cfg.model_copy(update={'max_pages': limit})
    click.echo(f'Starting ingest: {url}', err=True)
    report = _run(ingest_site(cfg, url), 'обработке', timeout=ingest_timeout)

    if out_dir:
        out_dir.mkdir(parents=True, exist_ok=True)
        for page in report.pages:
            (out_dir / f'{url_to_slug(page["url"])}.txt').write_text(page['document'], encoding='utf-8')
        click.echo(f'Page texts: {out_dir}')

    if not (json_output or html_output or out_dir):
        click.echo(report.json(pretty=pretty))
        return

    try:
        if json_output:
            click.echo(f'JSON report: {render_json(report, json_output, pretty=pretty)}')
        if html_output:
            click.echo(f'HTML report: {render_html(report, template_dir, html_output)}')
    except Exception as e:
        print_error(f'Ошибка при сохранении отчёта: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Вывести действующую конфигурацию (JSON)."""
    click.echo(ctx.obj['config'].model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
