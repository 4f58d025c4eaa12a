# File: tests/test_cli.py
"""Тесты для CLI (`site_ingest/cli.py`) с использованием click.testing.CliRunner.
Проверяют команды `crawl`, `extract`, `ingest`, `config`, `--version` и обработку ошибок.
"""
import asyncio
import importlib
import json

import pytest
from click.testing import CliRunner

from site_ingest.aggregator import IngestReport
from site_ingest.cli import cli

# the package re-exports the click group under the submodule name
cli_module = importlib.import_module("site_ingest.cli")

PAGE = {
    "url": "http://example.com/docs/a",
    "title": "A",
    "hostname": "example.com",
    "pathname": "/docs/a",
    "toc": "Table of Contents\n",
    "text": "Table of Contents\n. \nbody",
    "document": "URL: http://example.com/docs/a\nTitle: A\nExtracted Data: Table of Contents\n. \nbody",
}


@pytest.fixture()
def calls():
    return {}


@pytest.fixture(autouse=True)
def patch_pipeline(monkeypatch, calls):
    """Патчим обход и ingest, чтобы не ходить в сеть."""

    async def fake_crawl(cfg, url):
        calls["crawl"] = url
        return ["http://example.com/docs/a", "http://example.com/docs/b"]

    async def fake_ingest(cfg, url):
        calls["ingest"] = (url, cfg.max_pages)
        return IngestReport(urls=[PAGE["url"]], pages=[dict(PAGE)])

    monkeypatch.setattr(cli_module, "crawl_site", fake_crawl)
    monkeypatch.setattr(cli_module, "ingest_site", fake_ingest)


def test_cli_module_is_patchable():
    assert callable(cli_module.crawl_site)
    assert cli_module.cli is cli


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "SiteIngest, version" in result.output


def test_show_config_defaults():
    result = CliRunner().invoke(cli, ["config"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["timeout"] == 30.0
    assert data["sitemap_filename"] == "sitemap.xml"
    assert data["request_profile"]["referer"] == "https://google.com/"


def test_show_config_from_file(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("timeout: 3\nmax_pages: 7\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["timeout"] == 3.0
    assert data["max_pages"] == 7


def test_bad_config_reports_error(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("bogus: 1\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1
    assert "Ошибка загрузки конфигурации" in result.output


def test_crawl_stdout(calls):
    result = CliRunner().invoke(cli, ["crawl", "http://example.com/sitemap.xml"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["http://example.com/docs/a", "http://example.com/docs/b"]
    assert calls["crawl"] == "http://example.com/sitemap.xml"


def test_crawl_json_file(tmp_path):
    out = tmp_path / "nested" / "urls.json"
    result = CliRunner().invoke(cli, ["crawl", "http://example.com/", "--json", str(out)])
    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding="utf-8")) == [
        "http://example.com/docs/a",
        "http://example.com/docs/b",
    ]


def test_crawl_invalid_url(monkeypatch):
    monkeypatch.undo()
    result = CliRunner().invoke(cli, ["crawl", "not-a-url"])
    assert result.exit_code == 1
    assert "Ошибка при обходе" in result.output


def test_extract_text_file(text_file):
    result = CliRunner().invoke(cli, ["--log-level", "ERROR", "extract", str(text_file)])
    assert result.exit_code == 0
    assert result.stdout.strip() == "first line\nsecond line"


def test_extract_report_and_failure_exit_code(text_file, tmp_path):
    missing = tmp_path / "missing.docx"
    result = CliRunner().invoke(cli, ["--log-level", "ERROR", "extract", str(text_file), str(missing), "--report"])
    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["documents"][0]["text"] == "first line\nsecond line"
    assert data["failures"][0]["source"] == str(missing)
    assert "Failed to read docx file" in result.output


def test_ingest_stdout_with_limit(calls):
    result = CliRunner().invoke(cli, ["ingest", "http://example.com/sitemap.xml", "--limit", "5", "--pretty"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["pages"][0]["url"] == PAGE["url"]
    assert calls["ingest"] == ("http://example.com/sitemap.xml", 5)


def test_ingest_writes_reports(tmp_path):
    json_out = tmp_path / "report.json"
    html_out = tmp_path / "report.html"
    pages_dir = tmp_path / "pages"
    result = CliRunner().invoke(
        cli,
        [
            "ingest", "http://example.com/sitemap.xml",
            "--json", str(json_out),
            "--html", str(html_out),
            "--out-dir", str(pages_dir),
        ],
    )
    assert result.exit_code == 0
    assert json.loads(json_out.read_text(encoding="utf-8"))["pages"][0]["title"] == "A"
    assert "http://example.com/docs/a" in html_out.read_text(encoding="utf-8")
    page_file = pages_dir / "http___example_com_docs_a.txt"
    assert page_file.read_text(encoding="utf-8") == PAGE["document"]


def test_ingest_timeout(monkeypatch):
    async def slow(cfg, url):
        await asyncio.sleep(2)
        return IngestReport()

    monkeypatch.setattr(cli_module, "ingest_site", slow)
    result = CliRunner().invoke(cli, ["ingest", "http://example.com/", "--ingest-timeout", "0.2"])
    assert result.exit_code == 1
    assert "Обработка не завершена" in result.output
