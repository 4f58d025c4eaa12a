# File: tests/test_logger.py
import logging

import pytest

from site_ingest.logger import LOGGER_NAME, configure, init_logging


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    init_logging()


def test_configure_writes_rotating_file(tmp_path):
    log_file = tmp_path / "logs" / "ingest.log"
    lg = configure(level="DEBUG", log_file=log_file, log_format="%(levelname)s %(message)s")
    lg.debug("crawl started")
    for handler in lg.handlers:
        handler.flush()

    assert lg.name == LOGGER_NAME
    assert lg.propagate is False
    assert "DEBUG crawl started" in log_file.read_text(encoding="utf-8")


def test_init_logging_replaces_handlers():
    init_logging(level="WARNING")
    lg = init_logging(level="INFO")
    assert len(lg.handlers) == 1
    assert lg.level == logging.INFO


def test_third_party_loggers_follow_debug():
    init_logging(level="INFO")
    assert logging.getLogger("pypdf").level == logging.ERROR
    init_logging(level="DEBUG")
    assert logging.getLogger("pypdf").level == logging.DEBUG
