# === FILE: site_ingest/logger.py ===
"""Logging setup for **SiteIngest**.

All modules log through one named logger::

      from site_ingest.logger import logger
      logger.info("Crawl started")

Records go to stderr, so stdout stays free for command output (URL lists,
extracted text, JSON reports). A rotating log file can be added with
:func:`configure`. Chatty third-party loggers (pypdf warns on every slightly
broken PDF, PIL logs plugin loading) are capped at WARNING / ERROR unless the
project logger itself runs at DEBUG.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Mapping, Union

LOGGER_NAME: Final[str] = "SiteIngest"
_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_FILE_BACKUPS: Final[int] = 3

_THIRD_PARTY_LEVELS: Final[Mapping[str, int]] = {
    "pypdf": logging.ERROR,
    "PIL": logging.WARNING,
    "aiohttp": logging.WARNING,
}

_LevelT = Union[int, str]


def _formatted(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _tame_third_party(level: int) -> None:
    for name, cap in _THIRD_PARTY_LEVELS.items():
        logging.getLogger(name).setLevel(logging.DEBUG if level <= logging.DEBUG else cap)


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Set level and handlers of the ``SiteIngest`` logger.

    Parameters
    ----------
    level
        ``"DEBUG"``, ``"INFO"``… or a numeric level.
    log_file
        Optional log file; rotated at 5 MB, three backups kept.
    log_format
        :class:`logging.Formatter` format string shared by all handlers.
    replace_handlers
        Drop previously installed handlers first (the CLI re-configures on
        every invocation).
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    lg.addHandler(_formatted(logging.StreamHandler(sys.stderr), log_format))
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=_LOG_FILE_MAX_BYTES,
            backupCount=_LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        lg.addHandler(_formatted(file_handler, log_format))

    lg.propagate = False
    _tame_third_party(lg.level)
    return lg


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """Entry point for the CLI: configure from scratch."""
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


logger: logging.Logger = init_logging()

__all__ = ["LOGGER_NAME", "configure", "init_logging", "logger"]
