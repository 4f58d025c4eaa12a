# File: site_ingest/utils.py
"""site_ingest.utils: Классификация и нормализация URL, очистка извлечённого текста."""

from __future__ import annotations

import re
from typing import Collection, FrozenSet, List, Optional, Sequence
from urllib.parse import urlsplit, urlunsplit

from site_ingest.errors import InvalidURL
from site_ingest.logger import logger

__all__: Sequence[str] = (
    "IGNORED_EXTENSIONS",
    "NON_PAGE_EXTENSIONS",
    "canonicalize",
    "clean_text",
    "extract_domain",
    "get_extension",
    "is_crawlable_page",
    "is_same_domain",
    "is_webpage",
    "is_xml",
    "remove_duplicates",
    "url_to_slug",
)

# Бинарные и офисные форматы, которые не являются HTML-страницами.
IGNORED_EXTENSIONS: FrozenSet[str] = frozenset(
    {
        "jpg", "jpeg", "png", "gif", "bmp",
        "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx",
        "zip", "rar", "7z", "exe", "dmg", "iso", "tar", "gz",
        "csv",
    }
)

# Более широкий список для фильтра фронтира (медиа, текстовые и data-форматы).
NON_PAGE_EXTENSIONS: FrozenSet[str] = frozenset(
    {
        "jpg", "jpeg", "png", "gif", "bmp", "ico", "svg",
        "pdf", "mp3", "mp4", "avi", "mkv", "wav", "ogg",
        "zip", "tar", "gz", "rar", "7z",
        "doc", "docx", "ppt", "pptx", "xls", "xlsx",
        "txt", "rtf", "csv", "json", "xml",
    }
)

_XML_PROLOGS = ("<?xml", "<urlset", "<sitemapindex")
_DEFAULT_PORTS = {"http": 80, "https": 443}
_SLUG_RE = re.compile(r"[^a-zA-Z0-9]")


def get_extension(url: str) -> Optional[str]:
    """Возвращает расширение последнего сегмента пути (в нижнем регистре) или None."""
    path = urlsplit(url).path if "://" in url else url
    segment = path.rsplit("/", 1)[-1]
    if "." not in segment:
        return None
    ext = segment.rsplit(".", 1)[1].lower()
    return ext or None


def is_crawlable_page(url: str) -> bool:
    """True, если расширение URL не относится к бинарным/документным форматам."""
    ext = get_extension(url)
    return ext is None or ext not in IGNORED_EXTENSIONS


def is_webpage(url: str) -> bool:
    """Отбрасывает URL вида ``…/data.json/``: расширение, за которым сразу идёт слеш."""
    lowered = url.lower()
    return not any(lowered.endswith(f".{ext}/") for ext in NON_PAGE_EXTENSIONS)


def canonicalize(url: str) -> str:
    """Оставляет схему, хост и путь; отбрасывает query и fragment.

    Raises:
        InvalidURL: URL не разбирается или в нём нет схемы/хоста.
    """
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
        port = parts.port
    except ValueError as exc:
        raise InvalidURL(f"Malformed URL {url!r}: {exc}") from exc
    if not parts.scheme or not host:
        raise InvalidURL(f"Malformed URL {url!r}: scheme and host are required")

    scheme = parts.scheme.lower()
    netloc = f"[{host}]" if ":" in host else host
    if port is not None and _DEFAULT_PORTS.get(scheme) != port:
        netloc = f"{netloc}:{port}"
    return urlunsplit((scheme, netloc, parts.path or "/", "", ""))


def extract_domain(url: str) -> str:
    """Возвращает hostname из URL (пустая строка, если его нет)."""
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""


def is_same_domain(url: str, domain: str) -> bool:
    """Строгое сравнение hostname: поддомены считаются чужими."""
    return bool(domain) and extract_domain(url) == domain.lower()


def is_xml(content: str) -> bool:
    """Проверяет, похоже ли тело ответа на sitemap (XML-пролог или корневой тег)."""
    return content.lstrip("\ufeff \t\r\n").startswith(_XML_PROLOGS)


def clean_text(text: str) -> str:
    """Убирает пробелы по краям строк и пустые строки."""
    return "\n".join(line.strip() for line in text.splitlines() if line.strip())


def url_to_slug(url: str) -> str:
    """Превращает URL в безопасное имя файла: всё, кроме букв и цифр, заменяется на ``_``."""
    return _SLUG_RE.sub("_", url)


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Удаляет дубликаты из списка URL, сохраняя порядок."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique
