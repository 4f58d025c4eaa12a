"""
Схема конфигурации SiteIngest (pydantic) и загрузка из YAML/JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

_CHROME_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/111.0.0.0 Safari/537.36"
)

_CHROME_HINTS: Dict[str, str] = {
    "sec-ch-ua": '"Google Chrome";v="111", "Not(A:Brand";v="8", "Chromium";v="111"',
    "sec-ch-ua-mobile": "?0",
    "sec-ch-ua-platform": '"macOS"',
    "sec-fetch-dest": "document",
    "sec-fetch-mode": "navigate",
    "sec-fetch-site": "same-origin",
    "sec-fetch-user": "?1",
    "upgrade-insecure-requests": "1",
}


class RequestProfile(BaseModel):
    """Браузероподобный набор заголовков, общий для краулера и извлечения страниц."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    accept: str = Field(
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,"
        "image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7",
        min_length=1,
    )
    accept_language: str = Field("en-GB,en-US;q=0.9,en;q=0.8", min_length=1)
    referer: str = Field("https://google.com/", description="Заголовок Referer.")
    user_agent: str = Field(_CHROME_UA, min_length=1, description="Заголовок User-Agent.")
    extra_headers: Dict[str, str] = Field(
        default_factory=lambda: dict(_CHROME_HINTS),
        description="Дополнительные заголовки (client hints, sec-fetch-*).",
    )

    def headers(self) -> Dict[str, str]:
        """Возвращает заголовки запроса в виде словаря."""
        headers = {
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
            "User-Agent": self.user_agent,
        }
        if self.referer:
            headers["Referer"] = self.referer
        headers.update(self.extra_headers)
        return headers


class IngestConfig(BaseModel):
    """Конфигурация одного запуска обхода и извлечения."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(30.0, gt=0, description="Таймаут на один запрос (секунд).")
    sitemap_filename: str = Field(
        "sitemap.xml", min_length=1, description="Имя файла sitemap, не добавляемого в результат."
    )
    ocr_language: str = Field("eng", min_length=1, description="Языковая модель Tesseract.")
    max_pages: Optional[int] = Field(
        None, ge=1, description="Лимит страниц для извлечения в команде ingest."
    )
    request_profile: RequestProfile = Field(default_factory=RequestProfile)

    @field_validator("sitemap_filename", mode="before")
    def _strip_slashes(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip("/")
        return v


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")

_PARSERS: Dict[str, Tuple[str, Callable[[str], Any], Tuple[type, ...]]] = {
    ".yaml": ("YAML", yaml.safe_load, (yaml.YAMLError,)),
    ".yml": ("YAML", yaml.safe_load, (yaml.YAMLError,)),
    ".json": ("JSON", json.loads, (json.JSONDecodeError,)),
}


def _read_mapping(path: Path) -> Dict[str, Any]:
    """Разбирает файл по расширению; пустой файл даёт пустой словарь."""
    suffix = path.suffix.lower()
    if suffix not in _PARSERS:
        raise ValueError(f"Конфиг должен быть .yaml/.yml/.json, а не {suffix or path.name}")
    kind, parse, errors = _PARSERS[suffix]
    try:
        data = parse(path.read_text(encoding="utf-8")) or {}
    except errors as exc:
        raise ValueError(f"Ошибка разбора {kind} в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"{kind}-конфиг должен быть словарём, а не {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> IngestConfig:
    """
    Загружает IngestConfig из YAML/JSON-файла.

    ``None`` означает ``configs/default.yaml`` относительно текущего каталога.
    Отсутствующий файл: FileNotFoundError; битый синтаксис: ValueError;
    не словарь на верхнем уровне: TypeError; неверные значения: ValidationError.
    """
    cfg_path = DEFAULT_CONFIG_PATH if path is None else Path(path).expanduser().resolve()
    if not cfg_path.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(cfg_path))
    return IngestConfig(**_read_mapping(cfg_path))


__all__ = ["DEFAULT_CONFIG_PATH", "IngestConfig", "RequestProfile", "ValidationError", "load_config"]
