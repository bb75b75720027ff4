# === FILE: sitemap_reader/config.py ===
"""
Модуль для загрузки и валидации конфигурации SitemapReader.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


class ReaderConfig(BaseModel):
    """Настройки загрузки sitemap и формирования отчётов."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(10.0, gt=0, description="Таймаут на загрузку sitemap (секунд).")
    user_agent: str = Field("SitemapReader/0.1", min_length=1, description="Заголовок User-Agent.")
    retry_times: int = Field(3, ge=0, description="Число повторных попыток при 5xx.")
    retry_status: List[int] = Field(
        default_factory=lambda: [500, 502, 503, 504],
        description="HTTP-коды, при которых запрос повторяется.",
    )
    template_dir: Optional[Path] = Field(None, description="Папка с Jinja2-шаблонами отчёта.")
    pretty: bool = Field(False, description="Форматировать JSON-вывод с отступом.")

    @field_validator("retry_status")
    def _check_status_codes(cls, v: List[int]) -> List[int]:
        bad = [code for code in v if not 100 <= code <= 599]
        if bad:
            raise ValueError(f"Недопустимые HTTP-коды: {bad}")
        return v

    @model_validator(mode="after")
    def _check_template_dir_exists(self) -> ReaderConfig:
        if self.template_dir is not None and not self.template_dir.is_dir():
            raise FileNotFoundError(
                errno.ENOENT, os.strerror(errno.ENOENT), str(self.template_dir)
            )
        return self


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ReaderConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ReaderConfig.
    Без пути использует configs/default.yaml, а если его нет - значения по умолчанию.
    Явно указанный, но отсутствующий файл -> FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return ReaderConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return ReaderConfig(**data)


__all__ = ["ReaderConfig", "load_config"]
