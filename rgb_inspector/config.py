"""Настройки приложения с переопределением через переменные окружения.

Переменные:
    RGB_INSPECTOR_LOG_LEVEL: уровень логирования ("DEBUG", "INFO", ...).
    RGB_INSPECTOR_SVG_WIDTH / RGB_INSPECTOR_SVG_HEIGHT: размер растра для SVG
        без собственных размеров.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Tuple

ENV_PREFIX = "RGB_INSPECTOR_"

RASTER_EXTENSIONS: Tuple[str, ...] = (".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp")
SVG_EXTENSIONS: Tuple[str, ...] = (".svg",)


@dataclass(frozen=True)
class AppConfig:
    """Неизменяемый набор параметров приложения."""
    title: str = "RGB Region Inspector"
    min_width: int = 900
    min_height: int = 600

    zoom_min_percent: int = 10
    zoom_max_percent: int = 400
    zoom_presets: Tuple[int, ...] = (25, 50, 100, 200, 400)

    # SVG без width/height/viewBox рендерится в этот размер
    svg_fallback_width: int = 800
    svg_fallback_height: int = 600

    mean_precision: int = 2
    median_precision: int = 0

    log_level: str = "INFO"

    file_types: Tuple[Tuple[str, str], ...] = field(
        default=(
            ("Images", " ".join(f"*{ext}" for ext in RASTER_EXTENSIONS + SVG_EXTENSIONS)),
            ("All files", "*.*"),
        )
    )


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} должно быть целым числом, получено: {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{ENV_PREFIX}{name} должно быть >= 1, получено: {value}")
    return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Возвращает конфигурацию по умолчанию с учётом переменных окружения.

    Args:
        environ: Источник переменных; по умолчанию `os.environ`.

    Raises:
        ValueError: если числовое значение переменной некорректно.
    """
    env = os.environ if environ is None else environ
    config = AppConfig()

    level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
    if level:
        config = replace(config, log_level=level.strip().upper())

    width = env.get(f"{ENV_PREFIX}SVG_WIDTH")
    if width:
        config = replace(config, svg_fallback_width=_positive_int("SVG_WIDTH", width))

    height = env.get(f"{ENV_PREFIX}SVG_HEIGHT")
    if height:
        config = replace(config, svg_fallback_height=_positive_int("SVG_HEIGHT", height))

    return config
