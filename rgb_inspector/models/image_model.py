"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

from rgb_inspector.models.pixel_model import PixelBuffer


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель загруженного изображения.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Изображение PIL в режиме RGBA (для отображения).
        pixels: Нормализованный буфер BGRA для расчёта статистики.
        source_format: "raster" или "svg".
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    pixels: PixelBuffer
    source_format: str
    size_bytes: Optional[int]

    @property
    def width(self) -> int:
        return self.pixels.width

    @property
    def height(self) -> int:
        return self.pixels.height

    @property
    def mode(self) -> str:
        return self.pil_image.mode
