"""Загрузка изображений с диска и нормализация пикселей в буфер BGRA.

Принципы:
- SRP: класс отвечает только за загрузку и базовое извлечение свойств.
- OCP: новые источники (SVG, стрим) подключаются отдельными декодерами.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from rgb_inspector.config import SVG_EXTENSIONS, AppConfig
from rgb_inspector.errors import DecodeError
from rgb_inspector.models.image_model import ImageData
from rgb_inspector.models.pixel_model import BYTES_PER_PIXEL, PixelBuffer
from rgb_inspector.services.svg_decoder import render_svg

logger = logging.getLogger(__name__)


def to_pixel_buffer(image: Image.Image) -> PixelBuffer:
    """Преобразует изображение PIL в буфер BGRA со `stride = width * 4`."""
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    arr = np.asarray(rgba, dtype=np.uint8)
    # RGBA -> BGRA
    bgra = np.ascontiguousarray(arr[:, :, [2, 1, 0, 3]])
    width, height = rgba.size
    return PixelBuffer(data=bgra.tobytes(), width=width, height=height, stride=width * BYTES_PER_PIXEL)


class ImageService:
    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self._config = config or AppConfig()

    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение (растр или SVG) и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), буфером BGRA и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            DecodeError: если файл не распознан как изображение или SVG не отрендерен.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        if path.suffix.lower() in SVG_EXTENSIONS:
            source_format = "svg"
            pil_image = render_svg(
                path.read_bytes(),
                fallback_size=(self._config.svg_fallback_width, self._config.svg_fallback_height),
            )
        else:
            source_format = "raster"
            try:
                with Image.open(path) as img:
                    pil_image = img.convert("RGBA")
            except UnidentifiedImageError as exc:
                raise DecodeError(f"Файл не является изображением: {path}") from exc
            except (OSError, Image.DecompressionBombError) as exc:
                raise DecodeError(f"Файл изображения повреждён: {path} ({exc})") from exc

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        pixels = to_pixel_buffer(pil_image)
        logger.info("Загружено %s (%s, %d×%d)", path, source_format, pixels.width, pixels.height)
        return ImageData(
            path=path,
            pil_image=pil_image,
            pixels=pixels,
            source_format=source_format,
            size_bytes=size_bytes,
        )
