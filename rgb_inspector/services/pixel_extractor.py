"""Извлечение выборок каналов R, G, B из прямоугольной области буфера.

Принципы:
- SRP: только проверка области и разделение каналов, без статистики.
- Чистая функция: буфер не мутируется, результат не ссылается на его память.
"""
from __future__ import annotations

import logging

from rgb_inspector.errors import InvalidRegionError, OutOfBoundsError
from rgb_inspector.models.pixel_model import (
    BLUE,
    BYTES_PER_PIXEL,
    GREEN,
    RED,
    ChannelSamples,
    PixelBuffer,
    Region,
)

logger = logging.getLogger(__name__)


def validate_region(buffer: PixelBuffer, region: Region) -> None:
    """Проверяет, что область целиком лежит внутри буфера.

    Raises:
        InvalidRegionError: если ширина или высота не положительны.
        OutOfBoundsError: если область выходит за границы буфера.
    """
    if region.width < 1 or region.height < 1:
        raise InvalidRegionError(
            f"Размер области должен быть положительным: {region.width}×{region.height}"
        )
    if region.x < 0 or region.y < 0:
        raise OutOfBoundsError(f"Начало области вне изображения: ({region.x}, {region.y})")
    if region.x + region.width > buffer.width or region.y + region.height > buffer.height:
        raise OutOfBoundsError(
            f"Область x={region.x}, y={region.y}, w={region.width}, h={region.height} "
            f"выходит за границы {buffer.width}×{buffer.height}"
        )


def extract(buffer: PixelBuffer, region: Region) -> ChannelSamples:
    """Возвращает значения каналов пикселей области в построчном порядке.

    Строка `r` области начинается со смещения
    `(region.y + r) * stride + region.x * 4`; в каждом пикселе байт 2 — красный,
    1 — зелёный, 0 — синий, альфа (байт 3) отбрасывается.

    Raises:
        InvalidRegionError, OutOfBoundsError: см. `validate_region`.
    """
    validate_region(buffer, region)

    rows = buffer.as_array()[
        region.y:region.y + region.height,
        region.x * BYTES_PER_PIXEL:(region.x + region.width) * BYTES_PER_PIXEL,
    ]
    pixels = rows.reshape(region.height, region.width, BYTES_PER_PIXEL)

    # flatten() всегда копирует: выборки не разделяют память с буфером
    samples = ChannelSamples(
        red=pixels[:, :, RED].flatten(),
        green=pixels[:, :, GREEN].flatten(),
        blue=pixels[:, :, BLUE].flatten(),
    )
    logger.debug("Извлечено %d пикселей из области %s", region.pixel_count, region)
    return samples
