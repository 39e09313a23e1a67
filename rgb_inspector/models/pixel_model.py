"""Модели пиксельных данных: буфер, область выделения, выборки по каналам.

Принципы:
- SRP: только структуры данных и проверка их собственных инвариантов.
- Чистый код: неизменяемость (`frozen=True`), буфер не копируется и не мутируется.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

BYTES_PER_PIXEL = 4
# порядок байт пикселя: синий, зелёный, красный, альфа (не используется)
BLUE, GREEN, RED = 0, 1, 2


@dataclass(frozen=True)
class PixelBuffer:
    """Неизменяемое представление `height × stride` байт в раскладке BGRA.

    Fields:
        data: Байты пикселей построчно; строка может содержать выравнивание.
        width: Ширина, px.
        height: Высота, px.
        stride: Длина строки в байтах (>= width * 4).
    """
    data: bytes
    width: int
    height: int
    stride: int

    def __post_init__(self) -> None:
        # bytearray/memoryview копируются: as_array() должен быть только для чтения
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Размеры буфера должны быть положительными: {self.width}×{self.height}")
        if self.stride < self.width * BYTES_PER_PIXEL:
            raise ValueError(f"stride={self.stride} меньше width*4={self.width * BYTES_PER_PIXEL}")
        if len(self.data) < self.height * self.stride:
            raise ValueError(
                f"Буфер содержит {len(self.data)} байт, требуется {self.height * self.stride}"
            )

    def as_array(self) -> np.ndarray:
        """Возвращает read-only массив uint8 формы (height, stride) без копирования."""
        arr = np.frombuffer(self.data, dtype=np.uint8, count=self.height * self.stride)
        return arr.reshape(self.height, self.stride)


@dataclass(frozen=True)
class Region:
    """Прямоугольная область в координатах пикселей изображения."""
    x: int
    y: int
    width: int
    height: int

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


@dataclass(frozen=True, eq=False)
class ChannelSamples:
    """Выборки значений каналов R, G, B (uint8) в построчном порядке."""
    red: np.ndarray
    green: np.ndarray
    blue: np.ndarray

    def __post_init__(self) -> None:
        if not (len(self.red) == len(self.green) == len(self.blue)):
            raise ValueError(
                f"Длины каналов различаются: R={len(self.red)}, G={len(self.green)}, B={len(self.blue)}"
            )

    @property
    def count(self) -> int:
        return len(self.red)

    @classmethod
    def empty(cls) -> "ChannelSamples":
        return cls(
            red=np.empty(0, dtype=np.uint8),
            green=np.empty(0, dtype=np.uint8),
            blue=np.empty(0, dtype=np.uint8),
        )
