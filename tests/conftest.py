from __future__ import annotations

from typing import Sequence, Tuple

import pytest

from rgb_inspector.models.pixel_model import BYTES_PER_PIXEL, PixelBuffer

Pixel = Tuple[int, ...]


def build_buffer(rows: Sequence[Sequence[Pixel]], padding: int = 0, pad_byte: int = 0xEE) -> PixelBuffer:
    """Собирает буфер BGRA из строк пикселей (r, g, b[, a]); `padding` — лишние байты в конце строки."""
    height = len(rows)
    width = len(rows[0])
    stride = width * BYTES_PER_PIXEL + padding
    data = bytearray()
    for row in rows:
        for pixel in row:
            r, g, b = pixel[:3]
            a = pixel[3] if len(pixel) > 3 else 255
            data += bytes((b, g, r, a))
        data += bytes([pad_byte]) * padding
    return PixelBuffer(data=bytes(data), width=width, height=height, stride=stride)


@pytest.fixture
def make_buffer():
    return build_buffer


@pytest.fixture
def gradient_buffer() -> PixelBuffer:
    """4×3, R = x*10, G = y*20, B = x + y, альфа меняется; строки выровнены 8 байтами."""
    rows = [[(x * 10, y * 20, x + y, (x * 37) % 256) for x in range(4)] for y in range(3)]
    return build_buffer(rows, padding=8)
