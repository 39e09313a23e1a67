"""Преобразование выделения на канве в область пикселей изображения.

Принципы:
- SRP: только геометрия; не зависит от tkinter и обработки событий.
- Обрезка по границам изображения выполняется здесь, до вызова статистики;
  сам экстрактор лишь проверяет область и не исправляет её.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from rgb_inspector.models.pixel_model import Region

Point = Tuple[float, float]


@dataclass(frozen=True)
class ViewState:
    """Текущее состояние отображения.

    Fields:
        scale: Коэффициент масштаба (1.0 = 100%).
        offset_x: X левого верхнего угла изображения на канве.
        offset_y: Y левого верхнего угла изображения на канве.
    """
    scale: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0


def canvas_to_image(view: ViewState, cx: float, cy: float) -> Point:
    """Переводит точку канвы в (дробные) координаты изображения."""
    return (cx - view.offset_x) / view.scale, (cy - view.offset_y) / view.scale


def image_to_canvas(view: ViewState, ix: float, iy: float) -> Point:
    return view.offset_x + ix * view.scale, view.offset_y + iy * view.scale


def normalize_drag(start: Point, end: Point) -> Tuple[float, float, float, float]:
    """Прямоугольник (x, y, w, h) по двум точкам при любом направлении протяжки."""
    x = min(start[0], end[0])
    y = min(start[1], end[1])
    return x, y, abs(end[0] - start[0]), abs(end[1] - start[1])


def clamp_region(x: float, y: float, w: float, h: float, image_width: int, image_height: int) -> Region:
    """Округляет прямоугольник до пикселей и обрезает его по границам изображения.

    Начало округляется вниз и прижимается к [0, size-1], размер — не меньше 1 px;
    если область выходит за правый/нижний край, ширина/высота уменьшаются.
    """
    ix = max(0, math.floor(x))
    iy = max(0, math.floor(y))
    iw = max(1, math.floor(w))
    ih = max(1, math.floor(h))

    ix = min(ix, image_width - 1)
    iy = min(iy, image_height - 1)
    if ix + iw > image_width:
        iw = image_width - ix
    if iy + ih > image_height:
        ih = image_height - iy
    return Region(x=ix, y=iy, width=iw, height=ih)


def selection_to_region(
    view: ViewState, start: Point, end: Point, image_width: int, image_height: int
) -> Region:
    """Переводит протяжку мыши на канве в область пикселей внутри изображения.

    Args:
        view: Масштаб и смещение изображения на канве.
        start: Точка нажатия (координаты канвы).
        end: Точка отпускания (координаты канвы).
        image_width: Ширина изображения, px.
        image_height: Высота изображения, px.

    Raises:
        ValueError: если размеры изображения не положительны.
    """
    if image_width < 1 or image_height < 1:
        raise ValueError(f"Пустое изображение: {image_width}×{image_height}")
    x, y, w, h = normalize_drag(canvas_to_image(view, *start), canvas_to_image(view, *end))
    return clamp_region(x, y, w, h, image_width, image_height)


def region_to_canvas(view: ViewState, region: Region) -> Tuple[float, float, float, float]:
    """Прямоугольник (x0, y0, x1, y1) области на канве — для отрисовки рамки."""
    x0, y0 = image_to_canvas(view, region.x, region.y)
    x1, y1 = image_to_canvas(view, region.x + region.width, region.y + region.height)
    return x0, y0, x1, y1
