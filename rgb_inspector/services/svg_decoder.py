"""Растеризация SVG в изображение PIL (RGBA).

Принципы:
- SRP: отдельный декодер векторных файлов, взаимозаменяемый с любым другим,
  который возвращает растр.
- Размер растра берётся из документа; если его нет, используется запасной.
"""
from __future__ import annotations

import io
import logging
from typing import Tuple
from xml.etree import ElementTree

from PIL import Image, UnidentifiedImageError

from rgb_inspector.errors import DecodeError

logger = logging.getLogger(__name__)


def _is_absolute_length(value: str | None) -> bool:
    if not value:
        return False
    value = value.strip()
    return bool(value) and not value.endswith("%")


def has_intrinsic_size(raw: bytes) -> bool:
    """True, если корень SVG задаёт абсолютные width/height или viewBox.

    Raises:
        DecodeError: если документ не является корректным SVG.
    """
    root = _parse_root(raw)
    if root.get("viewBox"):
        return True
    return _is_absolute_length(root.get("width")) and _is_absolute_length(root.get("height"))


def _parse_root(raw: bytes) -> ElementTree.Element:
    try:
        root = ElementTree.fromstring(raw)
    except ElementTree.ParseError as exc:
        raise DecodeError(f"Некорректный SVG: {exc}") from exc
    # тег может быть с пространством имён: {http://www.w3.org/2000/svg}svg
    if root.tag.rsplit("}", 1)[-1] != "svg":
        raise DecodeError(f"Корневой элемент не <svg>: {root.tag}")
    return root


def render_svg(raw: bytes, fallback_size: Tuple[int, int] = (800, 600)) -> Image.Image:
    """Рендерит SVG на прозрачном фоне и возвращает изображение в режиме RGBA.

    Args:
        raw: Содержимое SVG-файла.
        fallback_size: (ширина, высота) для документов без собственного размера.

    Raises:
        DecodeError: если документ не разобран или не отрендерен.
    """
    kwargs = {}
    if not has_intrinsic_size(raw):
        # parent_* задаёт базу для процентных width/height корня
        kwargs = {
            "output_width": fallback_size[0],
            "output_height": fallback_size[1],
            "parent_width": fallback_size[0],
            "parent_height": fallback_size[1],
        }
        logger.info("SVG без размеров, рендер в %d×%d", *fallback_size)

    # cairosvg подгружает libcairo при импорте, поэтому импорт по требованию
    try:
        import cairosvg
    except OSError as exc:
        raise DecodeError(f"Рендер SVG недоступен (нет libcairo): {exc}") from exc

    try:
        png = cairosvg.svg2png(bytestring=raw, **kwargs)
    except (ValueError, TypeError, OSError) as exc:
        raise DecodeError(f"Не удалось отрендерить SVG: {exc}") from exc

    try:
        return Image.open(io.BytesIO(png)).convert("RGBA")
    except (UnidentifiedImageError, OSError) as exc:
        raise DecodeError("Рендер SVG вернул некорректный PNG") from exc
