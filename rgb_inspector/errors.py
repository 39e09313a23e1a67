"""Исключения предметной области.

Все ошибки наследуются от `ValueError`: это ошибки входных данных,
а не сбои окружения.
"""
from __future__ import annotations


class RegionError(ValueError):
    """Некорректная область выделения (ошибка вызывающего кода)."""


class InvalidRegionError(RegionError):
    """Ширина или высота области не положительна."""


class OutOfBoundsError(RegionError):
    """Область выходит за границы буфера пикселей."""


class DecodeError(ValueError):
    """Файл не удалось декодировать или отрендерить в растр."""
