"""Форматирование результатов для панели статистики."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional

from rgb_inspector.models.pixel_model import Region
from rgb_inspector.models.stats_model import RgbStats

EMPTY_VALUE = "-"
STAT_KEYS = ("mean", "median", "std_dev", "variance")


def format_number(value: float, precision: int) -> str:
    """Округляет половины от нуля (2.5 -> "3", 0.5 -> "1"), а не к чётному."""
    quantum = Decimal(1).scaleb(-precision)
    return str(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_selection(region: Optional[Region]) -> str:
    if region is None:
        return "No selection"
    return f"Selection: X={region.x}, Y={region.y}, W={region.width}, H={region.height}"


def format_stats(
    stats: Optional[RgbStats], precision: int = 2, median_precision: int = 0
) -> Dict[str, Dict[str, str]]:
    """Возвращает {канал: {показатель: строка}} для каналов R, G, B.

    Среднее, СКО и дисперсия — с `precision` знаками, медиана — с `median_precision`.
    Для `None` (выделение сброшено) все значения — прочерк.
    """
    if stats is None:
        return {name: {key: EMPTY_VALUE for key in STAT_KEYS} for name in ("R", "G", "B")}

    rows: Dict[str, Dict[str, str]] = {}
    for name, channel in stats.channels():
        rows[name] = {
            "mean": format_number(channel.mean, precision),
            "median": format_number(channel.median, median_precision),
            "std_dev": format_number(channel.std_dev, precision),
            "variance": format_number(channel.variance, precision),
        }
    return rows
