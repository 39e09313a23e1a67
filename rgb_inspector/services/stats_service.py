from __future__ import annotations

import logging
import math
from typing import Sequence, Union

import numpy as np

from rgb_inspector.models.pixel_model import ChannelSamples, PixelBuffer, Region
from rgb_inspector.models.stats_model import ChannelStats, RgbStats
from rgb_inspector.services.pixel_extractor import extract

logger = logging.getLogger(__name__)

Samples = Union[np.ndarray, Sequence[int]]


def mean(values: np.ndarray) -> float:
    """Среднее арифметическое (вещественное деление суммы на n)."""
    return float(values.sum()) / values.size


def population_variance(values: np.ndarray, mu: float) -> float:
    """
    Дисперсия генеральной совокупности: (1/n) * Σ (v - mu)^2.
    Делим именно на n, а не на n-1.
    """
    deviations = values - mu
    return float(np.dot(deviations, deviations)) / values.size


def median_from_sorted(sorted_values: np.ndarray) -> float:
    """
    Медиана отсортированного по возрастанию массива.
    Нечётное n -> средний элемент; чётное -> среднее двух средних элементов.
    """
    n = sorted_values.size
    mid = n // 2
    if n % 2 == 1:
        return float(sorted_values[mid])
    return (int(sorted_values[mid - 1]) + int(sorted_values[mid])) / 2.0


def channel_stats(values: Samples) -> ChannelStats:
    """Статистика одного канала; пустой канал -> все поля 0."""
    ints = np.asarray(values, dtype=np.int64).ravel()
    if ints.size == 0:
        return ChannelStats()

    # ---------- линейный проход: среднее, дисперсия ----------
    as_float = ints.astype(np.float64)
    mu = mean(as_float)
    variance = population_variance(as_float, mu)

    # ---------- сортировка только для медианы ----------
    med = median_from_sorted(np.sort(ints))

    return ChannelStats(mean=mu, variance=variance, std_dev=math.sqrt(variance), median=med)


def compute_stats(samples: ChannelSamples) -> RgbStats:
    """
    Считает среднее, дисперсию, СКО и медиану для каждого канала независимо.
    Для пустой выборки возвращает нулевой результат (состояние «нет выделения»).
    """
    if samples.count == 0:
        return RgbStats()
    return RgbStats(
        red=channel_stats(samples.red),
        green=channel_stats(samples.green),
        blue=channel_stats(samples.blue),
        sample_count=samples.count,
    )


def get_rgb_statistics(buffer: PixelBuffer, region: Region) -> RgbStats:
    """
    Извлекает каналы из области буфера и считает по ним статистику.

    Raises:
        InvalidRegionError, OutOfBoundsError: при некорректной области.
    """
    stats = compute_stats(extract(buffer, region))
    logger.debug(
        "Статистика области %s: mean R/G/B = %.2f/%.2f/%.2f",
        region,
        stats.red.mean,
        stats.green.mean,
        stats.blue.mean,
    )
    return stats
