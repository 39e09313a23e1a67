"""Результаты статистики по каналам."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ChannelStats:
    """Описательная статистика одного канала.

    Fields:
        mean: Среднее арифметическое.
        variance: Дисперсия генеральной совокупности (деление на n).
        std_dev: Стандартное отклонение, sqrt(variance).
        median: Медиана; при чётном n может быть полуцелой.
    """
    mean: float = 0.0
    variance: float = 0.0
    std_dev: float = 0.0
    median: float = 0.0


@dataclass(frozen=True)
class RgbStats:
    """Статистика по трём каналам; при n = 0 все поля нулевые."""
    red: ChannelStats = field(default_factory=ChannelStats)
    green: ChannelStats = field(default_factory=ChannelStats)
    blue: ChannelStats = field(default_factory=ChannelStats)
    sample_count: int = 0

    def channels(self) -> Tuple[Tuple[str, ChannelStats], ...]:
        """Пары (имя канала, статистика) в порядке R, G, B."""
        return (("R", self.red), ("G", self.green), ("B", self.blue))
