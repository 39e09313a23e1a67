import math
import random

import numpy as np
import pytest

from rgb_inspector.errors import OutOfBoundsError
from rgb_inspector.models.pixel_model import ChannelSamples, Region
from rgb_inspector.models.stats_model import ChannelStats, RgbStats
from rgb_inspector.services.pixel_extractor import extract
from rgb_inspector.services.stats_service import channel_stats, compute_stats, get_rgb_statistics


def _samples(red, green=None, blue=None) -> ChannelSamples:
    return ChannelSamples(
        red=np.array(red, dtype=np.uint8),
        green=np.array(green if green is not None else red, dtype=np.uint8),
        blue=np.array(blue if blue is not None else red, dtype=np.uint8),
    )


def test_known_even_channel():
    stats = channel_stats([10, 20, 30, 40])
    assert stats.mean == 25.0
    assert stats.median == 25.0
    assert stats.variance == 125.0
    assert stats.std_dev == pytest.approx(math.sqrt(125))
    assert stats.std_dev == pytest.approx(11.18, abs=0.005)


def test_odd_channel_median_is_middle_element():
    assert channel_stats([3, 1, 2]).median == 2.0


def test_even_median_can_be_half_integer():
    assert channel_stats([10, 11]).median == 10.5
    assert channel_stats([255, 0, 254, 1]).median == 127.5


def test_median_with_ties():
    assert channel_stats([5, 5, 5, 9]).median == 5.0
    assert channel_stats([7, 1, 7, 7, 2]).median == 7.0


def test_population_variance_not_sample_variance():
    values = [2, 4, 4, 4, 5, 5, 7, 9]
    n = len(values)
    mu = sum(values) / n
    ss = sum((v - mu) ** 2 for v in values)
    population, sample = ss / n, ss / (n - 1)
    assert population != pytest.approx(sample)

    stats = channel_stats(values)
    assert stats.variance == pytest.approx(population)
    assert stats.variance == pytest.approx(4.0)
    assert stats.std_dev == pytest.approx(2.0)


def test_mean_is_real_division():
    assert channel_stats([1, 2]).mean == 1.5


def test_no_uint8_overflow():
    stats = channel_stats([255] * 1000 + [0] * 1000)
    assert stats.mean == 127.5
    assert stats.variance == pytest.approx(127.5 ** 2)


def test_empty_samples_give_zero_result():
    stats = compute_stats(ChannelSamples.empty())
    assert stats == RgbStats()
    assert stats.sample_count == 0
    for _name, channel in stats.channels():
        assert channel == ChannelStats(mean=0.0, variance=0.0, std_dev=0.0, median=0.0)


def test_channels_are_independent():
    stats = compute_stats(_samples([0, 10], [100, 100], [1, 2]))
    assert stats.red.mean == 5.0
    assert stats.green.variance == 0.0
    assert stats.blue.median == 1.5
    assert stats.sample_count == 2


def test_uniform_region(make_buffer):
    buf = make_buffer([[(12, 200, 77)] * 5 for _ in range(4)], padding=4)
    stats = get_rgb_statistics(buf, Region(1, 1, 3, 2))
    for expected, channel in zip((12, 200, 77), (stats.red, stats.green, stats.blue)):
        assert channel.mean == expected
        assert channel.median == expected
        assert channel.variance == 0.0
        assert channel.std_dev == 0.0


def test_single_pixel_region(gradient_buffer):
    stats = get_rgb_statistics(gradient_buffer, Region(2, 1, 1, 1))
    assert (stats.red.mean, stats.green.mean, stats.blue.mean) == (20.0, 20.0, 3.0)
    assert (stats.red.median, stats.green.median, stats.blue.median) == (20.0, 20.0, 3.0)
    assert stats.red.variance == stats.green.std_dev == stats.blue.variance == 0.0


def test_stats_invariant_to_scan_order(gradient_buffer):
    samples = extract(gradient_buffer, Region(0, 0, 4, 3))
    expected = compute_stats(samples)

    order = list(range(samples.count))
    random.Random(7).shuffle(order)
    shuffled = ChannelSamples(
        red=samples.red[order], green=samples.green[order], blue=samples.blue[order]
    )
    column_major = ChannelSamples(
        red=samples.red.reshape(3, 4).T.ravel(),
        green=samples.green.reshape(3, 4).T.ravel(),
        blue=samples.blue.reshape(3, 4).T.ravel(),
    )
    for permuted in (shuffled, column_major):
        actual = compute_stats(permuted)
        for (_n1, a), (_n2, b) in zip(actual.channels(), expected.channels()):
            assert a.mean == pytest.approx(b.mean)
            assert a.variance == pytest.approx(b.variance)
            assert a.std_dev == pytest.approx(b.std_dev)
            assert a.median == b.median


def test_get_rgb_statistics_propagates_region_errors(gradient_buffer):
    with pytest.raises(OutOfBoundsError):
        get_rgb_statistics(gradient_buffer, Region(0, 0, 5, 1))


def test_channel_samples_length_mismatch():
    with pytest.raises(ValueError):
        ChannelSamples(red=[1, 2], green=[1], blue=[1, 2])
