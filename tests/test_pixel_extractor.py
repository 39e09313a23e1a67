import numpy as np
import pytest

from rgb_inspector.errors import InvalidRegionError, OutOfBoundsError, RegionError
from rgb_inspector.models.pixel_model import PixelBuffer, Region
from rgb_inspector.services.pixel_extractor import extract


def test_extract_deinterleaves_bgra_row_major(gradient_buffer):
    samples = extract(gradient_buffer, Region(x=1, y=1, width=2, height=2))

    assert samples.count == 4
    assert samples.red.tolist() == [10, 20, 10, 20]
    assert samples.green.tolist() == [20, 20, 40, 40]
    assert samples.blue.tolist() == [2, 3, 3, 4]


def test_extract_ignores_alpha_and_row_padding(make_buffer):
    buf = make_buffer([[(1, 2, 3, 0), (4, 5, 6, 128)]], padding=12, pad_byte=99)
    samples = extract(buf, Region(0, 0, 2, 1))

    assert samples.red.tolist() == [1, 4]
    assert samples.green.tolist() == [2, 5]
    assert samples.blue.tolist() == [3, 6]


def test_extract_full_buffer(gradient_buffer):
    samples = extract(gradient_buffer, Region(0, 0, 4, 3))
    assert samples.count == 12
    assert samples.red.tolist() == [0, 10, 20, 30] * 3


def test_extract_returns_copies_not_views(gradient_buffer):
    samples = extract(gradient_buffer, Region(0, 0, 2, 2))
    for channel in (samples.red, samples.green, samples.blue):
        assert channel.flags.writeable
        assert not np.shares_memory(channel, gradient_buffer.as_array())


@pytest.mark.parametrize(
    "region",
    [
        Region(3, 0, 2, 1),   # x + width > width
        Region(0, 2, 1, 2),   # y + height > height
        Region(0, 0, 5, 3),
        Region(4, 0, 1, 1),
        Region(-1, 0, 1, 1),
        Region(0, -1, 1, 1),
    ],
)
def test_extract_out_of_bounds(gradient_buffer, region):
    with pytest.raises(OutOfBoundsError):
        extract(gradient_buffer, region)


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-2, 1), (1, -1)])
def test_extract_invalid_region(gradient_buffer, width, height):
    with pytest.raises(InvalidRegionError):
        extract(gradient_buffer, Region(0, 0, width, height))


def test_region_errors_are_value_errors(gradient_buffer):
    with pytest.raises(RegionError):
        extract(gradient_buffer, Region(0, 0, 10, 10))
    with pytest.raises(ValueError):
        extract(gradient_buffer, Region(0, 0, 0, 0))


def test_pixel_buffer_rejects_short_data():
    with pytest.raises(ValueError):
        PixelBuffer(data=bytes(15), width=2, height=2, stride=8)


def test_pixel_buffer_rejects_small_stride():
    with pytest.raises(ValueError):
        PixelBuffer(data=bytes(64), width=4, height=2, stride=12)


def test_pixel_buffer_copies_mutable_data():
    raw = bytearray(range(8))
    buf = PixelBuffer(data=raw, width=2, height=1, stride=8)
    raw[0] = 200

    assert isinstance(buf.data, bytes)
    assert buf.data[0] == 0
    assert not buf.as_array().flags.writeable


def test_pixel_buffer_array_is_read_only(gradient_buffer):
    arr = gradient_buffer.as_array()
    assert arr.shape == (3, 4 * 4 + 8)
    assert not arr.flags.writeable
