"""Color constructors, transparent sentinel and byte clamping."""
import math

import numpy as np
import pytest

from pixeldraw import TRANSPARENT, Color, clamp_channel, rgb, rgba


def test_rgb_is_opaque():
    assert rgb(1, 2, 3) == Color(1, 2, 3, 255)
    assert rgb(1, 2, 3).a == 255


def test_rgba_keeps_channels_unclamped():
    c = rgba(300, -5, 1.5, 0)
    assert tuple(c) == (300, -5, 1.5, 0)


def test_transparent_sentinel():
    assert TRANSPARENT == (0, 0, 0, 0)
    with pytest.raises(AttributeError):
        TRANSPARENT.a = 255


@pytest.mark.parametrize("value,expected", [
    (0, 0),
    (255, 255),
    (300, 255),
    (-5, 0),
    (127.6, 128),
    (2.5, 2),
    (3.5, 4),
    (math.nan, 0),
    (math.inf, 255),
    (-math.inf, 0),
])
def test_clamp_channel(value, expected):
    assert clamp_channel(value) == expected


@pytest.mark.parametrize("value,expected", [
    (np.float32("nan"), 0),
    (np.float64(127.6), 128),
    (np.float32(300.0), 255),
    (np.uint8(200), 200),
    (np.int64(-7), 0),
])
def test_clamp_channel_numpy_scalars(value, expected):
    result = clamp_channel(value)
    assert result == expected
    assert type(result) is int
