from __future__ import annotations
import math
import numbers
from typing import NamedTuple


class Color(NamedTuple):
    """Straight (non-premultiplied) RGBA value; channels nominally in [0, 255].

    Channels are not validated here. They are clamped when written into a
    bitmap buffer (see clamp_channel).
    """
    r: float
    g: float
    b: float
    a: float = 255


TRANSPARENT = Color(0, 0, 0, 0)


def rgb(r, g, b) -> Color:
    return Color(r, g, b, 255)


def rgba(r, g, b, a) -> Color:
    return Color(r, g, b, a)


def clamp_channel(value) -> int:
    """Convert a channel value to a stored byte: NaN -> 0, round half to even, clamp to [0, 255]."""
    if not isinstance(value, numbers.Integral) and math.isnan(value):
        return 0
    if value <= 0:
        return 0
    if value >= 255:
        return 255
    return int(round(value))
