from __future__ import annotations
from typing import Sequence

from pixeldraw.errors import OutOfBounds
from .bitmap import Bitmap
from .color import Color, clamp_channel


def in_bounds(bitmap: Bitmap, point: Sequence[int]) -> bool:
    x, y = point
    return 0 <= x < bitmap.width and 0 <= y < bitmap.height


def put_pixel(bitmap: Bitmap, point: Sequence[int], color: Color) -> None:
    """Write one pixel. Points outside the bitmap are silently ignored."""
    x, y = point
    if x < 0 or y < 0 or x >= bitmap.width or y >= bitmap.height:
        return
    r, g, b, a = color
    i = bitmap.offset(x, y)
    bitmap.data[i:i + 4] = bytes((clamp_channel(r), clamp_channel(g), clamp_channel(b), clamp_channel(a)))


def get_pixel(bitmap: Bitmap, point: Sequence[int]) -> Color:
    """Read one pixel. Unlike put_pixel, reading outside the bitmap raises OutOfBounds."""
    x, y = point
    if x < 0 or y < 0 or x >= bitmap.width or y >= bitmap.height:
        raise OutOfBounds(x, y, bitmap.width, bitmap.height)
    i = bitmap.offset(x, y)
    d = bitmap.data
    return Color(d[i], d[i + 1], d[i + 2], d[i + 3])
