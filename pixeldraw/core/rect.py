from __future__ import annotations
from typing import Optional, Sequence

from .bitmap import Bitmap
from .color import TRANSPARENT
from .pixels import put_pixel
from .point import ORIGIN, Point


def clear_rect(bitmap: Bitmap, top_left: Sequence[int] = ORIGIN,
               bottom_right: Optional[Sequence[int]] = None) -> None:
    """Set every pixel in the inclusive box [top_left, bottom_right] to TRANSPARENT.

    Both corners are inclusive. The default bottom_right is (width, height), so the
    default sweep runs one column and one row past the edge; put_pixel clips those.
    """
    if bottom_right is None:
        bottom_right = Point(bitmap.width, bitmap.height)
    x1, y1 = top_left
    x2, y2 = bottom_right
    for x in range(x1, x2 + 1):
        for y in range(y1, y2 + 1):
            put_pixel(bitmap, (x, y), TRANSPARENT)
