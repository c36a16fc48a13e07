from __future__ import annotations
import math
from typing import Sequence

from .bitmap import Bitmap
from .color import Color, TRANSPARENT
from .pixels import get_pixel, put_pixel


def _round(v: float) -> int:
    # halves round up, toward +inf
    return math.floor(v + 0.5)


def composite_color(new: Color, old: Color) -> Color:
    """Source-over: ``new`` drawn on top of ``old``.

    The same formula is applied to all four channels, alpha included:

        c = (c1*a1 + c2*a2*(1-a1)) / (a1 + a2*(1-a1))

    with a1, a2 the alphas of ``new`` and ``old`` scaled to [0, 1].
    When both alphas are zero the denominator vanishes and TRANSPARENT is returned.
    """
    a1 = new[3] / 255
    a2 = old[3] / 255
    denom = a1 + a2 * (1 - a1)
    if denom == 0:
        return TRANSPARENT
    # keep the (o * a2) * (1 - a1) evaluation order; exact halves round on it
    return Color(*(_round((n * a1 + o * a2 * (1 - a1)) / denom) for n, o in zip(new, old)))


def put_pixel_with_composition(bitmap: Bitmap, point: Sequence[int], color: Color) -> None:
    """Blend ``color`` over the current pixel. Raises OutOfBounds outside the bitmap."""
    put_pixel(bitmap, point, composite_color(color, get_pixel(bitmap, point)))
