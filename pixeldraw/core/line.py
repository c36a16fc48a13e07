from __future__ import annotations
import math
from enum import Enum
from typing import Callable, Dict, Sequence

from .bitmap import Bitmap
from .color import Color
from .compositor import put_pixel_with_composition
from .pixels import in_bounds, put_pixel


class LineMode(Enum):
    BRESENHAM = "bresenham"
    ANTI_ALIASED = "anti_aliased"


def _draw_line_bresenham(bitmap: Bitmap, p1: Sequence[int], p2: Sequence[int],
                         color: Color, width: int) -> None:
    """Integer Bresenham, one pixel wide (``width`` is ignored).

    Walks the whole segment; pixels off the bitmap are clipped by put_pixel.
    """
    x1, y1 = p1
    x2, y2 = p2
    dx = abs(x1 - x2)
    dy = abs(y1 - y2)
    if dx > dy:
        if x1 > x2:
            x1, x2 = x2, x1
            y1, y2 = y2, y1
        sy = 1 if y2 > y1 else -1
        error = 0
        y = y1
        for x in range(x1, x2 + 1):
            put_pixel(bitmap, (x, y), color)
            error += 2 * dy
            if error > dx:
                error -= 2 * dx
                y += sy
    else:
        if y1 > y2:
            x1, x2 = x2, x1
            y1, y2 = y2, y1
        sx = 1 if x2 > x1 else -1
        error = 0
        x = x1
        for y in range(y1, y2 + 1):
            put_pixel(bitmap, (x, y), color)
            error += 2 * dx
            if error > dy:
                error -= 2 * dy
                x += sx


def _plot_coverage(bitmap: Bitmap, x: int, y: int, color: Color, coverage: float) -> None:
    if coverage <= 0 or not in_bounds(bitmap, (x, y)):
        return
    r, g, b, a = color
    put_pixel_with_composition(bitmap, (x, y), Color(r, g, b, a * coverage))


def _draw_line_wu(bitmap: Bitmap, p1: Sequence[int], p2: Sequence[int],
                  color: Color, width: int) -> None:
    """Xiaolin Wu's anti-aliased line, one pixel wide (``width`` is ignored).

    Each column (or row, for steep lines) splits coverage between the two pixels
    straddling the ideal line and blends them over the existing content.
    """
    x1, y1 = p1
    x2, y2 = p2
    steep = abs(y2 - y1) > abs(x2 - x1)
    if steep:
        x1, y1 = y1, x1
        x2, y2 = y2, x2
    if x1 > x2:
        x1, x2 = x2, x1
        y1, y2 = y2, y1

    dx = x2 - x1
    gradient = (y2 - y1) / dx if dx else 1.0

    for x in range(x1, x2 + 1):
        y = y1 + gradient * (x - x1)
        yi = math.floor(y)
        frac = y - yi
        if steep:
            _plot_coverage(bitmap, yi, x, color, 1 - frac)
            _plot_coverage(bitmap, yi + 1, x, color, frac)
        else:
            _plot_coverage(bitmap, x, yi, color, 1 - frac)
            _plot_coverage(bitmap, x, yi + 1, color, frac)


LINE_STRATEGIES: Dict[LineMode, Callable[..., None]] = {
    LineMode.BRESENHAM: _draw_line_bresenham,
    LineMode.ANTI_ALIASED: _draw_line_wu,
}


def draw_line_mode(bitmap: Bitmap, p1: Sequence[int], p2: Sequence[int], color: Color,
                   mode: LineMode, width: int = 1) -> None:
    LINE_STRATEGIES[LineMode(mode)](bitmap, p1, p2, color, width)


def draw_line(bitmap: Bitmap, p1: Sequence[int], p2: Sequence[int], color: Color,
              width: int = 1, anti_aliasing: bool = True) -> None:
    """Draw the segment p1-p2 inclusive of both endpoints.

    ``anti_aliasing`` selects Wu blending over Bresenham. ``width`` is accepted
    for API stability; both strategies stroke a single pixel.
    """
    mode = LineMode.ANTI_ALIASED if anti_aliasing else LineMode.BRESENHAM
    draw_line_mode(bitmap, p1, p2, color, mode, width)
