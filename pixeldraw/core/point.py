from __future__ import annotations
from typing import NamedTuple


class Point(NamedTuple):
    """Integer pixel coordinate. May lie outside any bitmap."""
    x: int
    y: int


ORIGIN = Point(0, 0)
