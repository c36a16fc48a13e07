from __future__ import annotations
import operator
from typing import Tuple

import numpy as np

from pixeldraw.errors import InvalidDimension
from .color import Color, clamp_channel

CHANNELS = 4  # R, G, B, A


class Bitmap:
    """Fixed-size RGBA raster stored as one flat, row-major bytearray.

    ``data`` always holds ``width * height * 4`` bytes, channel order R,G,B,A,
    rows top-to-bottom. Every drawing operation mutates ``data`` in place.

    There is no internal locking: callers sharing a bitmap between threads must
    serialize access themselves.
    """

    def __init__(self, width: int, height: int):
        dims = []
        for v in (width, height):
            if isinstance(v, bool):
                raise InvalidDimension(width, height)
            try:
                n = operator.index(v)
            except TypeError:
                raise InvalidDimension(width, height) from None
            if n <= 0:
                raise InvalidDimension(width, height)
            dims.append(n)
        self.width, self.height = dims
        self.data = bytearray(self.width * self.height * CHANNELS)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def offset(self, x: int, y: int) -> int:
        return (x + y * self.width) * CHANNELS

    def to_bytes(self) -> bytes:
        """Snapshot of the raw RGBA buffer."""
        return bytes(self.data)

    def to_ndarray(self) -> np.ndarray:
        """Zero-copy (height, width, 4) uint8 view; writes through to the bitmap."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, CHANNELS)

    def __repr__(self) -> str:
        return f"Bitmap(width={self.width}, height={self.height})"


def create_bitmap(width: int, height: int) -> Bitmap:
    """Allocate a width x height bitmap with every pixel transparent black."""
    return Bitmap(width, height)


def fill(bitmap: Bitmap, color: Color) -> None:
    """Overwrite every pixel with ``color``."""
    px = bytes(clamp_channel(c) for c in color)
    bitmap.data[:] = px * (bitmap.width * bitmap.height)
