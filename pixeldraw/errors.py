from __future__ import annotations


class PixelDrawError(Exception):
    """Base class for errors raised by pixeldraw."""


class InvalidDimension(PixelDrawError, ValueError):
    def __init__(self, width, height):
        super().__init__(f"bitmap dimensions must be positive integers, got {width!r}x{height!r}")
        self.width = width
        self.height = height


class OutOfBounds(PixelDrawError, IndexError):
    """Raised when reading a pixel outside [0, width) x [0, height)."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"point ({x}, {y}) is out of bounds for {width}x{height} bitmap")
        self.x, self.y = x, y
        self.width, self.height = width, height
