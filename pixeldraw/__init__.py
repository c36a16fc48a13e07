"""Minimal in-memory RGBA bitmap with pixel access, source-over compositing,
line rasterization and PNG export."""
from pixeldraw.errors import InvalidDimension, OutOfBounds, PixelDrawError
from pixeldraw.core.bitmap import Bitmap, create_bitmap, fill
from pixeldraw.core.color import TRANSPARENT, Color, clamp_channel, rgb, rgba
from pixeldraw.core.compositor import composite_color, put_pixel_with_composition
from pixeldraw.core.line import LineMode, draw_line, draw_line_mode
from pixeldraw.core.pixels import get_pixel, in_bounds, put_pixel
from pixeldraw.core.point import Point
from pixeldraw.core.rect import clear_rect
from pixeldraw.renderer.pillow_renderer import export_as_png, to_image
from pixeldraw.output.png_writer import write_png

__all__ = [
    "Bitmap", "Color", "Point", "LineMode", "TRANSPARENT",
    "create_bitmap", "fill", "rgb", "rgba", "clamp_channel",
    "put_pixel", "get_pixel", "in_bounds",
    "composite_color", "put_pixel_with_composition",
    "clear_rect", "draw_line", "draw_line_mode",
    "to_image", "export_as_png", "write_png",
    "PixelDrawError", "InvalidDimension", "OutOfBounds",
]
