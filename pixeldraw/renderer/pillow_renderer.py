from __future__ import annotations
import io

from PIL import Image

from pixeldraw.core.bitmap import Bitmap


def to_image(bitmap: Bitmap) -> Image.Image:
    """Copy the raw RGBA buffer into a new Pillow image."""
    return Image.frombytes("RGBA", bitmap.size, bitmap.to_bytes())


def export_as_png(bitmap: Bitmap) -> io.BytesIO:
    """Encode the bitmap as PNG and return a readable stream positioned at the start."""
    buf = io.BytesIO()
    to_image(bitmap).save(buf, format="PNG")
    buf.seek(0)
    return buf
