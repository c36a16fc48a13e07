# pixeldraw/output/png_writer.py
from __future__ import annotations

import shutil
from pathlib import Path
from typing import BinaryIO, Union

from pixeldraw.core.bitmap import Bitmap
from pixeldraw.renderer.pillow_renderer import export_as_png

Destination = Union[str, Path, BinaryIO]


def write_png(bitmap: Bitmap, dest: Destination) -> Destination:
    """Write the bitmap as PNG to a path (parents created) or a writable binary stream."""
    stream = export_as_png(bitmap)
    if isinstance(dest, (str, Path)):
        path = Path(dest)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as fh:
            shutil.copyfileobj(stream, fh)
        return path
    shutil.copyfileobj(stream, dest)
    return dest
