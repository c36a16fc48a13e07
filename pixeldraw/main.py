from __future__ import annotations
import sys
from typing import Optional

from pixeldraw.config import Config, parse_args
from pixeldraw.core.bitmap import Bitmap, create_bitmap, fill
from pixeldraw.core.color import rgb, rgba
from pixeldraw.core.line import draw_line
from pixeldraw.core.point import Point
from pixeldraw.output.png_writer import write_png


def render(cfg: Config) -> Bitmap:
    """Two fans of lines over a flat background, scaled to the canvas size."""
    im = create_bitmap(cfg.width, cfg.height)
    fill(im, rgba(cfg.fill, cfg.fill, cfg.fill, cfg.fill))

    sx = cfg.width / 100
    sy = cfg.height / 100

    def pt(x: float, y: float) -> Point:
        return Point(int(x * sx), int(y * sy))

    step = 10
    shade = 100 / max(1, cfg.lines)
    for i in range(cfg.lines):
        level = int(100 + i * shade)
        draw_line(im, pt(10, 30), pt(90, 10 + i * step), rgb(level, 0, 0), 1, cfg.anti_aliasing)
    for i in range(cfg.lines):
        level = int(100 + i * shade)
        draw_line(im, pt(30, 10), pt(10 + i * step, 90), rgba(0, 0, level, 255), 1, cfg.anti_aliasing)
    return im


def main(argv: Optional[list[str]] = None) -> int:
    cfg = parse_args(argv)
    im = render(cfg)
    try:
        path = write_png(im, cfg.out_path)
    except OSError as e:
        print(f"[pixeldraw] write failed: {e!r}", file=sys.stderr, flush=True)
        return 1
    mode = "anti-aliased" if cfg.anti_aliasing else "bresenham"
    print(f"[pixeldraw] wrote {im.width}x{im.height} {mode} demo to {path}", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
