from __future__ import annotations
import argparse
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    # Canvas
    width: int
    height: int
    fill: int

    # Drawing
    lines: int
    anti_aliasing: bool

    # Destination PNG
    out_path: Path


def _byte(value: str) -> int:
    v = int(value)
    if not 0 <= v <= 255:
        raise argparse.ArgumentTypeError(f"expected a byte value 0-255, got {v}")
    return v


def _positive(value: str) -> int:
    v = int(value)
    if v <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {v}")
    return v


def parse_args(argv: list[str] | None = None) -> Config:
    p = argparse.ArgumentParser("pixeldraw-demo")

    canvas = p.add_argument_group("Canvas")
    canvas.add_argument("--w", "--width", dest="width", type=_positive, default=100)
    canvas.add_argument("--h", "--height", dest="height", type=_positive, default=100)
    canvas.add_argument("--fill", type=_byte, default=100, help="Byte written to every channel before drawing")

    draw = p.add_argument_group("Drawing")
    draw.add_argument("--lines", type=_positive, default=5, help="Lines per fan")
    draw.add_argument("--anti-aliasing", action="store_true", help="Draw with Wu anti-aliasing instead of Bresenham")

    out = p.add_argument_group("Output")
    out.add_argument("--out", dest="out_path", type=Path, default=Path("demo/out.png"))

    args = p.parse_args(argv)

    return Config(
        width=args.width,
        height=args.height,
        fill=args.fill,
        lines=args.lines,
        anti_aliasing=args.anti_aliasing,
        out_path=args.out_path,
    )
