from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rasterkit.core import (
    BLUE,
    GREEN,
    RED,
    WHITE,
    Canvas,
    Circle,
    ExportError,
    Line,
    Rectangle,
    Triangle,
)


LOGGER = logging.getLogger("rasterkit")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rasterkit")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Draw the demo scene and save it as a P6 PPM.")
    demo.add_argument("output", type=Path)
    demo.add_argument("--width", type=int, default=64)
    demo.add_argument("--height", type=int, default=64)
    demo.add_argument(
        "--background",
        type=lambda s: int(s, 0),
        default=0,
        help="Packed background color, (blue << 16) | (green << 8) | red. Accepts 0x prefixes.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "demo":
        if args.width <= 0 or args.height <= 0:
            parser.error("--width and --height must be > 0")
        canvas = draw_demo(args.width, args.height, args.background)
        try:
            canvas.save_as_ppm(args.output)
        except ExportError as exc:
            LOGGER.error("demo export failed: %s", exc)
            return 1
        print(f"saved {canvas.width}x{canvas.height} ppm to {args.output}")
        return 0

    raise RuntimeError(f"unsupported command: {args.command}")


def draw_demo(width: int, height: int, background: int = 0) -> Canvas:
    canvas = Canvas(width, height, background=background)
    canvas.rect_fill(Rectangle(0, 0, width // 2, height // 2, RED, center=True))
    canvas.circle_fill(Circle(0, 0, min(width, height) // 6, GREEN, center=True))
    canvas.triangle_fill(Triangle(width // 2, 0, 0, height - 1, width - 1, height - 1, BLUE))
    canvas.line_draw(Line(0, 0, 0, height - 1, WHITE, center=True, vertical=True))
    canvas.line_draw(Line(0, 0, width - 1, 0, WHITE, center=True, horizontal=True))
    return canvas


if __name__ == "__main__":
    raise SystemExit(main())
