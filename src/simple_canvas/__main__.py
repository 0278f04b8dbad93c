"""Command entrypoint for the simple_canvas package."""

from __future__ import annotations

import argparse
import logging

from simple_canvas.app import SimpleCanvas
from simple_canvas.config import CanvasConfig, CanvasConfigError
from simple_canvas.demos import DEMOS, bounce, rings
from simple_canvas.ui.constants import DEFAULT_HEIGHT, DEFAULT_TITLE, DEFAULT_WIDTH
from simple_canvas.ui.display import TkDisplay


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SimpleCanvas demo launcher")
    parser.add_argument("--demo", choices=sorted(DEMOS), default="shapes", help="Scene to draw.")
    parser.add_argument("--title", default=DEFAULT_TITLE, help="Window title.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Canvas width in pixels.")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Canvas height in pixels.")
    parser.add_argument("--background", default="white", help="Color name or #rrggbb.")
    parser.add_argument(
        "--manual",
        action="store_true",
        help="Start in manual repaint mode; every scene calls repaint once per frame.",
    )
    parser.add_argument("--frames", type=int, default=200, help="Frame count for animated demos.")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level name.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = CanvasConfig.build(
            title=args.title,
            width=args.width,
            height=args.height,
            background=args.background,
        )
    except CanvasConfigError as exc:
        logging.getLogger(__name__).error("%s", exc)
        return 2

    display = TkDisplay()
    canvas = SimpleCanvas.from_config(config, display=display)
    if args.manual:
        canvas.set_auto_repaint(False)

    demo = DEMOS[args.demo]
    if demo in (bounce, rings):
        demo(canvas, frames=args.frames)
    else:
        demo(canvas)

    # Keep the process alive until the user closes the window.
    display.join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
