from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pixelplot.config import PlotConfig, load_config
from pixelplot.controls import HELP_TEXT, build_controls, parse_coordinate, run_session
from pixelplot.errors import InvalidPoint, PixelPlotError
from pixelplot.model import PlotModel
from pixelplot.present import FramePublisher, PngTarget


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pixelplot")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level name.")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Plot a fixed list of points into a PNG.")
    render.add_argument("--point", action="append", default=[], metavar="X,Y", help="Data point; repeat in order.")
    render.add_argument("--out", type=Path, required=True)
    _add_config_args(render)

    interactive = sub.add_parser("interactive", help="Read add/remove/clear commands from stdin.")
    interactive.add_argument("--out", type=Path, default=None, help="PNG refreshed after every command.")
    _add_config_args(interactive)

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    try:
        config = _resolve_config(args.config, args.width, args.height)
        model = PlotModel.from_config(config)

        if args.command == "render":
            for raw in args.point:
                x, y = _parse_point_arg(raw)
                model.add_point(x, y)
            publisher = FramePublisher(model, PngTarget(args.out), origin=config.origin)
            try:
                frame = publisher.publish()
            finally:
                publisher.stop()
            print(f"render complete: points={len(model)} size={frame.width}x{frame.height} out={args.out}")
            return 0

        if args.command == "interactive":
            controls = build_controls(model, str(args.out) if args.out else None, config.origin)
            controls.start()
            print(HELP_TEXT)
            try:
                run_session(controls, sys.stdin, sys.stdout)
            finally:
                controls.stop()
            return 0
    except PixelPlotError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    raise RuntimeError(f"unsupported command: {args.command}")


def _add_config_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=Path, default=None, help="TOML file with a [plot] table.")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)


def _resolve_config(path: Path | None, width: int | None, height: int | None) -> PlotConfig:
    config = load_config(path) if path is not None else PlotConfig()
    return config.with_size(width=width, height=height)


def _parse_point_arg(raw: str) -> tuple[float, float]:
    parts = raw.split(",")
    if len(parts) != 2:
        raise InvalidPoint(f"point must look like X,Y: {raw!r}")
    return parse_coordinate(parts[0]), parse_coordinate(parts[1])


if __name__ == "__main__":
    raise SystemExit(main())
